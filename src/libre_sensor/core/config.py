"""Application configuration using pydantic-settings."""

import logging
import sys

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from libre_sensor.protocol.constants import CHUNK_SIZE, CRC_SEED, DEFAULT_OFFSET, DEFAULT_SLOPE


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    All settings can be overridden via environment variables
    prefixed with LIBRE_ (e.g., LIBRE_CRC_SEED).
    """

    log_level: str = "INFO"
    crc_seed: int = Field(CRC_SEED, ge=0, le=0xFFFF)
    chunk_size: int = Field(CHUNK_SIZE, ge=1)
    slope: float = DEFAULT_SLOPE
    offset: float = DEFAULT_OFFSET

    model_config = SettingsConfigDict(env_prefix="LIBRE_")


def setup_logging(level: str = "INFO") -> None:
    """Configure application logging.

    Args:
        level: Log level string (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )
