"""Unit tests for configuration module."""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from libre_sensor.core.config import Settings, setup_logging


class TestSettings:
    """Tests for Settings class."""

    def test_default_values(self):
        """Test settings have sensible defaults."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings()

        assert settings.log_level == "INFO"
        assert settings.crc_seed == 0xFFFF
        assert settings.chunk_size == 256
        assert settings.slope == 0.1
        assert settings.offset == 0.0

    def test_env_override_crc_seed(self):
        """Test CRC seed override from environment."""
        with patch.dict(os.environ, {"LIBRE_CRC_SEED": "0"}):
            settings = Settings()

        assert settings.crc_seed == 0

    def test_env_override_calibration(self):
        """Test slope and offset override from environment."""
        with patch.dict(os.environ, {"LIBRE_SLOPE": "0.125", "LIBRE_OFFSET": "-20.5"}):
            settings = Settings()

        assert settings.slope == 0.125
        assert settings.offset == -20.5

    def test_env_override_log_level(self):
        """Test log level override from environment."""
        with patch.dict(os.environ, {"LIBRE_LOG_LEVEL": "DEBUG"}):
            settings = Settings()

        assert settings.log_level == "DEBUG"

    def test_env_override_chunk_size(self):
        """Test chunk size override from environment."""
        with patch.dict(os.environ, {"LIBRE_CHUNK_SIZE": "8"}):
            settings = Settings()

        assert settings.chunk_size == 8

    def test_seed_out_of_range(self):
        """Test seed above 16 bits fails validation."""
        with patch.dict(os.environ, {"LIBRE_CRC_SEED": "65536"}):
            with pytest.raises(ValidationError):
                Settings()

    def test_chunk_size_zero(self):
        """Test chunk size below one fails validation."""
        with pytest.raises(ValidationError):
            Settings(chunk_size=0)

    def test_env_prefix(self):
        """Test that non-prefixed env vars are ignored."""
        with patch.dict(os.environ, {"CRC_SEED": "0"}, clear=True):
            settings = Settings()

        assert settings.crc_seed == 0xFFFF


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_setup_logging_info(self):
        """Test setting up INFO logging."""
        setup_logging("INFO")

    def test_setup_logging_debug(self):
        """Test setting up DEBUG logging."""
        setup_logging("DEBUG")

    def test_setup_logging_case_insensitive(self):
        """Test log level is case insensitive."""
        setup_logging("debug")

    def test_setup_logging_invalid_defaults_to_info(self):
        """Test invalid level defaults to INFO."""
        setup_logging("INVALID")
