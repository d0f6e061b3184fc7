"""Libre sensor memory protocol implementation."""

from libre_sensor.protocol.codec import FormatError, bytes_to_hex, compact_hex, hex_to_bytes
from libre_sensor.protocol.constants import BLOCK_SIZE, CRC_POLYNOMIAL, CRC_SEED, MemorySection
from libre_sensor.protocol.crc import (
    compute_crc,
    compute_crc_unswapped,
    default_table,
    generate_table,
    verify_crc16,
)
from libre_sensor.protocol.measurement import decode_measurement, decode_raw_value
from libre_sensor.protocol.memory import check_memory, check_section, read_stored_crc, section_bytes

__all__ = [
    "BLOCK_SIZE",
    "CRC_POLYNOMIAL",
    "CRC_SEED",
    "FormatError",
    "MemorySection",
    "bytes_to_hex",
    "check_memory",
    "check_section",
    "compact_hex",
    "compute_crc",
    "compute_crc_unswapped",
    "decode_measurement",
    "decode_raw_value",
    "default_table",
    "generate_table",
    "hex_to_bytes",
    "read_stored_crc",
    "section_bytes",
    "verify_crc16",
]
