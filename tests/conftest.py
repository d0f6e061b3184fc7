"""Shared test fixtures."""

import pytest

# Header block as read from a sensor: stored CRC 3A CF, then 22 data bytes
HEADER_HEX = "3ACF" + "10160300" + "00" * 18

# Body with all data bytes zero: 294 bytes, CRC 62 C2
BODY_HEX = "62C2" + "00" * 294

# Footer with all data bytes zero: 22 bytes, CRC B4 9F
FOOTER_HEX = "B49F" + "00" * 22


@pytest.fixture
def memory() -> bytes:
    """Complete 344-byte memory dump with valid CRCs in every section."""
    return bytes.fromhex(HEADER_HEX + BODY_HEX + FOOTER_HEX)


@pytest.fixture
def corrupted_memory(memory: bytes) -> bytes:
    """Memory dump with one data byte of the body flipped."""
    data = bytearray(memory)
    data[100] ^= 0x01
    return bytes(data)


@pytest.fixture
def header_hex() -> str:
    """Header section as an uppercase hex string."""
    return HEADER_HEX


@pytest.fixture
def memory_hex() -> str:
    """Complete memory dump as an uppercase hex string."""
    return HEADER_HEX + BODY_HEX + FOOTER_HEX
