"""Protocol constants for Libre sensor memory."""

from enum import Enum

# ============================================================================
# CRC
# ============================================================================

CRC_POLYNOMIAL = 0x8408  # x^16 + x^12 + x^5 + 1, reversed (CRC-CCITT)
CRC_SEED = 0xFFFF  # Initial value used by the sensor
CRC_LEN = 2  # Stored CRC bytes at the start of each section
CRC_TABLE_SIZE = 256
CHUNK_SIZE = 256

# ============================================================================
# Memory Layout
# ============================================================================

BLOCK_SIZE = 8  # Bytes per memory block


class MemorySection(Enum):
    """Checksummed sections of sensor memory as (first block, block count)."""

    HEADER = (0x00, 3)
    BODY = (0x03, 37)
    FOOTER = (0x28, 3)

    @property
    def first_block(self) -> int:
        return self.value[0]

    @property
    def block_count(self) -> int:
        return self.value[1]

    @property
    def start(self) -> int:
        """Byte offset of the section, including its CRC."""
        return self.first_block * BLOCK_SIZE

    @property
    def end(self) -> int:
        """Byte offset one past the last byte of the section."""
        return self.start + self.block_count * BLOCK_SIZE


MEMORY_SIZE = MemorySection.FOOTER.end  # 344 bytes

# ============================================================================
# Measurement
# ============================================================================

RAW_VALUE_MASK = 0x0F00  # High nibble of the 12-bit raw value
DEFAULT_SLOPE = 0.1  # (mg/dl) per raw unit
DEFAULT_OFFSET = 0.0  # mg/dl
