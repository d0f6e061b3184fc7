"""Settings-driven verification and decoding of sensor memory dumps."""

import logging
from collections.abc import Iterable, Sequence
from datetime import datetime

from libre_sensor.core.config import Settings
from libre_sensor.core.models import Measurement, SectionCheck
from libre_sensor.protocol.codec import compact_hex, hex_to_bytes
from libre_sensor.protocol.constants import MemorySection
from libre_sensor.protocol.crc import compute_crc, default_table
from libre_sensor.protocol.measurement import decode_measurement
from libre_sensor.protocol.memory import check_memory

logger = logging.getLogger(__name__)


class MemoryInspector:
    """
    Checks sensor memory dumps and decodes readings.

    Seed, chunk size and calibration come from Settings; the CRC table is
    generated once and shared by every check.
    """

    def __init__(self, settings: Settings | None = None, table: Sequence[int] | None = None):
        """
        Initialize the inspector.

        Args:
            settings: Application settings (defaults loaded from environment)
            table: CRC lookup table (defaults to the CRC-CCITT table)
        """
        self.settings = settings or Settings()
        self.table = table if table is not None else default_table()

    def checksum(self, data: bytes) -> int:
        """CRC of data with the configured seed and chunk size."""
        return compute_crc(
            data,
            seed=self.settings.crc_seed,
            table=self.table,
            chunk_size=self.settings.chunk_size,
        )

    def check(
        self,
        memory: bytes,
        sections: Iterable[MemorySection] = tuple(MemorySection),
    ) -> list[SectionCheck]:
        """
        Verify the stored CRC of every section the dump covers.

        Mismatches are logged as warnings and returned; they are never raised.
        """
        results = check_memory(memory, sections, seed=self.settings.crc_seed, table=self.table)

        for result in results:
            if result.valid:
                logger.debug(f"{result.section} CRC OK (0x{result.computed_crc:04X})")
            else:
                logger.warning(
                    f"{result.section} CRC mismatch: stored 0x{result.stored_crc:04X}, "
                    f"computed 0x{result.computed_crc:04X}"
                )

        return results

    def check_hex(self, text: str) -> list[SectionCheck]:
        """Verify a dump given as hex text; whitespace between pairs is ignored.

        Raises:
            FormatError: If the text is not valid hex
        """
        return self.check(hex_to_bytes(compact_hex(text)))

    def is_valid(self, memory: bytes) -> bool:
        """True if the dump covers at least one section and every covered section matches."""
        results = self.check(memory)
        return bool(results) and all(result.valid for result in results)

    def measure(self, pair: Sequence[int], timestamp: datetime | None = None) -> Measurement:
        """Decode a two-byte record with the configured calibration."""
        measurement = decode_measurement(
            pair,
            slope=self.settings.slope,
            offset=self.settings.offset,
            timestamp=timestamp,
        )
        logger.debug(measurement.description)
        return measurement
