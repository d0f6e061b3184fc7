"""Checksum verification over Libre sensor memory sections."""

import logging
from collections.abc import Iterable, Sequence

from libre_sensor.core.models import SectionCheck
from libre_sensor.protocol.constants import CRC_LEN, CRC_SEED, MemorySection
from libre_sensor.protocol.crc import compute_crc, compute_crc_unswapped

logger = logging.getLogger(__name__)


def section_bytes(memory: bytes, section: MemorySection) -> bytes:
    """
    Slice one section out of a memory dump.

    Raises:
        ValueError: If the dump ends before the section does
    """
    if len(memory) < section.end:
        raise ValueError(
            f"Memory dump too short for {section.name}: {len(memory)} bytes, need {section.end}"
        )
    return memory[section.start : section.end]


def read_stored_crc(data: bytes) -> int:
    """Read the CRC stored in the first two bytes of a section (big-endian)."""
    if len(data) < CRC_LEN:
        raise ValueError(f"Need {CRC_LEN} bytes to read a CRC, got {len(data)}")
    return int.from_bytes(data[:CRC_LEN], "big")


def check_section(
    memory: bytes,
    section: MemorySection,
    seed: int = CRC_SEED,
    table: Sequence[int] | None = None,
) -> SectionCheck:
    """
    Compare the stored CRC of a section with the CRC of its data.

    The CRC covers the section without its two leading CRC bytes.

    Args:
        memory: Sensor memory dump starting at block 0x00
        section: Section to verify
        seed: Initial CRC value
        table: Lookup table (defaults to the CRC-CCITT table)

    Returns:
        SectionCheck with stored, computed and diagnostic CRC values
    """
    data = section_bytes(memory, section)
    payload = data[CRC_LEN:]

    result = SectionCheck(
        section=section.name,
        stored_crc=read_stored_crc(data),
        computed_crc=compute_crc(payload, seed=seed, table=table),
        unswapped_crc=compute_crc_unswapped(payload, seed=seed, table=table),
    )
    logger.debug(
        f"{section.name}: stored 0x{result.stored_crc:04X}, computed 0x{result.computed_crc:04X} "
        f"(unswapped 0x{result.unswapped_crc:04X})"
    )
    return result


def check_memory(
    memory: bytes,
    sections: Iterable[MemorySection] = tuple(MemorySection),
    seed: int = CRC_SEED,
    table: Sequence[int] | None = None,
) -> list[SectionCheck]:
    """
    Verify every section the dump fully covers.

    Sections that extend past the end of the dump are skipped, so a dump
    holding only the header and body yields two results.
    """
    results = []
    for section in sections:
        if len(memory) < section.end:
            logger.debug(f"Skipping {section.name}: dump ends at byte {len(memory)}")
            continue
        results.append(check_section(memory, section, seed=seed, table=table))
    return results
