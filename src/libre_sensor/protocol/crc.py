"""CRC-16 calculation for Libre sensor memory."""

from collections.abc import Iterable, Iterator, Sequence
from functools import lru_cache

from libre_sensor.protocol.constants import CHUNK_SIZE, CRC_POLYNOMIAL, CRC_SEED, CRC_TABLE_SIZE


def generate_table(polynomial: int = CRC_POLYNOMIAL) -> tuple[int, ...]:
    """
    Generate the 256-entry lookup table for a reversed CRC-16 polynomial.

    Each entry is the byte value shifted right eight times, XORing in the
    polynomial whenever a set bit falls off the low end.

    Args:
        polynomial: Reversed polynomial (0x8408 for CRC-CCITT)

    Returns:
        Tuple of 256 16-bit values

    Example:
        >>> table = generate_table()
        >>> table[1], table[128]
        (4489, 33800)
    """
    table = []
    for i in range(CRC_TABLE_SIZE):
        crc = i
        for _ in range(8):
            if crc & 1:
                crc = (crc >> 1) ^ polynomial
            else:
                crc = crc >> 1
        table.append(crc)
    return tuple(table)


@lru_cache(maxsize=1)
def default_table() -> tuple[int, ...]:
    """Return the CRC-CCITT (0x8408) table, generated on first use."""
    return generate_table(CRC_POLYNOMIAL)


def iter_chunks(data: bytes, chunk_size: int = CHUNK_SIZE) -> Iterator[bytes]:
    """Yield consecutive slices of at most chunk_size bytes."""
    if chunk_size < 1:
        raise ValueError(f"Chunk size must be positive, got {chunk_size}")
    for start in range(0, len(data), chunk_size):
        yield data[start : start + chunk_size]


def reverse_bits16(value: int) -> int:
    """Reverse the order of the 16 low bits (bit 0 becomes bit 15)."""
    result = 0
    for _ in range(16):
        result = (result << 1) | (value & 1)
        value >>= 1
    return result


def swap_bytes16(value: int) -> int:
    """Exchange the high and low byte of a 16-bit value."""
    return ((value & 0xFF) << 8) | ((value >> 8) & 0xFF)


def _accumulate(
    data: bytes | Iterable[int],
    seed: int,
    table: Sequence[int] | None,
    chunk_size: int,
) -> int:
    if table is None:
        table = default_table()
    crc = seed & 0xFFFF

    for chunk in iter_chunks(bytes(data), chunk_size):
        for byte in chunk:
            crc = (crc >> 8) ^ table[(crc ^ byte) & 0xFF]

    return crc


def compute_crc_unswapped(
    data: bytes | Iterable[int],
    seed: int = 0x0000,
    table: Sequence[int] | None = None,
    chunk_size: int = CHUNK_SIZE,
) -> int:
    """
    Calculate the bit-reversed CRC without the final byte swap.

    Diagnostic only: the value stored in sensor memory is the swapped one
    returned by compute_crc().

    Args:
        data: Bytes to calculate CRC over
        seed: Initial CRC value
        table: Lookup table (defaults to the CRC-CCITT table)
        chunk_size: Number of bytes consumed per chunk

    Returns:
        16-bit CRC value with its bits reversed
    """
    return reverse_bits16(_accumulate(data, seed, table, chunk_size))


def compute_crc(
    data: bytes | Iterable[int],
    seed: int = 0x0000,
    table: Sequence[int] | None = None,
    chunk_size: int = CHUNK_SIZE,
) -> int:
    """
    Calculate CRC-16 for Libre sensor memory.

    The running CRC is the table-driven reflected CCITT algorithm:
    - Each byte is XORed with the low byte of the CRC to index the table
    - The table entry is XORed with the CRC shifted right by eight
    - The final value has its 16 bits reversed and its two bytes swapped,
      which is the order the sensor stores it in

    Args:
        data: Bytes to calculate CRC over
        seed: Initial CRC value (the sensor uses 0xFFFF)
        table: Lookup table (defaults to the CRC-CCITT table)
        chunk_size: Number of bytes consumed per chunk

    Returns:
        16-bit CRC value

    Raises:
        ValueError: If chunk_size is less than 1

    Example:
        >>> hex(compute_crc(bytes(294), seed=0xFFFF))
        '0x62c2'
    """
    return swap_bytes16(compute_crc_unswapped(data, seed, table, chunk_size))


def verify_crc16(
    data: bytes | Iterable[int],
    expected_crc: int,
    seed: int = CRC_SEED,
    table: Sequence[int] | None = None,
) -> bool:
    """
    Verify CRC-16 matches expected value.

    Args:
        data: Data bytes (excluding CRC)
        expected_crc: CRC as stored in sensor memory (read big-endian)
        seed: Initial CRC value
        table: Lookup table (defaults to the CRC-CCITT table)

    Returns:
        True if CRC matches, False otherwise

    Example:
        >>> verify_crc16(bytes(294), 0x62C2)
        True
    """
    calculated = compute_crc(data, seed=seed, table=table)
    return calculated == expected_crc
