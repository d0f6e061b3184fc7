"""Glucose measurement decoding from raw sensor records."""

from collections.abc import Sequence
from datetime import datetime

from libre_sensor.core.models import Measurement
from libre_sensor.protocol.codec import bytes_to_hex
from libre_sensor.protocol.constants import DEFAULT_OFFSET, DEFAULT_SLOPE, RAW_VALUE_MASK


def decode_raw_value(pair: Sequence[int]) -> int:
    """
    Extract the 12-bit raw value from a two-byte record.

    The low nibble of the second byte becomes the high nibble of the value,
    the first byte its low eight bits. The mask applies to the shifted
    second byte before the first byte is added.

    Example:
        >>> decode_raw_value((0xFF, 0x1F))
        4095
    """
    return ((pair[1] << 8) & RAW_VALUE_MASK) + pair[0]


def decode_measurement(
    pair: Sequence[int],
    slope: float = DEFAULT_SLOPE,
    offset: float = DEFAULT_OFFSET,
    timestamp: datetime | None = None,
) -> Measurement:
    """
    Decode a two-byte record into a calibrated glucose measurement.

    glucose = offset + slope * raw_value

    Args:
        pair: Raw data bytes as read from the sensor
        slope: Slope in (mg/dl)/raw
        offset: Offset in mg/dl
        timestamp: Time of the measurement (defaults to now)

    Returns:
        Immutable Measurement

    Raises:
        ValueError: If pair is not exactly two bytes
    """
    if len(pair) != 2:
        raise ValueError(f"Measurement record must be 2 bytes, got {len(pair)}")

    raw_value = decode_raw_value(pair)
    return Measurement(
        raw_bytes=(pair[0], pair[1]),
        byte_string=bytes_to_hex(bytes(pair)),
        raw_value=raw_value,
        slope=slope,
        offset=offset,
        glucose=offset + slope * raw_value,
        timestamp=timestamp if timestamp is not None else datetime.now(),
    )
