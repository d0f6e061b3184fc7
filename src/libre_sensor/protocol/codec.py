"""Hex string encoding and decoding for sensor memory dumps."""

import string

_HEX_DIGITS = frozenset(string.hexdigits)


class FormatError(ValueError):
    """Hex string cannot be decoded into bytes."""

    def __init__(self, text: str, reason: str):
        self.text = text
        self.reason = reason
        super().__init__(f"Invalid hex string: {reason}")


def compact_hex(text: str) -> str:
    """
    Remove whitespace from a hex dump.

    Example:
        >>> compact_hex("10 16 03 00")
        '10160300'
    """
    return "".join(text.split())


def hex_to_bytes(text: str) -> bytes:
    """
    Decode a string of hex digit pairs into bytes.

    Every two characters form one byte. No separators are accepted; use
    compact_hex() first for space separated dumps.

    Args:
        text: Hex string with an even number of characters

    Returns:
        Decoded bytes

    Raises:
        FormatError: If length is odd or a character is not a hex digit

    Example:
        >>> hex_to_bytes("3ACF1016")
        b':\\xcf\\x10\\x16'
    """
    if len(text) % 2 != 0:
        raise FormatError(text, f"odd number of characters ({len(text)})")

    for position, char in enumerate(text):
        if char not in _HEX_DIGITS:
            raise FormatError(text, f"non-hex character {char!r} at position {position}")

    return bytes(int(text[i : i + 2], 16) for i in range(0, len(text), 2))


def bytes_to_hex(data: bytes) -> str:
    """
    Encode bytes as uppercase hex digit pairs without separators.

    Example:
        >>> bytes_to_hex(b"\\x3a\\xcf")
        '3ACF'
    """
    return "".join(f"{byte:02X}" for byte in data)
