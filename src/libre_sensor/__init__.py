"""CRC verification and glucose decoding for FreeStyle Libre sensor memory."""

__version__ = "0.1.0"
