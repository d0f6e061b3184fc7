"""Data models for Libre sensor readings."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Measurement(BaseModel):
    """One glucose reading decoded from a raw two-byte record."""

    raw_bytes: tuple[int, int] = Field(..., description="Raw data bytes as read from the sensor")
    byte_string: str = Field(..., description="Raw data bytes as uppercase hex")
    raw_value: int = Field(..., ge=0, le=0x0FFF, description="12-bit raw value")
    slope: float = Field(0.1, description="Slope in (mg/dl)/raw")
    offset: float = Field(0.0, description="Offset in mg/dl")
    glucose: float = Field(..., description="Calibrated glucose value in mg/dl")
    timestamp: datetime = Field(default_factory=datetime.now, description="Time of the measurement")

    @field_validator("raw_bytes")
    @classmethod
    def validate_raw_bytes(cls, v: tuple[int, int]) -> tuple[int, int]:
        """Ensure both raw bytes are in 0-255."""
        for byte in v:
            if not 0 <= byte <= 0xFF:
                raise ValueError(f"Byte value out of range: {byte}")
        return v

    @property
    def description(self) -> str:
        return (
            f"Glucose: {self.glucose} (mg/dl), date: {self.timestamp}, slope: {self.slope}, "
            f"offset: {self.offset}, raw value: {self.raw_value}, bytes: {self.byte_string}"
        )

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "raw_bytes": [0x5A, 0x04],
                "byte_string": "5A04",
                "raw_value": 1114,
                "slope": 0.1,
                "offset": 0.0,
                "glucose": 111.4,
                "timestamp": "2016-06-05T10:30:00",
            }
        },
    )


class SectionCheck(BaseModel):
    """Result of verifying the stored CRC of one memory section."""

    section: str = Field(..., min_length=1, description="Section name")
    stored_crc: int = Field(..., ge=0, le=0xFFFF, description="CRC stored in the section")
    computed_crc: int = Field(..., ge=0, le=0xFFFF, description="CRC computed over the section data")
    unswapped_crc: int = Field(..., ge=0, le=0xFFFF, description="Computed CRC before the byte swap (diagnostic)")

    @property
    def valid(self) -> bool:
        """Whether the stored and computed CRC match."""
        return self.stored_crc == self.computed_crc

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "section": "HEADER",
                "stored_crc": 0x3ACF,
                "computed_crc": 0x3ACF,
                "unswapped_crc": 0xCF3A,
            }
        },
    )
