"""Core application functionality."""

from libre_sensor.core.config import Settings, setup_logging
from libre_sensor.core.models import Measurement, SectionCheck

# MemoryInspector imported lazily to avoid circular import with protocol
# (core.inspector -> protocol.measurement -> core.models -> core.__init__ -> core.inspector)


def __getattr__(name: str):
    if name == "MemoryInspector":
        from libre_sensor.core.inspector import MemoryInspector

        return MemoryInspector
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "Measurement",
    "MemoryInspector",
    "SectionCheck",
    "Settings",
    "setup_logging",
]
