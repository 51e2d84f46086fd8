"""Drawing surfaces: the shared protocol and in-memory implementations."""

from .memory import MemorySurface, RecordingSurface
from .protocols import Surface, Transformer

__all__ = [
    "MemorySurface",
    "RecordingSurface",
    "Surface",
    "Transformer",
]
