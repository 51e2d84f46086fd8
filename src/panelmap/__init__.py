"""panelmap: pixel coordinate remapping for chained LED panel matrices."""

__version__ = "0.1.0"

from .surfaces import MemorySurface, RecordingSurface, Surface
from .transformers import (
    LargeSquare64x64Transformer,
    LinkedTransformer,
    RotateTransformer,
    Snake8x2Transformer,
    UArrangementTransformer,
)

__all__ = [
    "LargeSquare64x64Transformer",
    "LinkedTransformer",
    "MemorySurface",
    "RecordingSurface",
    "RotateTransformer",
    "Snake8x2Transformer",
    "Surface",
    "UArrangementTransformer",
]
