"""Coordinate remapping stages.

Each stage owns one remapping surface. ``bind(inner)`` points that surface
at the inner drawing surface and returns it; drawing on the result writes
to the inner surface at the remapped coordinates. Stages compose through
LinkedTransformer.
"""

from .base import RemapSurface
from .linked import LinkedTransformer
from .presets import LargeSquare64x64Transformer
from .registry import build_pipeline, build_transformer, parse_transform, register_transformer
from .rotate import RotateSurface, RotateTransformer, normalize_angle
from .snake import Snake8x2Surface, Snake8x2Transformer
from .u_arrangement import UArrangementSurface, UArrangementTransformer

__all__ = [
    "LargeSquare64x64Transformer",
    "LinkedTransformer",
    "RemapSurface",
    "RotateSurface",
    "RotateTransformer",
    "Snake8x2Surface",
    "Snake8x2Transformer",
    "UArrangementSurface",
    "UArrangementTransformer",
    "build_pipeline",
    "build_transformer",
    "normalize_angle",
    "parse_transform",
    "register_transformer",
]
