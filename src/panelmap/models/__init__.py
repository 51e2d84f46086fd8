"""Data models for panelmap."""

from .color import Color
from .config import DEFAULT_CONFIG_PATH, MatrixConfig, TransformSpec
from .enums import TransformKind

__all__ = [
    # Models
    "Color",
    "DEFAULT_CONFIG_PATH",
    "MatrixConfig",
    # Enums
    "TransformKind",
    "TransformSpec",
]
