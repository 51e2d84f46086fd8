"""Enumerations for panelmap."""

from enum import Enum


class TransformKind(str, Enum):
    """Geometry families a transform stage can be built from."""

    ROTATE = "rotate"  # Rotate by a multiple of 90 degrees
    U_ARRANGEMENT = "u_arrangement"  # Chain folded in half into a U
    LARGE_SQUARE_64X64 = "large_square_64x64"  # Legacy U-fold plus 180 rotation
    SNAKE_8X2 = "snake_8x2"  # 8-row scan panels split in two strips
