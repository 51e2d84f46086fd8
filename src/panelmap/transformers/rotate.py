"""Rotation by multiples of 90 degrees."""

import logging

from panelmap.exceptions import InvalidAngleError, NullSurfaceError
from panelmap.surfaces.protocols import Surface

from .base import RemapSurface

logger = logging.getLogger(__name__)


def normalize_angle(angle: int) -> int:
    """
    Reduce an angle to one of 0, 90, 180, 270.

    Raises:
        InvalidAngleError: If angle is not a multiple of 90
    """
    if angle % 90 != 0:
        raise InvalidAngleError(angle)
    return (angle + 360) % 360


class RotateSurface(RemapSurface):
    """
    Rotated view of the inner surface.

    Coordinates are forwarded without a bounds check; the inner surface
    decides what to do with pixels outside its area.
    """

    def __init__(self, angle: int = 0):
        super().__init__()
        self._angle = normalize_angle(angle)

    @property
    def angle(self) -> int:
        return self._angle

    def set_angle(self, angle: int) -> None:
        """Change the rotation; takes effect on the next draw call."""
        self._angle = normalize_angle(angle)

    def width(self) -> int:
        inner = self._inner("width")
        return inner.width() if self._angle % 180 == 0 else inner.height()

    def height(self) -> int:
        inner = self._inner("height")
        return inner.height() if self._angle % 180 == 0 else inner.width()

    def set_pixel(self, x: int, y: int, red: int, green: int, blue: int) -> None:
        inner = self._inner("set_pixel")
        if self._angle == 0:
            inner.set_pixel(x, y, red, green, blue)
        elif self._angle == 90:
            inner.set_pixel(inner.width() - y - 1, x, red, green, blue)
        elif self._angle == 180:
            inner.set_pixel(inner.width() - x - 1, inner.height() - y - 1, red, green, blue)
        else:
            inner.set_pixel(y, inner.height() - x - 1, red, green, blue)


class RotateTransformer:
    """
    Transform stage rotating the image by 0, 90, 180 or 270 degrees.

    Example:
        ```python
        rotated = RotateTransformer(90).bind(panel)
        rotated.set_pixel(0, 0, 255, 0, 0)  # lands on panel(panel.width() - 1, 0)
        ```
    """

    def __init__(self, angle: int = 0):
        """
        Args:
            angle: Rotation in degrees, any multiple of 90

        Raises:
            InvalidAngleError: If angle is not a multiple of 90
        """
        self._surface = RotateSurface(angle)
        self._angle = angle

    @property
    def angle(self) -> int:
        """Angle as given by the caller (not normalized)."""
        return self._angle

    @angle.setter
    def angle(self, angle: int) -> None:
        self._surface.set_angle(angle)
        self._angle = angle

    def bind(self, surface: Surface) -> RotateSurface:
        if surface is None:
            raise NullSurfaceError(type(self).__name__)
        self._surface.set_delegatee(surface)
        logger.debug(f"Rotating {surface.width()}x{surface.height()} surface by {self._surface.angle}")
        return self._surface

    def release(self) -> None:
        self._surface.release()
