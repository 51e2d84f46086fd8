"""In-memory drawing surfaces used in place of real panel hardware."""

import logging

import numpy as np

from panelmap.exceptions import SurfaceDimensionError
from panelmap.models import Color

logger = logging.getLogger(__name__)


class MemorySurface:
    """
    RGB framebuffer held in a numpy array.

    Stands in for the hardware display: same width/height/set_pixel/clear/fill
    surface, but pixels land in an array of shape (height, width, 3) instead
    of being shifted out to panels. Out-of-range writes are ignored, the same
    way the hardware framebuffer ignores them.
    """

    def __init__(self, width: int, height: int):
        """
        Initialize an all-black surface.

        Args:
            width: Width in pixels (>= 1)
            height: Height in pixels (>= 1)

        Raises:
            SurfaceDimensionError: If either dimension is not positive
        """
        if width < 1 or height < 1:
            raise SurfaceDimensionError(width, height)

        self._width = width
        self._height = height
        self._pixels = np.zeros((height, width, 3), dtype=np.uint8)

    def width(self) -> int:
        return self._width

    def height(self) -> int:
        return self._height

    def set_pixel(self, x: int, y: int, red: int, green: int, blue: int) -> None:
        if not (0 <= x < self._width and 0 <= y < self._height):
            return
        self._pixels[y, x] = (red, green, blue)

    def clear(self) -> None:
        self._pixels.fill(0)

    def fill(self, red: int, green: int, blue: int) -> None:
        self._pixels[:, :] = (red, green, blue)

    def get_pixel(self, x: int, y: int) -> Color:
        """
        Read back a pixel.

        Raises:
            IndexError: If (x, y) is outside the surface
        """
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(f"Pixel ({x}, {y}) outside {self._width}x{self._height} surface")
        r, g, b = (int(v) for v in self._pixels[y, x])
        return Color(r=r, g=g, b=b)

    def count_matching(self, color: Color) -> int:
        """Number of pixels currently set to exactly this color."""
        target = np.array(color.to_rgb_tuple(), dtype=np.uint8)
        return int(np.all(self._pixels == target, axis=2).sum())

    def to_array(self) -> np.ndarray:
        """Copy of the framebuffer, shape (height, width, 3)."""
        return self._pixels.copy()


class RecordingSurface:
    """
    Surface that remembers every call made on it.

    Used to trace where a logical pixel ends up after remapping, and as a
    test double. Unlike MemorySurface it records out-of-range writes too.
    """

    def __init__(self, width: int, height: int):
        if width < 1 or height < 1:
            raise SurfaceDimensionError(width, height)
        self._width = width
        self._height = height
        self.calls: list[tuple] = []

    def width(self) -> int:
        return self._width

    def height(self) -> int:
        return self._height

    def set_pixel(self, x: int, y: int, red: int, green: int, blue: int) -> None:
        self.calls.append(("set_pixel", x, y, red, green, blue))

    def clear(self) -> None:
        self.calls.append(("clear",))

    def fill(self, red: int, green: int, blue: int) -> None:
        self.calls.append(("fill", red, green, blue))

    @property
    def pixels(self) -> list[tuple[int, int]]:
        """(x, y) of every set_pixel call, in order."""
        return [(call[1], call[2]) for call in self.calls if call[0] == "set_pixel"]

    def reset(self) -> None:
        """Forget recorded calls."""
        self.calls.clear()
