"""Snake layout for 32x16 panels driven with an 8-row scan.

These panels wire each logical 16-row band as two 8-row strips that sit
side by side in the chain, so the driver sees a surface twice as wide and
half as tall as the image:

- logical rows 0-7 of a band go to the first 32 columns of the panel's 64
- logical rows 8-15 go to the next 32 columns
- each further 32 logical columns move one panel (64 driver columns) along
"""

import logging

from panelmap.exceptions import NullSurfaceError
from panelmap.surfaces.protocols import Surface

from .base import RemapSurface

logger = logging.getLogger(__name__)

PANEL_COLUMNS = 32
STRIP_ROWS = 8


class Snake8x2Surface(RemapSurface):
    """Snake view of the inner surface. No bounds check, like rotation."""

    def width(self) -> int:
        return self._inner("width").width() // 2

    def height(self) -> int:
        return self._inner("height").height() * 2

    def set_pixel(self, x: int, y: int, red: int, green: int, blue: int) -> None:
        inner = self._inner("set_pixel")
        major_panel = x // PANEL_COLUMNS
        minor_panel = y // STRIP_ROWS
        x_vertical_offset = (minor_panel % 2) * PANEL_COLUMNS  # odd strips sit on the right
        x_horizontal_offset = major_panel * 2 * PANEL_COLUMNS
        new_x = x % PANEL_COLUMNS + x_horizontal_offset + x_vertical_offset
        new_y = y % STRIP_ROWS + (y // (2 * STRIP_ROWS)) * STRIP_ROWS
        inner.set_pixel(new_x, new_y, red, green, blue)


class Snake8x2Transformer:
    """Transform stage for the 8x2 snake layout."""

    def __init__(self):
        self._surface = Snake8x2Surface()

    def bind(self, surface: Surface) -> Snake8x2Surface:
        if surface is None:
            raise NullSurfaceError(type(self).__name__)
        self._surface.set_delegatee(surface)
        return self._surface

    def release(self) -> None:
        self._surface.release()
