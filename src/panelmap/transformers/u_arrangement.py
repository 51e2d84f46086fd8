"""U-shaped panel arrangement.

A chain of panels is folded in half: the first half of the chain runs
right-to-left along the bottom of the U, the second half comes back
upside-down on top. The logical image is therefore twice as tall and half
as wide as the wired chain. With several chains driven in parallel, each
chain forms its own U and the Us are stacked vertically.

::

    wired chain (inner, 128x32, parallel=1)     logical image (64x64)
    ┌───────────────┬───────────────┐           ┌───────────────┐
    │   0..63       │   64..127     │           │ x + 64, y     │  y < 32
    └───────────────┴───────────────┘           ├───────────────┤
                                                │ mirrored      │  y >= 32
                                                └───────────────┘
"""

import logging

from panelmap.exceptions import NullSurfaceError, ParallelChainError
from panelmap.surfaces.protocols import Surface

from .base import RemapSurface

logger = logging.getLogger(__name__)

# The fold always happens at a 32px panel boundary, so one U needs 64px of chain.
FOLD_WIDTH = 64


class UArrangementSurface(RemapSurface):
    """
    Folded view of the inner surface.

    Sizes are derived when the inner surface is set. Pixels outside the
    logical area are dropped instead of being forwarded.
    """

    def __init__(self, parallel: int):
        super().__init__()
        self._parallel = parallel
        self._width = 0
        self._height = 0
        self._panel_height = 0

    @property
    def parallel(self) -> int:
        return self._parallel

    def set_delegatee(self, delegatee: Surface) -> None:
        inner_width = delegatee.width()
        inner_height = delegatee.height()

        if inner_width % FOLD_WIDTH != 0:
            logger.warning(
                f"An U-arrangement would need an even number of panels unless you can "
                f"fold one in the middle (inner width {inner_width} is not a multiple of "
                f"{FOLD_WIDTH})"
            )
        if inner_height % self._parallel != 0:
            raise ParallelChainError(self._parallel, inner_height)

        super().set_delegatee(delegatee)
        self._width = (inner_width // FOLD_WIDTH) * (FOLD_WIDTH // 2)
        self._height = 2 * inner_height
        self._panel_height = inner_height // self._parallel

    def width(self) -> int:
        self._inner("width")
        return self._width

    def height(self) -> int:
        self._inner("height")
        return self._height

    def set_pixel(self, x: int, y: int, red: int, green: int, blue: int) -> None:
        inner = self._inner("set_pixel")
        if x < 0 or x >= self._width or y < 0 or y >= self._height:
            return

        slab_height = 2 * self._panel_height  # one folded U
        base_y = (y // slab_height) * self._panel_height
        y %= slab_height
        if y < self._panel_height:
            x += inner.width() // 2
        else:
            x = self._width - x - 1
            y = slab_height - y - 1
        inner.set_pixel(x, base_y + y, red, green, blue)


class UArrangementTransformer:
    """
    Transform stage folding a panel chain into a U.

    Example:
        ```python
        # 4 panels of 32x32 in one chain -> 64x64 square
        square = UArrangementTransformer(parallel=1).bind(chain_128x32)
        ```
    """

    def __init__(self, parallel: int = 1):
        """
        Args:
            parallel: Number of chains driven in parallel (>= 1)

        Raises:
            ParallelChainError: If parallel is not positive
        """
        if parallel <= 0:
            raise ParallelChainError(parallel)
        self._surface = UArrangementSurface(parallel)

    @property
    def parallel(self) -> int:
        return self._surface.parallel

    def bind(self, surface: Surface) -> UArrangementSurface:
        """
        Raises:
            NullSurfaceError: If surface is None
            ParallelChainError: If the surface height is not divisible by parallel
        """
        if surface is None:
            raise NullSurfaceError(type(self).__name__)
        self._surface.set_delegatee(surface)
        logger.debug(
            f"U-arrangement of {surface.width()}x{surface.height()} -> "
            f"{self._surface.width()}x{self._surface.height()}"
        )
        return self._surface

    def release(self) -> None:
        self._surface.release()
