"""Shared plumbing for remapping surfaces."""

from typing import Optional

from panelmap.exceptions import UnboundSurfaceError
from panelmap.surfaces.protocols import Surface


class RemapSurface:
    """
    Surface that forwards every call to an inner surface.

    Subclasses implement width(), height() and set_pixel() with their
    coordinate arithmetic. clear() and fill() touch every pixel regardless of
    layout, so they are forwarded unchanged.

    The inner surface is borrowed, not owned: whoever created it keeps it
    alive. Until set_delegatee() has been called, any drawing or size query
    raises UnboundSurfaceError.
    """

    def __init__(self):
        self._delegatee: Optional[Surface] = None

    @property
    def is_bound(self) -> bool:
        return self._delegatee is not None

    def set_delegatee(self, delegatee: Surface) -> None:
        """Point at a new inner surface, replacing any previous one."""
        self._delegatee = delegatee

    def release(self) -> None:
        """Drop the inner surface reference."""
        self._delegatee = None

    def _inner(self, operation: str) -> Surface:
        if self._delegatee is None:
            raise UnboundSurfaceError(type(self).__name__, operation)
        return self._delegatee

    def clear(self) -> None:
        self._inner("clear").clear()

    def fill(self, red: int, green: int, blue: int) -> None:
        self._inner("fill").fill(red, green, blue)
