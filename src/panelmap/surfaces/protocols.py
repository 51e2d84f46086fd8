"""Drawing surface protocol shared by real displays and remappers."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Surface(Protocol):
    """
    Addressable 2-D pixel target.

    A hardware display implements this, and so does every remapping
    surface in panelmap.transformers. Because both sides speak the same
    protocol, remappers can be stacked on top of each other freely.
    """

    def width(self) -> int:
        """Width in pixels."""
        ...

    def height(self) -> int:
        """Height in pixels."""
        ...

    def set_pixel(self, x: int, y: int, red: int, green: int, blue: int) -> None:
        """
        Set a single pixel.

        Args:
            x: Column, 0 at the left
            y: Row, 0 at the top
            red, green, blue: Channel values (0-255), passed through unchanged
        """
        ...

    def clear(self) -> None:
        """Turn every pixel off."""
        ...

    def fill(self, red: int, green: int, blue: int) -> None:
        """Set every pixel to the same color."""
        ...


class Transformer(Protocol):
    """A stage that wraps a surface in a remapped view of it."""

    def bind(self, surface: Surface) -> Surface:
        """
        Bind to the inner surface and return the surface to draw on.

        Calling bind again replaces the previous inner surface.
        """
        ...

    def release(self) -> None:
        """Forget the inner surface; bind must be called again before drawing."""
        ...
