"""Walk logical pixels through a pipeline to check a panel mapping.

The usual way to find out whether a mapping is right is to light pixels one
at a time on the real panel and watch where they appear. These helpers do
the same walk against an in-memory panel, so the result can be checked
without hardware.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Optional

from panelmap.models import Color
from panelmap.surfaces import MemorySurface, RecordingSurface
from panelmap.surfaces.protocols import Surface, Transformer

logger = logging.getLogger(__name__)


@dataclass
class MappingReport:
    """Outcome of walking every logical pixel onto a physical surface."""

    logical_width: int
    logical_height: int
    physical_width: int
    physical_height: int
    written: int  # logical pixels written
    lit: int  # physical pixels carrying the walk color afterwards

    @property
    def logical_pixels(self) -> int:
        return self.logical_width * self.logical_height

    @property
    def physical_pixels(self) -> int:
        return self.physical_width * self.physical_height

    @property
    def unlit(self) -> int:
        """Physical pixels no logical pixel reached."""
        return self.physical_pixels - self.lit

    @property
    def is_complete(self) -> bool:
        """Every physical pixel was reached, by exactly one logical pixel."""
        return self.lit == self.physical_pixels == self.written

    def summary(self) -> str:
        return (
            f"logical {self.logical_width}x{self.logical_height} -> "
            f"physical {self.physical_width}x{self.physical_height}: "
            f"{self.lit}/{self.physical_pixels} physical pixels lit "
            f"by {self.written} writes"
        )


def walk_pixels(
    outer: Surface,
    physical: MemorySurface,
    color: Color,
    on_pixel: Optional[Callable[[int, int], None]] = None,
) -> MappingReport:
    """
    Write color to every logical pixel of outer, row by row.

    Args:
        outer: Outermost surface returned by a pipeline bind
        physical: In-memory surface at the bottom of that pipeline
        color: Color to write; no physical pixel may hold it yet
        on_pixel: Called with (x, y) before each write

    Returns:
        MappingReport describing how physical was covered

    Raises:
        ValueError: If physical already has pixels of this color
    """
    already_lit = physical.count_matching(color)
    if already_lit:
        raise ValueError(
            f"{already_lit} physical pixel(s) already hold {color.to_hex()}; "
            "clear the surface or walk with another color"
        )

    width, height = outer.width(), outer.height()
    r, g, b = color.to_rgb_tuple()

    written = 0
    for y in range(height):
        for x in range(width):
            if on_pixel is not None:
                on_pixel(x, y)
            outer.set_pixel(x, y, r, g, b)
            written += 1

    report = MappingReport(
        logical_width=width,
        logical_height=height,
        physical_width=physical.width(),
        physical_height=physical.height(),
        written=written,
        lit=physical.count_matching(color),
    )
    logger.info(report.summary())
    return report


def trace_pixel(
    transformer: Transformer, inner_width: int, inner_height: int, x: int, y: int
) -> Optional[tuple[int, int]]:
    """
    Find the physical coordinate a logical pixel is written to.

    Args:
        transformer: Stage or pipeline to trace through
        inner_width, inner_height: Size of the physical surface
        x, y: Logical coordinate

    Returns:
        (x, y) on the physical surface, or None if the write was dropped
    """
    probe = RecordingSurface(inner_width, inner_height)
    outer = transformer.bind(probe)
    outer.set_pixel(x, y, 255, 255, 255)
    pixels = probe.pixels
    return pixels[-1] if pixels else None
