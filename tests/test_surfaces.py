"""Unit tests for the in-memory surfaces."""

import numpy as np
import pytest

from panelmap.exceptions import SurfaceDimensionError
from panelmap.models import Color
from panelmap.surfaces import MemorySurface, RecordingSurface, Surface
from panelmap.transformers import RotateSurface, Snake8x2Surface, UArrangementSurface


class TestMemorySurface:
    """Test the numpy framebuffer surface."""

    @pytest.mark.unit
    def test_starts_black(self):
        """Test that a new surface is all off."""
        surface = MemorySurface(4, 3)
        assert (surface.width(), surface.height()) == (4, 3)
        assert surface.count_matching(Color.off()) == 12

    @pytest.mark.unit
    def test_set_and_get_pixel(self):
        """Test writing and reading back a pixel."""
        surface = MemorySurface(4, 3)
        surface.set_pixel(3, 2, 170, 85, 255)
        assert surface.get_pixel(3, 2) == Color(r=170, g=85, b=255)
        assert surface.get_pixel(0, 0) == Color.off()

    @pytest.mark.unit
    @pytest.mark.parametrize("x,y", [(-1, 0), (4, 0), (0, -1), (0, 3)])
    def test_out_of_range_write_ignored(self, x, y):
        """Test that writes outside the framebuffer are dropped."""
        surface = MemorySurface(4, 3)
        surface.set_pixel(x, y, 255, 255, 255)
        assert surface.count_matching(Color.off()) == 12

    @pytest.mark.unit
    def test_out_of_range_read_raises(self):
        """Test that reading outside the framebuffer raises."""
        with pytest.raises(IndexError):
            MemorySurface(4, 3).get_pixel(4, 0)

    @pytest.mark.unit
    def test_fill_and_clear(self):
        """Test whole-surface operations."""
        surface = MemorySurface(4, 3)
        surface.fill(1, 2, 3)
        assert surface.count_matching(Color(r=1, g=2, b=3)) == 12

        surface.clear()
        assert surface.count_matching(Color.off()) == 12

    @pytest.mark.unit
    def test_to_array_is_a_copy(self):
        """Test the array layout and that it is detached."""
        surface = MemorySurface(4, 3)
        surface.set_pixel(1, 2, 9, 9, 9)

        array = surface.to_array()
        assert array.shape == (3, 4, 3)
        assert array.dtype == np.uint8
        assert tuple(array[2, 1]) == (9, 9, 9)

        array[0, 0] = (5, 5, 5)
        assert surface.get_pixel(0, 0) == Color.off()

    @pytest.mark.unit
    @pytest.mark.parametrize("size", [(0, 1), (1, 0), (-2, 5)])
    def test_invalid_dimensions(self, size):
        """Test that sizes must be positive."""
        with pytest.raises(SurfaceDimensionError):
            MemorySurface(*size)


class TestRecordingSurface:
    """Test the call-recording surface."""

    @pytest.mark.unit
    def test_records_calls_in_order(self):
        """Test that every call is kept, including out-of-range writes."""
        surface = RecordingSurface(2, 2)
        surface.set_pixel(5, -1, 1, 2, 3)
        surface.fill(4, 5, 6)
        surface.clear()

        assert surface.calls == [("set_pixel", 5, -1, 1, 2, 3), ("fill", 4, 5, 6), ("clear",)]
        assert surface.pixels == [(5, -1)]

    @pytest.mark.unit
    def test_reset(self):
        """Test forgetting recorded calls."""
        surface = RecordingSurface(2, 2)
        surface.clear()
        surface.reset()
        assert surface.calls == []


class TestSurfaceProtocol:
    """Every surface and remapper satisfies the same protocol."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "surface",
        [
            MemorySurface(1, 1),
            RecordingSurface(1, 1),
            RotateSurface(90),
            UArrangementSurface(1),
            Snake8x2Surface(),
        ],
    )
    def test_is_surface(self, surface):
        """Test structural conformance to Surface."""
        assert isinstance(surface, Surface)
