"""CLI commands for panelmap."""

from .config import config_group
from .map import map_pixel
from .pixel_test import pixel_test

__all__ = ["config_group", "map_pixel", "pixel_test"]
