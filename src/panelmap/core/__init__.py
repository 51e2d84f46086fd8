"""Pixel mapping checks built on top of the transformers."""

from .pixel_walk import MappingReport, trace_pixel, walk_pixels

__all__ = ["MappingReport", "trace_pixel", "walk_pixels"]
