"""Command-line interface for panelmap."""

from .main import cli

__all__ = ["cli"]
