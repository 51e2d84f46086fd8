"""Generic utility modules for panelmap."""

from .persistence import ConfigFile

__all__ = ["ConfigFile"]
