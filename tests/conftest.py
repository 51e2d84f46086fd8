"""Pytest fixtures for tests."""

import logging

import pytest

from panelmap.cli.main import HANDLER_NAME
from panelmap.surfaces import MemorySurface, RecordingSurface


@pytest.fixture(autouse=True)
def reset_cli_logging():
    """Drop handlers the CLI installs so they don't outlive CliRunner's streams."""
    yield
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if handler.get_name() == HANDLER_NAME:
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(logging.WARNING)


@pytest.fixture
def recorder():
    """A 64x32 surface that records every call."""
    return RecordingSurface(64, 32)


@pytest.fixture
def chain_recorder():
    """Four 32x32 panels in one chain (128x32), recording calls."""
    return RecordingSurface(128, 32)


@pytest.fixture
def chain_panel():
    """Four 32x32 panels in one chain (128x32) as an in-memory framebuffer."""
    return MemorySurface(128, 32)
