"""Main CLI entry point."""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

import click

from panelmap import __version__

from .commands import config_group, map_pixel, pixel_test

logger = logging.getLogger(__name__)

HANDLER_NAME = "panelmap"


def setup_logging(verbose: int, debug: bool, log_file: Optional[Path], log_level: str) -> None:
    """
    Configure logging for the application.

    Diagnostics (including geometry warnings) always go to stderr. A
    rotating log file is added with --debug or --log-file.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        debug: If True, enable debug mode with file logging
        log_file: Custom log file path (optional)
        log_level: Log level for file logging (DEBUG/INFO/WARNING/ERROR)
    """
    if debug or verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    root_logger = logging.getLogger()
    # Re-running the CLI in one process (tests) must not stack handlers
    for handler in list(root_logger.handlers):
        if handler.get_name() == HANDLER_NAME:
            root_logger.removeHandler(handler)
            handler.close()

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.set_name(HANDLER_NAME)
    stream_handler.setLevel(level)
    stream_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    root_logger.addHandler(stream_handler)

    file_level = level
    log_path = None
    if debug and not log_file:
        log_path = Path.cwd() / "panelmap-debug.log"
    elif log_file:
        log_path = log_file
        file_level = getattr(logging, log_level.upper())

    if log_path is not None:
        # Keeps last 5 files, max 10MB each
        file_handler = logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=10 * 1024 * 1024,
            backupCount=5
        )
        file_handler.set_name(HANDLER_NAME)
        file_handler.setLevel(file_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    root_logger.setLevel(min(level, file_level))
    logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={log_path}")


@click.group()
@click.version_option(version=__version__, prog_name="panelmap")
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug mode (DEBUG level, logs to ./panelmap-debug.log)'
)
@click.option(
    '--log-file',
    type=click.Path(path_type=Path),
    default=None,
    help='Custom log file path'
)
@click.option(
    '--log-level',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
    default='INFO',
    help='Log level for file logging (default: INFO)'
)
def cli(verbose: int, debug: bool, log_file: Optional[Path], log_level: str):
    """
    panelmap - pixel coordinate remapping for chained LED panel matrices.

    Translates the logical image you draw into the coordinates the wired
    panels expect: rotations, U-folded chains and snake layouts, stacked in
    any order.

    \b
    Examples:
      # Where does logical (0, 40) land on four 32x32 panels folded into a U?
      panelmap map 0 40 --chain 4 -t u_arrangement:1

      # Check that a layout covers every physical pixel
      panelmap pixel-test --chain 4 -t large_square_64x64

      # Save a layout as the default config
      panelmap config init --chain 4 -t u_arrangement:1 -t rotate:180
    """
    setup_logging(verbose, debug, log_file, log_level)


cli.add_command(map_pixel)
cli.add_command(pixel_test)
cli.add_command(config_group)

if __name__ == "__main__":
    cli()
