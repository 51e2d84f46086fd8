"""Options and helpers shared by the geometry commands."""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from panelmap.exceptions import format_error_for_display
from panelmap.models import MatrixConfig
from panelmap.transformers import parse_transform

logger = logging.getLogger(__name__)


def geometry_options(func):
    """Add panel layout and transform options to a command."""
    options = [
        click.option(
            '--config', 'config_path',
            type=click.Path(dir_okay=False, path_type=Path),
            default=None,
            help='Matrix config file (default: ~/.panelmap/config.json)'
        ),
        click.option('--rows', type=click.IntRange(min=1), default=None, help='Rows per panel'),
        click.option('--cols', type=click.IntRange(min=1), default=None, help='Columns per panel'),
        click.option(
            '--chain', type=click.IntRange(min=1), default=None, help='Panels chained per chain'
        ),
        click.option(
            '--parallel', type=click.IntRange(min=1), default=None, help='Chains driven in parallel'
        ),
        click.option(
            '--transform', '-t', 'transforms',
            multiple=True,
            help='Transform stage, innermost first (e.g. u_arrangement:1 -t rotate:180). '
                 'Replaces the transforms from the config file.'
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def resolve_config(
    config_path: Optional[Path],
    rows: Optional[int],
    cols: Optional[int],
    chain: Optional[int],
    parallel: Optional[int],
    transforms: tuple[str, ...],
) -> MatrixConfig:
    """
    Load the matrix config and apply command-line overrides.

    Raises:
        ConfigurationError: If the file or a --transform value is invalid
    """
    config = MatrixConfig.load_or_default(config_path)
    return apply_overrides(config, rows, cols, chain, parallel, transforms)


def apply_overrides(
    config: MatrixConfig,
    rows: Optional[int],
    cols: Optional[int],
    chain: Optional[int],
    parallel: Optional[int],
    transforms: tuple[str, ...],
) -> MatrixConfig:
    """Return a copy of config with the given command-line values applied."""
    updates: dict = {}
    if rows is not None:
        updates["rows"] = rows
    if cols is not None:
        updates["cols"] = cols
    if chain is not None:
        updates["chain_length"] = chain
    if parallel is not None:
        updates["parallel"] = parallel
    if transforms:
        updates["transforms"] = [parse_transform(text) for text in transforms]

    if updates:
        config = config.model_copy(update=updates)
    logger.debug(f"Resolved matrix config: {config.model_dump()}")
    return config


def report_error(error: Exception) -> None:
    """Print an error the way the main CLI does and exit with status 1."""
    logger.error(f"Command failed: {getattr(error, 'technical_message', error)}")
    user_message, recovery_hint = format_error_for_display(error)

    click.echo(f"ERROR: {user_message}", err=True)
    if recovery_hint:
        click.echo(f"\n{recovery_hint}", err=True)
    sys.exit(1)
