"""Config commands: inspect and create the matrix config file."""

from pathlib import Path
from typing import Optional

import click

from panelmap.exceptions import PanelMapError
from panelmap.models import DEFAULT_CONFIG_PATH, MatrixConfig
from panelmap.transformers import build_pipeline
from panelmap.utils import ConfigFile

from .common import apply_overrides, geometry_options, report_error

path_option = click.option(
    '--path',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Config file (default: ~/.panelmap/config.json)'
)


@click.group(name="config")
def config_group():
    """Matrix configuration commands."""
    pass


@config_group.command(name="show")
@path_option
def show_config(path: Optional[Path]):
    """Print the configuration (defaults if the file does not exist)."""
    try:
        config = MatrixConfig.load_or_default(path)
    except PanelMapError as e:
        report_error(e)
        return

    click.echo(config.model_dump_json(indent=2))


@config_group.command(name="init")
@geometry_options
@click.option('--force', is_flag=True, help='Overwrite an existing file (a .bak copy is kept)')
def init_config(config_path, rows, cols, chain, parallel, transforms, force: bool):
    """Write a config file from defaults and the given options."""
    path = config_path or DEFAULT_CONFIG_PATH
    if path.exists() and not force:
        click.echo(f"Config already exists: {path} (use --force to overwrite)", err=True)
        raise SystemExit(1)

    try:
        config = apply_overrides(MatrixConfig(), rows, cols, chain, parallel, transforms)
        # Build once so geometry errors surface before anything is written
        build_pipeline(config.transforms)
        config.save(path)
    except PanelMapError as e:
        report_error(e)
        return

    click.echo(f"[OK] Wrote {path}")


@config_group.command(name="validate")
@path_option
def validate_config(path: Optional[Path]):
    """Check that a config file loads and its transforms can be built."""
    store = ConfigFile(path or DEFAULT_CONFIG_PATH, MatrixConfig)
    error = store.check()
    if error is not None:
        click.echo(f"[FAIL] {error}", err=True)
        raise SystemExit(1)

    try:
        build_pipeline(store.load().transforms)
    except PanelMapError as e:
        report_error(e)
        return

    click.echo(f"[OK] {store.path} is valid")
