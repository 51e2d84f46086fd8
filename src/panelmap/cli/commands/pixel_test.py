"""Pixel test: light every logical pixel and check the panels are covered."""

import logging

import click
from pydantic import ValidationError

from panelmap.core import walk_pixels
from panelmap.exceptions import ErrorContext, PanelMapError
from panelmap.models import Color
from panelmap.surfaces import MemorySurface
from panelmap.transformers import build_pipeline

from .common import geometry_options, report_error, resolve_config

logger = logging.getLogger(__name__)


def _parse_color(ctx, param, value: str) -> Color:
    try:
        color = Color.from_hex(value)
    except (ValueError, ValidationError) as e:
        raise click.BadParameter(f"{value!r} is not a #RRGGBB color") from e
    # The in-memory panel starts black, so black pixels can't be told apart
    if color == Color.off():
        raise click.BadParameter("black can't be told apart from unlit pixels, pick another color")
    return color


@click.command(name="pixel-test")
@geometry_options
@click.option(
    '--color',
    default='#AA55FF',
    callback=_parse_color,
    help='Color to light pixels with (default: #AA55FF)'
)
@click.option('--show-mapping', is_flag=True, help='Print every pixel as it is written')
def pixel_test(config_path, rows, cols, chain, parallel, transforms, color, show_mapping):
    """
    Walk every logical pixel onto an in-memory panel and report coverage.

    A correct mapping lights every physical pixel exactly once. Exits with
    status 1 if some physical pixels were never reached.

    \b
    Examples:
      # 16-row panels, four in a chain, snake layout
      panelmap pixel-test --rows 16 --chain 4 -t snake_8x2

      # Print each pixel as it is plotted
      panelmap pixel-test --chain 4 -t large_square_64x64 --show-mapping
    """
    try:
        config = resolve_config(config_path, rows, cols, chain, parallel, transforms)
        with ErrorContext("run pixel test", logger_instance=logger):
            panel = MemorySurface(config.width, config.height)
            pipeline = build_pipeline(config.transforms)
            outer = pipeline.bind(panel)

            on_pixel = None
            if show_mapping:
                def on_pixel(x, y):
                    click.echo(f"Pixel at ({x}, {y})")

            report = walk_pixels(outer, panel, color, on_pixel=on_pixel)
            panel.clear()
    except PanelMapError as e:
        report_error(e)
        return

    click.echo(report.summary())
    if report.is_complete:
        click.echo("[OK] Every physical pixel was reached exactly once")
        return

    if report.unlit:
        click.echo(f"[FAIL] {report.unlit} physical pixel(s) never reached", err=True)
    if report.written > report.lit:
        click.echo(
            f"[FAIL] {report.written - report.lit} write(s) dropped or landed on a lit pixel",
            err=True,
        )
    raise SystemExit(1)
