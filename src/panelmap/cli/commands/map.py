"""Map command: show where a logical pixel lands on the panels."""

import click

from panelmap.core import trace_pixel
from panelmap.exceptions import PanelMapError
from panelmap.surfaces import RecordingSurface
from panelmap.transformers import build_pipeline

from .common import geometry_options, report_error, resolve_config


@click.command(name="map")
@click.argument("x", type=int)
@click.argument("y", type=int)
@geometry_options
def map_pixel(x, y, config_path, rows, cols, chain, parallel, transforms):
    """
    Show the physical coordinate of logical pixel X Y.

    \b
    Examples:
      # Four 32x32 panels folded into a 64x64 square
      panelmap map 0 40 --chain 4 -t u_arrangement:1

      # Same, using the coordinates of an existing config
      panelmap map 10 10 --config ./matrix.json
    """
    try:
        config = resolve_config(config_path, rows, cols, chain, parallel, transforms)
        pipeline = build_pipeline(config.transforms)

        outer = pipeline.bind(RecordingSurface(config.width, config.height))
        logical_size = f"{outer.width()}x{outer.height()}"

        physical = trace_pixel(pipeline, config.width, config.height, x, y)
    except PanelMapError as e:
        report_error(e)
        return

    click.echo(f"Physical surface: {config.width}x{config.height}")
    click.echo(f"Logical surface:  {logical_size}")
    if physical is None:
        click.echo(f"({x}, {y}) -> dropped (outside the logical surface)")
        return

    px, py = physical
    line = f"({x}, {y}) -> ({px}, {py})"
    if not (0 <= px < config.width and 0 <= py < config.height):
        line += " (outside the physical surface)"
    click.echo(line)
