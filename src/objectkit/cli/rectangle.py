"""CLI command: objectkit rectangle -- build a rectangle and show its area."""

from __future__ import annotations

import click

from objectkit.serialization import to_json
from objectkit.shapes import Rectangle


@click.command()
@click.argument("width", type=float)
@click.argument("height", type=float)
@click.option("--json", "as_json", is_flag=True, help="Print the rectangle as JSON")
def rectangle(width: float, height: float, as_json: bool) -> None:
    """Print the area of a WIDTH x HEIGHT rectangle."""
    rect = Rectangle(_whole(width), _whole(height))
    if as_json:
        click.echo(to_json(rect))
    else:
        click.echo(rect.area())


def _whole(value: float) -> float | int:
    return int(value) if value.is_integer() else value
