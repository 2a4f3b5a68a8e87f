"""CLI command: objectkit roundtrip -- parse JSON and write it back."""

from __future__ import annotations

import sys
from dataclasses import fields
from typing import Any

import click

from objectkit.config import SerializationConfig
from objectkit.errors import ParseError, SerializationError
from objectkit.serialization import bind, from_json, to_json
from objectkit.shapes import Rectangle

RECTANGLE_FIELDS = frozenset(f.name for f in fields(Rectangle))


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def looks_like_rectangle(value: Any) -> bool:
    """True for a JSON object with exactly numeric width and height."""
    return (
        isinstance(value, dict)
        and set(value) == RECTANGLE_FIELDS
        and all(_is_number(v) for v in value.values())
    )


@click.command()
@click.argument("text")
@click.option("--indent", type=int, default=None, help="Indent nested JSON by N spaces")
@click.option("--sort-keys", is_flag=True, help="Sort object keys")
def roundtrip(text: str, indent: int | None, sort_keys: bool) -> None:
    """Parse TEXT as JSON and print it re-serialized.

    Objects whose only fields are a numeric width and height are bound to
    a Rectangle and its area is reported on stderr.
    """
    config = SerializationConfig(indent=indent, sort_keys=sort_keys)

    try:
        value = from_json(None, text)
        if looks_like_rectangle(value):
            value = bind(Rectangle, value)
            click.echo(f"Rectangle area: {value.area()}", err=True)
        output = to_json(value, config)
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)
    except SerializationError as exc:
        click.echo(f"JSON error: {exc}", err=True)
        sys.exit(1)

    click.echo(output)
