"""CLI command: objtasks area -- print the area of a rectangle."""

from __future__ import annotations

import click

from objtasks.model.rectangle import Rectangle


def _format_number(value: float) -> str:
    if value.is_integer():
        return str(int(value))
    return str(value)


@click.command(context_settings={"ignore_unknown_options": True})
@click.argument("width", type=float)
@click.argument("height", type=float)
def area(width: float, height: float) -> None:
    """Print the area of a WIDTH x HEIGHT rectangle.

    Negative dimensions are accepted as-is, e.g. ``objtasks area -2 3``.
    """
    rect = Rectangle(width, height)
    click.echo(_format_number(rect.get_area()))
