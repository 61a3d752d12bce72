"""CLI command: objtasks selector -- parse and validate a CSS selector."""

from __future__ import annotations

import sys

import click

from objtasks.errors import ParseError
from objtasks.selector import SelectorError, parse_selector


@click.command()
@click.argument("text")
def selector(text: str) -> None:
    """Parse a CSS selector and print its canonical form.

    Exits with code 1 if the selector is malformed or its parts are
    duplicated or out of order.
    """
    try:
        builder = parse_selector(text)
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)
    except SelectorError as exc:
        click.echo(f"Invalid selector ({exc.stage.label}): {exc}", err=True)
        sys.exit(1)

    click.echo(builder.stringify())
