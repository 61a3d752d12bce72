"""CLI command: objtasks json -- normalise a JSON document."""

from __future__ import annotations

import sys
from dataclasses import replace

import click

from objtasks.config import ObjtasksConfig
from objtasks.errors import ParseError
from objtasks.serialization import parse, serialize


@click.command(name="json")
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option("--indent", type=int, default=None, help="Pretty-print with this indent.")
@click.option("--sort-keys", is_flag=True, help="Sort object keys.")
@click.pass_obj
def json_cmd(
    config: ObjtasksConfig | None, source, indent: int | None, sort_keys: bool
) -> None:
    """Read JSON from SOURCE (default: stdin) and print it re-serialized."""
    config = config or ObjtasksConfig()
    if indent is not None:
        config = replace(config, json_indent=indent)
    if sort_keys:
        config = replace(config, json_sort_keys=True)

    try:
        value = parse(source.read())
    except ParseError as exc:
        location = f" at line {exc.line}, column {exc.column}" if exc.line is not None else ""
        click.echo(f"Parse error{location}: {exc}", err=True)
        sys.exit(1)

    click.echo(serialize(value, indent=config.json_indent, sort_keys=config.json_sort_keys))
