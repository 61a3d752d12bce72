"""objtasks CLI entry point: Click group with subcommands."""

import logging

import click

from objtasks import __version__
from objtasks.config import ObjtasksConfig

_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group()
@click.version_option(version=__version__, prog_name="objtasks")
@click.option(
    "--log-level",
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    default=ObjtasksConfig.log_level,
    show_default=True,
    help="Logging verbosity.",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str) -> None:
    """objtasks - rectangles, JSON round-trips and CSS selectors."""
    config = ObjtasksConfig(log_level=log_level.upper())
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger("objtasks").setLevel(config.log_level)
    ctx.obj = config


# Import and register subcommands
from objtasks.cli.area import area  # noqa: E402
from objtasks.cli.json_cmd import json_cmd  # noqa: E402
from objtasks.cli.selector import selector  # noqa: E402

cli.add_command(area)
cli.add_command(json_cmd)
cli.add_command(selector)
