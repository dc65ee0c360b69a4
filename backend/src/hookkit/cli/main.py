"""hookkit CLI entry point."""

import logging

import click


@click.group()
@click.option(
    "--log-level",
    default="WARNING",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level for hook diagnostics.",
)
def cli(log_level: str):
    """hookkit — guard and adapter hooks for CRUD pipelines."""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )


# Register subcommands
from hookkit.cli.guard_cmd import check, resolve  # noqa: E402

cli.add_command(check)
cli.add_command(resolve)
