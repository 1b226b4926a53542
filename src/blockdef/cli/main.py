"""Blockdef CLI entry point: Click group with subcommands."""

import logging

import click

from blockdef import __version__


@click.group()
@click.version_option(version=__version__, prog_name="blockdef")
@click.option("-v", "--verbose", is_flag=True, help="Log each index assignment.")
def cli(verbose: bool) -> None:
    """Blockdef - check and inspect block definition files."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from blockdef.cli.check import check  # noqa: E402
from blockdef.cli.inspect import inspect  # noqa: E402

cli.add_command(check)
cli.add_command(inspect)
