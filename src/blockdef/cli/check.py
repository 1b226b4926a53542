"""CLI command: blockdef check -- parse a definition file and verify its indexes."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from blockdef.configuration import Configuration
from blockdef.loader import load_definition
from blockdef.parser import ParseError


@click.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--root-dir",
    type=click.Path(file_okay=False),
    default=".",
    show_default=True,
    help="Directory that reported file paths are relative to.",
)
def check(file: str, root_dir: str) -> None:
    """Verify the interface indexes declared in a definition file.

    Prints every error found and exits with code 0 if there are none, or
    code 1 otherwise.
    """
    path = Path(file)
    try:
        block = load_definition(path, Configuration(root_dir=root_dir))
    except ParseError as exc:
        location = f"{exc.line}:{exc.column}: " if exc.line is not None else ""
        click.echo(f"Parse error: {location}{exc}", err=True)
        sys.exit(1)

    if not block.errors:
        styles = block.all(include_implicit=True)
        click.echo(f"OK: {path.name} is valid ({len(styles)} style node(s) indexed)")
        sys.exit(0)

    for error in block.errors:
        click.echo(str(error))

    click.echo()
    click.echo(f"Summary: {len(block.errors)} error(s)")
    sys.exit(1)
