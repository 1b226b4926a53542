"""CLI command: blockdef inspect -- list a block's style nodes and indexes."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from blockdef.configuration import Configuration
from blockdef.loader import load_definition
from blockdef.parser import ParseError


@click.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.option("--root-dir", type=click.Path(file_okay=False), default=".")
def inspect(file: str, root_dir: str) -> None:
    """Parse a definition file and display each style node with its index."""
    path = Path(file)

    try:
        block = load_definition(path, Configuration(root_dir=root_dir))
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    styles = block.all(include_implicit=True)
    click.echo(f"Block: {block.name}")
    click.echo(f"Styles: {len(styles)}")
    click.echo(f"Errors: {len(block.errors)}")
    click.echo()

    for style in sorted(styles, key=lambda s: (s.index is None, s.index or 0)):
        index = "-" if style.index is None else str(style.index)
        parts = [f"  {index:>4}", style.as_source()]
        if style.implicit:
            parts.append("(implicit)")
        click.echo("  ".join(parts))
