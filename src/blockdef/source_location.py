"""Source positions and ranges for diagnostics."""

from __future__ import annotations

from dataclasses import dataclass

from blockdef.configuration import Configuration
from blockdef.model.ast import Declaration, Root


@dataclass(frozen=True)
class SourcePosition:
    """A 1-based line/column position within a file."""

    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"


@dataclass(frozen=True)
class SourceRange:
    start: SourcePosition
    end: SourcePosition


def source_range(
    configuration: Configuration, root: Root, file: str, node: Declaration
) -> SourceRange:
    """Build the range covered by *node* in *file*.

    *root* is the tree *node* belongs to. Positions are taken as parsed, so
    the range points into the definition file itself.
    """
    filename = configuration.relative_path(file)
    return SourceRange(
        start=SourcePosition(filename, node.line, node.column),
        end=SourcePosition(filename, node.end_line, node.end_column),
    )
