"""Error types for block processing.

``CssBlockError`` is a soft error: it is collected on a Block so that one pass
can report every problem in a file. ``StyleNodeNotFoundError`` is raised and
means block construction and selector resolution disagree.
"""

from __future__ import annotations

from blockdef.source_location import SourceRange


class CssBlockError(Exception):
    """A user-facing problem with a block, located by range or by file."""

    prefix = "Error"

    def __init__(
        self,
        message: str,
        location: SourceRange | None = None,
        filename: str | None = None,
    ) -> None:
        self.message = message
        self.location = location
        self.filename = filename if filename is not None else (
            location.start.filename if location else None
        )
        super().__init__(message)

    @property
    def line(self) -> int | None:
        return self.location.start.line if self.location else None

    @property
    def column(self) -> int | None:
        return self.location.start.column if self.location else None

    def __str__(self) -> str:
        if self.location:
            return f"{self.prefix}: {self.message} ({self.location.start})"
        if self.filename:
            return f"{self.prefix}: {self.message} ({self.filename})"
        return f"{self.prefix}: {self.message}"


class InvalidBlockError(Exception):
    """Raised when a block has accumulated errors and a caller requires none."""

    def __init__(self, errors: list[CssBlockError]) -> None:
        self.errors = errors
        messages = [e.message for e in errors]
        super().__init__(
            f"Block has {len(messages)} error(s): " + "; ".join(messages)
        )


class StyleNodeNotFoundError(RuntimeError):
    """A resolved selector has no corresponding style node in the block."""
