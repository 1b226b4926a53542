"""Hand-written parser for block selectors.

Syntax examples:
    :scope
    .item
    [state|active]
    .item[state|size="large"]
    .list > .item[state|active], .list:scope .item
"""

from __future__ import annotations

import re

from blockdef.model.selector import AttributeSelector, CompoundSelector, ParsedSelector
from blockdef.parser.errors import ParseError

__all__ = ["parse_selector_list", "parse_selector"]

_IDENT = r"-?[a-zA-Z_][a-zA-Z0-9_-]*"

# Matches one simple selector at the current position.
_SIMPLE_RE = re.compile(
    rf"""
    (?P<scope>:scope)
    | \.(?P<class_name>{_IDENT})
    | \[\s*
        (?P<namespace>{_IDENT})\|(?P<attr>{_IDENT})   # namespaced attribute
        (?:\s*=\s*(?P<value>"[^"]*"|'[^']*'|{_IDENT}))?  # optional value
      \s*\]
    """,
    re.VERBOSE,
)

# Matches a combinator (including plain whitespace) between compounds.
_COMBINATOR_RE = re.compile(r"\s*([>+~])\s*|\s+")


def _split_top_level(text: str, sep: str = ",") -> list[str]:
    """Split *text* on *sep* outside of brackets and quotes."""
    parts: list[str] = []
    depth = 0
    quote = ""
    current: list[str] = []
    for ch in text:
        if quote:
            if ch == quote:
                quote = ""
        elif ch in "\"'":
            quote = ch
        elif ch in "[(":
            depth += 1
        elif ch in "])":
            depth -= 1
        elif ch == sep and depth == 0:
            parts.append("".join(current))
            current = []
            continue
        current.append(ch)
    parts.append("".join(current))
    return parts


def _parse_compound(raw: str, pos: int) -> tuple[CompoundSelector, int]:
    class_name: str | None = None
    scope = False
    attributes: list[AttributeSelector] = []
    start = pos
    while pos < len(raw):
        match = _SIMPLE_RE.match(raw, pos)
        if not match:
            break
        if match.group("scope"):
            scope = True
        elif match.group("class_name"):
            if class_name is not None:
                raise ParseError(f"Only one class may appear in a compound selector: {raw!r}")
            class_name = match.group("class_name")
        else:
            value = match.group("value")
            if value is not None and value[:1] in "\"'":
                value = value[1:-1]
            attributes.append(
                AttributeSelector(
                    namespace=match.group("namespace"),
                    name=match.group("attr"),
                    value=value,
                )
            )
        pos = match.end()
    if pos == start:
        raise ParseError(f"Invalid selector: {raw!r}")
    return CompoundSelector(class_name=class_name, scope=scope, attributes=tuple(attributes)), pos


def parse_selector(raw: str) -> ParsedSelector:
    """Parse a single complex selector (no commas)."""
    text = raw.strip()
    if not text:
        raise ParseError("Empty selector")
    compounds: list[CompoundSelector] = []
    combinators: list[str] = []
    pos = 0
    while True:
        compound, pos = _parse_compound(text, pos)
        compounds.append(compound)
        if pos >= len(text):
            break
        match = _COMBINATOR_RE.match(text, pos)
        if not match:
            raise ParseError(f"Invalid selector: {raw.strip()!r}")
        combinators.append(match.group(1) or " ")
        pos = match.end()
    return ParsedSelector(compounds=tuple(compounds), combinators=tuple(combinators))


def parse_selector_list(text: str) -> list[ParsedSelector]:
    """Parse a comma-separated selector list into ParsedSelector objects.

    Returns the selectors in source order.
    """
    return [parse_selector(part) for part in _split_top_level(text)]
