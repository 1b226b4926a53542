"""Small string helpers shared by the parsers."""

from __future__ import annotations

import re

_QUOTED_RE = re.compile(r"""^(["'])(.+)\1$""", re.DOTALL)


def strip_quotes(value: str) -> str:
    """Remove one matching pair of surrounding single or double quotes."""
    match = _QUOTED_RE.match(value)
    if match:
        return match.group(2)
    return value
