"""Blockdef: interface indexes for block definition files."""

__version__ = "0.1.0"

from blockdef.block import AttrValue, Block, BlockClass, Style  # noqa: E402
from blockdef.configuration import Configuration  # noqa: E402
from blockdef.errors import CssBlockError, InvalidBlockError, StyleNodeNotFoundError  # noqa: E402
from blockdef.indexes import add_interface_indexes  # noqa: E402
from blockdef.loader import build_block, load_definition  # noqa: E402
from blockdef.parser import ParseError, parse_definition  # noqa: E402

__all__ = [
    "__version__",
    "AttrValue",
    "Block",
    "BlockClass",
    "Configuration",
    "CssBlockError",
    "InvalidBlockError",
    "ParseError",
    "Style",
    "StyleNodeNotFoundError",
    "add_interface_indexes",
    "build_block",
    "load_definition",
    "parse_definition",
]
