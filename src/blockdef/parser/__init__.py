from blockdef.parser.errors import ParseError
from blockdef.parser.selectors import parse_selector, parse_selector_list
from blockdef.parser.transformer import parse_definition
from blockdef.parser.utils import strip_quotes

__all__ = [
    "ParseError",
    "parse_definition",
    "parse_selector",
    "parse_selector_list",
    "strip_quotes",
]
