"""Lark Transformer that converts a definition file parse tree into a Root."""

from __future__ import annotations

from pathlib import Path

from lark import Lark, Token, Transformer

from blockdef.model.ast import AtRule, Declaration, Node, Root, Rule
from blockdef.parser.errors import ParseError

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

_parser: Lark | None = None


def _get_parser() -> Lark:
    global _parser
    if _parser is None:
        _parser = Lark(
            GRAMMAR_PATH.read_text(encoding="utf-8"),
            parser="lalr",
            start="start",
        )
    return _parser


class DefinitionTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into typed syntax nodes."""

    def declaration(self, items: list[Token]) -> Declaration:
        prop, value = items[0], items[1]
        text = str(value).rstrip()
        # VALUE may carry trailing whitespace before "}"; end just past the text.
        lines = text.split("\n")
        end_line = value.line + len(lines) - 1
        if len(lines) == 1:
            end_column = value.column + len(text)
        else:
            end_column = len(lines[-1]) + 1
        return Declaration(
            prop=str(prop),
            value=text,
            line=prop.line,
            column=prop.column,
            end_line=end_line,
            end_column=end_column,
        )

    def rule(self, items: list[object]) -> Rule:
        selector = items[0]
        assert isinstance(selector, Token)
        declarations = [d for d in items[1:] if isinstance(d, Declaration)]
        return Rule(
            selector=str(selector).strip(),
            declarations=declarations,
            line=selector.line,
            column=selector.column,
        )

    def at_rule(self, items: list[Token]) -> AtRule:
        keyword = items[0]
        params = str(items[1]).strip() if len(items) > 1 else ""
        if params.startswith(":"):
            params = params[1:].strip()
        return AtRule(
            name=str(keyword)[1:],
            params=params,
            line=keyword.line,
            column=keyword.column,
        )

    def start(self, items: list[Node]) -> Root:
        return Root(nodes=list(items))


def parse_definition(source: str) -> Root:
    """Parse definition file source into a Root of rules and at-rules."""
    try:
        tree = _get_parser().parse(source)
    except Exception as e:
        # Try to extract line/column from Lark exceptions.
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        raise ParseError(str(e), line=line, column=column) from e
    return DefinitionTransformer().transform(tree)
