"""Blockdef model layer -- public type re-exports."""

from blockdef.model.ast import AtRule, Declaration, Node, Root, Rule
from blockdef.model.selector import AttributeSelector, CompoundSelector, ParsedSelector

__all__ = [
    # ast
    "Root",
    "Rule",
    "Declaration",
    "AtRule",
    "Node",
    # selector
    "AttributeSelector",
    "CompoundSelector",
    "ParsedSelector",
]
