"""Load a definition file into a Block with its interface indexes applied."""

from __future__ import annotations

import logging
from pathlib import Path

from blockdef.block.block import Block
from blockdef.block.styles import ROOT_CLASS_NAME
from blockdef.configuration import Configuration
from blockdef.indexes import add_interface_indexes
from blockdef.model.ast import Root
from blockdef.parser.transformer import parse_definition
from blockdef.parser.utils import strip_quotes

logger = logging.getLogger(__name__)

BLOCK_NAME_PROPERTY = "block-name"


def _default_name(file: str) -> str:
    """``nav.block.css`` -> ``nav``."""
    return Path(file).name.split(".", 1)[0]


def _declared_name(root: Root, block: Block) -> str | None:
    for rule in root.walk_rules():
        for sel in block.get_parsed_selectors(rule):
            key = sel.key
            if key.targets_root and not key.attributes and len(sel.compounds) == 1:
                for decl in rule.walk_decls(BLOCK_NAME_PROPERTY):
                    return strip_quotes(decl.value)
    return None


def build_block(root: Root, file: str, name: str | None = None) -> Block:
    """Create a Block with a style node for every rule's key selector.

    The root class is always present; it stays implicit unless a rule
    declares ``:scope`` itself.
    """
    block = Block(name or _default_name(file))
    for rule in root.walk_rules():
        for sel in block.get_parsed_selectors(rule):
            key = sel.key
            class_name = ROOT_CLASS_NAME if key.targets_root else key.class_name
            assert class_name is not None
            if key.class_name is not None or not key.attributes:
                block.ensure_class(class_name)
            for attribute in key.attributes:
                block.ensure_attribute_value(class_name, attribute)
    if name is None:
        declared = _declared_name(root, block)
        if declared:
            block.name = declared
    return block


def load_definition(
    path: str | Path, configuration: Configuration | None = None
) -> Block:
    """Read, parse, and index the definition file at *path*.

    Problems with the file's contents are collected on the returned block's
    ``errors``; unreadable syntax raises :class:`~blockdef.parser.ParseError`.
    """
    configuration = configuration or Configuration()
    file = str(path)
    source = Path(path).read_text(encoding="utf-8")
    root = parse_definition(source)
    block = build_block(root, file)
    add_interface_indexes(configuration, root, block, file)
    logger.debug(
        "Loaded block %s from %s with %d error(s)", block.name, file, len(block.errors)
    )
    return block
