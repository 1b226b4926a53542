"""Apply the interface indexes recorded in a definition file to a block."""

from __future__ import annotations

import logging
import re

from blockdef.block.block import Block
from blockdef.block.intermediates import get_style_targets
from blockdef.configuration import Configuration
from blockdef.errors import CssBlockError, StyleNodeNotFoundError
from blockdef.model.ast import Root
from blockdef.parser.utils import strip_quotes
from blockdef.source_location import source_range

logger = logging.getLogger(__name__)

INTERFACE_INDEX_PROPERTY = "block-interface-index"

_INTEGER_RE = re.compile(r"^\s*[+-]?[0-9]+\s*$")


def parse_index(value: str) -> int | None:
    """Parse a declared index, returning None if it is not a base-10 integer."""
    val = strip_quotes(value)
    if not _INTEGER_RE.match(val):
        return None
    return int(val, 10)


def add_interface_indexes(
    configuration: Configuration, root: Root, block: Block, file: str
) -> None:
    """Set each style node's index from the definition file's declarations.

    Every rule's ``block-interface-index`` declarations are read in document
    order. Non-numeric and repeated values are recorded on the block as
    errors and skipped. Once all rules are read, each style node in the
    block, implicit ones included, must have had its index set; any that
    was not is recorded as an error against the whole file.

    This only applies to definition files, which are the only files allowed
    to carry interface indexes.

    Raises:
        StyleNodeNotFoundError: A rule's selector resolves to no style node.
    """
    found_indexes: list[int] = []

    for rule in root.walk_rules():
        for decl in rule.walk_decls(INTERFACE_INDEX_PROPERTY):
            parsed_index = parse_index(decl.value)
            if parsed_index is None:
                block.add_error(
                    CssBlockError(
                        "block-interface-index must be a number.",
                        source_range(configuration, root, file, decl),
                    )
                )
                continue

            if parsed_index in found_indexes:
                block.add_error(
                    CssBlockError(
                        "Each block-interface-index in a definition file must be unique.",
                        source_range(configuration, root, file, decl),
                    )
                )
                continue
            found_indexes.append(parsed_index)

            for sel in block.get_parsed_selectors(rule):
                targets = get_style_targets(block, sel.key)
                if targets.block_attrs:
                    style = targets.block_attrs[0]
                elif targets.block_classes:
                    style = targets.block_classes[0]
                else:
                    raise StyleNodeNotFoundError(
                        f"Couldn't find style node corresponding to selector {sel}. "
                        "This shouldn't happen."
                    )
                style.index = parsed_index
                logger.debug("%s: %s -> %d", file, style.as_source(), parsed_index)

    for style in block.all(include_implicit=True):
        if not style.index_was_reset:
            block.add_error(
                CssBlockError(
                    f"Style node {style.as_source()} doesn't have a preset interface "
                    "index after parsing definition file. You may need to declare "
                    "this style node in the definition file.",
                    filename=file,
                )
            )
