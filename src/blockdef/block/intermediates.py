"""Resolve a selector's key compound to the style nodes it targets."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from blockdef.block.styles import ROOT_CLASS_NAME, AttrValue, BlockClass
from blockdef.model.selector import CompoundSelector

if TYPE_CHECKING:
    from blockdef.block.block import Block


@dataclass
class StyleTargets:
    """Style nodes matched by one compound selector."""

    block_attrs: list[AttrValue] = field(default_factory=list)
    block_classes: list[BlockClass] = field(default_factory=list)


def get_style_targets(block: Block, key: CompoundSelector) -> StyleTargets:
    """Look up the class and attribute nodes *key* refers to in *block*.

    A key without a class name targets the root; its attributes belong to
    the root even when the block does not expose the root as a node.
    """
    class_name = ROOT_CLASS_NAME if key.targets_root else key.class_name
    assert class_name is not None
    targets = StyleTargets()
    block_class = block.get_class(class_name)
    if block_class is not None:
        targets.block_classes.append(block_class)
    for attribute in key.attributes:
        attr = block.get_attribute_value(class_name, attribute)
        if attr is not None:
            targets.block_attrs.append(attr)
    return targets
