from blockdef.block.block import Block
from blockdef.block.intermediates import StyleTargets, get_style_targets
from blockdef.block.styles import ROOT_CLASS_NAME, AttrValue, BlockClass, Style

__all__ = [
    "Block",
    "Style",
    "BlockClass",
    "AttrValue",
    "ROOT_CLASS_NAME",
    "StyleTargets",
    "get_style_targets",
]
