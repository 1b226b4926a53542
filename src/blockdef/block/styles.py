"""Style nodes: the class and attribute targets a block exposes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from blockdef.model.selector import AttributeSelector

if TYPE_CHECKING:
    from blockdef.block.block import Block

ROOT_CLASS_NAME = ":scope"


class Style:
    """Base for style nodes.

    ``index`` is the interface index; assigning it marks the node as reset
    so a later audit can tell which nodes were covered.
    """

    def __init__(self, block: Block, implicit: bool = False) -> None:
        self.block = block
        self.implicit = implicit
        self._index: int | None = None
        self.index_was_reset = False

    @property
    def index(self) -> int | None:
        return self._index

    @index.setter
    def index(self, value: int) -> None:
        self._index = value
        self.index_was_reset = True

    def reset_index(self) -> None:
        self._index = None
        self.index_was_reset = False

    def as_source(self) -> str:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.as_source()} index={self._index}>"


class BlockClass(Style):
    """A class-like style node (``.name``), or the block root (``:scope``)."""

    def __init__(self, block: Block, name: str, implicit: bool = False) -> None:
        super().__init__(block, implicit=implicit)
        self.name = name

    @property
    def is_root(self) -> bool:
        return self.name == ROOT_CLASS_NAME

    def as_source(self) -> str:
        if self.is_root:
            return ROOT_CLASS_NAME
        return f".{self.name}"


class AttrValue(Style):
    """An attribute-like style node owned by a class, e.g. ``.item[state|active]``."""

    def __init__(
        self,
        block: Block,
        class_name: str,
        attribute: AttributeSelector,
        implicit: bool = False,
    ) -> None:
        super().__init__(block, implicit=implicit)
        self.class_name = class_name
        self.attribute = attribute

    @property
    def is_root_attribute(self) -> bool:
        return self.class_name == ROOT_CLASS_NAME

    def as_source(self) -> str:
        if self.is_root_attribute:
            return str(self.attribute)
        return f".{self.class_name}{self.attribute}"
