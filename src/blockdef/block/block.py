"""Block: the in-memory model of one compiled stylesheet module."""

from __future__ import annotations

from blockdef.block.styles import ROOT_CLASS_NAME, AttrValue, BlockClass, Style
from blockdef.errors import CssBlockError, InvalidBlockError
from blockdef.model.ast import Rule
from blockdef.model.selector import AttributeSelector, ParsedSelector
from blockdef.parser.selectors import parse_selector_list


class Block:
    """Owns a block's style nodes and the errors found while processing it.

    With ``implicit_scope`` the root class (``:scope``) exists from the
    start as an implicit style node. Attribute nodes on the root are always
    available whether or not the root itself is exposed.
    """

    def __init__(self, name: str, implicit_scope: bool = True) -> None:
        self.name = name
        self.errors: list[CssBlockError] = []
        self._classes: dict[str, BlockClass] = {}
        self._attributes: dict[tuple[str, AttributeSelector], AttrValue] = {}
        self._parsed_selectors: dict[Rule, list[ParsedSelector]] = {}
        if implicit_scope:
            self._classes[ROOT_CLASS_NAME] = BlockClass(self, ROOT_CLASS_NAME, implicit=True)

    # --- errors -----------------------------------------------------------

    def add_error(self, error: CssBlockError) -> None:
        self.errors.append(error)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    def assert_valid(self) -> None:
        """Raise :class:`InvalidBlockError` if any errors were collected."""
        if self.errors:
            raise InvalidBlockError(list(self.errors))

    # --- style nodes ------------------------------------------------------

    @property
    def root_class(self) -> BlockClass | None:
        return self._classes.get(ROOT_CLASS_NAME)

    def get_class(self, name: str) -> BlockClass | None:
        return self._classes.get(name)

    def ensure_class(self, name: str) -> BlockClass:
        """Return the class named *name*, creating it if needed.

        Declaring an implicit class makes it explicit.
        """
        block_class = self._classes.get(name)
        if block_class is None:
            block_class = BlockClass(self, name)
            self._classes[name] = block_class
        else:
            block_class.implicit = False
        return block_class

    def get_attribute_value(
        self, class_name: str, attribute: AttributeSelector
    ) -> AttrValue | None:
        return self._attributes.get((class_name, attribute))

    def ensure_attribute_value(
        self, class_name: str, attribute: AttributeSelector
    ) -> AttrValue:
        key = (class_name, attribute)
        attr = self._attributes.get(key)
        if attr is None:
            attr = AttrValue(self, class_name, attribute)
            self._attributes[key] = attr
        return attr

    def all(self, include_implicit: bool = False) -> list[Style]:
        """Return every style node: classes first, then attribute values.

        Implicit nodes, such as an undeclared root, are left out unless
        *include_implicit* is set.
        """
        styles: list[Style] = [*self._classes.values(), *self._attributes.values()]
        if include_implicit:
            return styles
        return [s for s in styles if not s.implicit]

    def reset_indexes(self) -> None:
        """Clear every node's index so the block can be processed again."""
        for style in self.all(include_implicit=True):
            style.reset_index()

    # --- selectors --------------------------------------------------------

    def get_parsed_selectors(self, rule: Rule) -> list[ParsedSelector]:
        """Return the parsed selectors for *rule*, parsing once per rule."""
        cached = self._parsed_selectors.get(rule)
        if cached is None:
            cached = parse_selector_list(rule.selector)
            self._parsed_selectors[rule] = cached
        return cached

    def __repr__(self) -> str:
        return f"<Block {self.name} styles={len(self.all(include_implicit=True))}>"
