"""Definition file syntax tree: Root, Rule, Declaration, and AtRule dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Union


@dataclass(frozen=True)
class Declaration:
    """A single ``property: value`` pair inside a rule.

    Lines and columns are 1-based. The end column is just past the value.
    """

    prop: str
    value: str
    line: int
    column: int
    end_line: int
    end_column: int


@dataclass(frozen=True, eq=False)
class Rule:
    """A selector paired with its declarations, in source order."""

    selector: str
    declarations: list[Declaration] = field(default_factory=list)
    line: int = 0
    column: int = 0

    def walk_decls(self, prop: str | None = None) -> Iterator[Declaration]:
        """Yield declarations in order, optionally only those named *prop*."""
        for decl in self.declarations:
            if prop is None or decl.prop == prop:
                yield decl


@dataclass(frozen=True)
class AtRule:
    """A statement-style at-rule such as ``@block-syntax-version: 1;``."""

    name: str
    params: str = ""
    line: int = 0
    column: int = 0


Node = Union[Rule, AtRule]


@dataclass(frozen=True)
class Root:
    """The parsed contents of one definition file."""

    nodes: list[Node] = field(default_factory=list)

    @property
    def rules(self) -> list[Rule]:
        return [n for n in self.nodes if isinstance(n, Rule)]

    def walk_rules(self) -> Iterator[Rule]:
        """Yield every rule in document order."""
        for node in self.nodes:
            if isinstance(node, Rule):
                yield node

    def walk_at_rules(self, name: str | None = None) -> Iterator[AtRule]:
        for node in self.nodes:
            if isinstance(node, AtRule) and (name is None or node.name == name):
                yield node
