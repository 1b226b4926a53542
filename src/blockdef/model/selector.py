"""Selector model: AttributeSelector, CompoundSelector, and ParsedSelector."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class AttributeSelector:
    """An attribute selector such as ``[state|size="large"]``.

    ``value`` is None for presence-only attributes like ``[state|active]``.
    """

    namespace: str
    name: str
    value: str | None = None

    def __str__(self) -> str:
        if self.value is None:
            return f"[{self.namespace}|{self.name}]"
        return f'[{self.namespace}|{self.name}="{self.value}"]'


@dataclass(frozen=True)
class CompoundSelector:
    """A run of simple selectors with no combinator between them.

    A compound with neither a class name nor ``:scope`` but with attributes
    targets the block root, e.g. ``[state|active]``.
    """

    class_name: str | None = None
    scope: bool = False
    attributes: tuple[AttributeSelector, ...] = ()

    @property
    def targets_root(self) -> bool:
        return self.class_name is None

    def __str__(self) -> str:
        head = ""
        if self.class_name is not None:
            head = f".{self.class_name}"
        elif self.scope:
            head = ":scope"
        return head + "".join(str(a) for a in self.attributes)


@dataclass(frozen=True)
class ParsedSelector:
    """One complex selector from a rule's selector list.

    ``compounds`` holds every compound in source order and ``combinators``
    the combinator between each consecutive pair (" ", ">", "+", "~").
    The rightmost compound is the key.
    """

    compounds: tuple[CompoundSelector, ...]
    combinators: tuple[str, ...] = field(default=())

    @property
    def key(self) -> CompoundSelector:
        return self.compounds[-1]

    def __str__(self) -> str:
        parts = [str(self.compounds[0])]
        for combinator, compound in zip(self.combinators, self.compounds[1:]):
            if combinator == " ":
                parts.append(f" {compound}")
            else:
                parts.append(f" {combinator} {compound}")
        return "".join(parts)
