"""Selector component kinds and their mandatory relative order."""

from __future__ import annotations

from enum import Enum


class SelectorKind(Enum):
    """Kinds of simple selector, declared in the order CSS requires them.

    Order: element < id < class < attribute < pseudo-class < pseudo-element.
    """

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"

    @property
    def rank(self) -> int:
        """Position of this kind in the fixed order (element is 0)."""
        return _ORDER.index(self)

    @property
    def is_singleton(self) -> bool:
        """True for kinds allowed at most once per selector."""
        return self in _SINGLETONS

    def decorate(self, value: str) -> str:
        """Apply this kind's punctuation to *value*, e.g. ``#main`` for an id."""
        if self is SelectorKind.ATTRIBUTE:
            return f"[{value}]"
        return _PREFIXES[self] + value


_ORDER: list[SelectorKind] = list(SelectorKind)

_SINGLETONS = frozenset(
    {SelectorKind.ELEMENT, SelectorKind.ID, SelectorKind.PSEUDO_ELEMENT}
)

_PREFIXES: dict[SelectorKind, str] = {
    SelectorKind.ELEMENT: "",
    SelectorKind.ID: "#",
    SelectorKind.CLASS: ".",
    SelectorKind.PSEUDO_CLASS: ":",
    SelectorKind.PSEUDO_ELEMENT: "::",
}
