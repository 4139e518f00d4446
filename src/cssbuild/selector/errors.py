"""Selector builder error types."""

from __future__ import annotations

from cssbuild.selector.kinds import SelectorKind

DUPLICATE_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time "
    "inside the selector"
)
ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)


class SelectorError(Exception):
    """Base error for all selector construction failures."""

    def __init__(self, message: str, *, kind: SelectorKind | None = None) -> None:
        super().__init__(message)
        self.kind = kind


class DuplicateSingletonError(SelectorError):
    """An element, id or pseudo-element was appended a second time."""

    def __init__(self, kind: SelectorKind) -> None:
        super().__init__(DUPLICATE_MESSAGE, kind=kind)


class OrderViolationError(SelectorError):
    """A selector part was appended out of the required order."""

    def __init__(
        self, kind: SelectorKind, previous: SelectorKind | None = None
    ) -> None:
        super().__init__(ORDER_MESSAGE, kind=kind)
        self.previous = previous


class SelectorConsumedError(SelectorError):
    """Raised in render-consumes mode when a rendered expression is reused."""

    def __init__(self, kind: SelectorKind | None = None) -> None:
        super().__init__("Selector has already been rendered", kind=kind)
