"""Selector expression: accumulates ordered fragments for one selector."""

from __future__ import annotations

import logging

from cssbuild.config import BuilderConfig
from cssbuild.selector.errors import (
    DuplicateSingletonError,
    OrderViolationError,
    SelectorConsumedError,
)
from cssbuild.selector.kinds import SelectorKind


class SelectorExpression:
    """A compound or complex selector under construction.

    Each chained call appends one decorated fragment and returns ``self``.
    :meth:`render` joins the fragments and resets the expression, so a second
    render returns an empty string (or raises :class:`SelectorConsumedError`
    when the config enables ``consume_on_render``).

    Not thread-safe: confine an instance to one thread for its whole lifetime.
    """

    def __init__(
        self,
        fragment: str,
        kind: SelectorKind | None = None,
        *,
        config: BuilderConfig | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._config = config or BuilderConfig()
        self._log = logger or logging.getLogger(self._config.logger_name)
        self._fragments: list[str] = [fragment]
        self._used: set[SelectorKind] = set()
        if kind is not None and kind.is_singleton:
            self._used.add(kind)
        self._last_kind = kind
        self._consumed = False

    # --- chainable appends ----------------------------------------------------

    def element(self, name: str) -> SelectorExpression:
        return self._append(SelectorKind.ELEMENT, name)

    def id(self, name: str) -> SelectorExpression:
        return self._append(SelectorKind.ID, name)

    def class_(self, name: str) -> SelectorExpression:
        return self._append(SelectorKind.CLASS, name)

    def attr(self, spec: str) -> SelectorExpression:
        return self._append(SelectorKind.ATTRIBUTE, spec)

    def pseudo_class(self, name: str) -> SelectorExpression:
        return self._append(SelectorKind.PSEUDO_CLASS, name)

    def pseudo_element(self, name: str) -> SelectorExpression:
        return self._append(SelectorKind.PSEUDO_ELEMENT, name)

    # --- rendering ------------------------------------------------------------

    def render(self) -> str:
        """Join the fragments in append order and reset the expression."""
        if self._consumed:
            raise SelectorConsumedError()
        selector = "".join(self._fragments)
        self._reset()
        if self._config.consume_on_render:
            self._consumed = True
        return selector

    # --- introspection --------------------------------------------------------

    @property
    def fragments(self) -> tuple[str, ...]:
        return tuple(self._fragments)

    @property
    def last_kind(self) -> SelectorKind | None:
        return self._last_kind

    @property
    def used_kinds(self) -> frozenset[SelectorKind]:
        """Singleton kinds already present in this expression."""
        return frozenset(self._used)

    @property
    def consumed(self) -> bool:
        return self._consumed

    def __len__(self) -> int:
        return len(self._fragments)

    def __repr__(self) -> str:
        return f"SelectorExpression({''.join(self._fragments)!r})"

    # --- internals ------------------------------------------------------------

    def _append(self, kind: SelectorKind, value: str) -> SelectorExpression:
        if self._consumed:
            raise SelectorConsumedError(kind)
        if kind.is_singleton and kind in self._used:
            self._log.debug("Rejected duplicate %s %r", kind.value, value)
            raise DuplicateSingletonError(kind)
        if not self._accepts(kind):
            self._log.debug(
                "Rejected %s %r after %s", kind.value, value, self._last_kind.value
            )
            raise OrderViolationError(kind, previous=self._last_kind)
        if kind.is_singleton:
            self._used.add(kind)
        self._fragments.append(kind.decorate(value))
        self._last_kind = kind
        return self

    def _accepts(self, kind: SelectorKind) -> bool:
        # Kinds only ever increase between resets, so comparing with the
        # previous kind is the same as comparing with the maximum seen.
        if self._last_kind is None:
            return True
        return self._last_kind.rank <= kind.rank

    def _reset(self) -> None:
        self._fragments = []
        self._used.clear()
        self._last_kind = None
