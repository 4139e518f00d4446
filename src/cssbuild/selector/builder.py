"""Selector builder facade: one factory per selector kind plus ``combine``."""

from __future__ import annotations

import logging

from cssbuild.config import BuilderConfig
from cssbuild.selector.expression import SelectorExpression
from cssbuild.selector.kinds import SelectorKind

__all__ = ["SelectorBuilder", "css_selector_builder"]


class SelectorBuilder:
    """Entry point for building CSS selectors.

    Example::

        css_selector_builder.element("a").attr('href$=".png"').pseudo_class("focus").render()
        # 'a[href$=".png"]:focus'
    """

    def __init__(
        self,
        config: BuilderConfig | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.config = config or BuilderConfig()
        self._log = logger or logging.getLogger(self.config.logger_name)

    def element(self, name: str) -> SelectorExpression:
        return self.start(SelectorKind.ELEMENT, name)

    def id(self, name: str) -> SelectorExpression:
        return self.start(SelectorKind.ID, name)

    def class_(self, name: str) -> SelectorExpression:
        return self.start(SelectorKind.CLASS, name)

    def attr(self, spec: str) -> SelectorExpression:
        return self.start(SelectorKind.ATTRIBUTE, spec)

    def pseudo_class(self, name: str) -> SelectorExpression:
        return self.start(SelectorKind.PSEUDO_CLASS, name)

    def pseudo_element(self, name: str) -> SelectorExpression:
        return self.start(SelectorKind.PSEUDO_ELEMENT, name)

    def start(self, kind: SelectorKind, value: str) -> SelectorExpression:
        """Create an expression seeded with a single *kind* fragment."""
        return SelectorExpression(
            kind.decorate(value), kind, config=self.config, logger=self._log
        )

    def combine(
        self,
        left: SelectorExpression,
        combinator: str,
        right: SelectorExpression,
    ) -> SelectorExpression:
        """Join two selectors with *combinator*.

        Both operands are rendered (and therefore reset). The combinator is
        always padded with one space on each side, so ``" "`` yields three
        spaces between the operands. The result carries no kind and accepts
        any further append.
        """
        combined = f"{left.render()} {combinator} {right.render()}"
        self._log.debug("Combined selector %r", combined)
        return SelectorExpression(combined, config=self.config, logger=self._log)


css_selector_builder = SelectorBuilder()
