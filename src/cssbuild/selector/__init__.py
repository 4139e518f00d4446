from cssbuild.selector.kinds import SelectorKind
from cssbuild.selector.errors import (
    DuplicateSingletonError,
    OrderViolationError,
    SelectorConsumedError,
    SelectorError,
)
from cssbuild.selector.expression import SelectorExpression
from cssbuild.selector.builder import SelectorBuilder, css_selector_builder

__all__ = [
    "SelectorKind",
    "SelectorError",
    "DuplicateSingletonError",
    "OrderViolationError",
    "SelectorConsumedError",
    "SelectorExpression",
    "SelectorBuilder",
    "css_selector_builder",
]
