"""cssbuild: ordered CSS selector builder."""
from __future__ import annotations

__version__ = "0.1.0"

from cssbuild.config import BuilderConfig
from cssbuild.model import Rectangle
from cssbuild.selector import (
    DuplicateSingletonError,
    OrderViolationError,
    SelectorBuilder,
    SelectorConsumedError,
    SelectorError,
    SelectorExpression,
    SelectorKind,
    css_selector_builder,
)
from cssbuild.serialization import RehydrationError, from_json, to_json

__all__ = [
    "__version__",
    # config
    "BuilderConfig",
    # selector
    "SelectorKind",
    "SelectorExpression",
    "SelectorBuilder",
    "css_selector_builder",
    # errors
    "SelectorError",
    "DuplicateSingletonError",
    "OrderViolationError",
    "SelectorConsumedError",
    "RehydrationError",
    # collaborators
    "Rectangle",
    "to_json",
    "from_json",
]
