"""Helpers turning ``KIND=VALUE`` command-line parts into selector expressions."""

from __future__ import annotations

import click

from cssbuild.config import BuilderConfig
from cssbuild.selector import SelectorBuilder, SelectorExpression, SelectorKind

_APPENDERS = {
    SelectorKind.ELEMENT: SelectorExpression.element,
    SelectorKind.ID: SelectorExpression.id,
    SelectorKind.CLASS: SelectorExpression.class_,
    SelectorKind.ATTRIBUTE: SelectorExpression.attr,
    SelectorKind.PSEUDO_CLASS: SelectorExpression.pseudo_class,
    SelectorKind.PSEUDO_ELEMENT: SelectorExpression.pseudo_element,
}


def parse_part(raw: str) -> tuple[SelectorKind, str]:
    """Split ``kind=value`` on the first ``=``; the value may contain more."""
    kind_name, sep, value = raw.partition("=")
    if not sep:
        raise click.BadParameter(f"expected KIND=VALUE, got {raw!r}")
    try:
        kind = SelectorKind(kind_name.strip())
    except ValueError:
        choices = ", ".join(k.value for k in SelectorKind)
        raise click.BadParameter(
            f"unknown selector kind {kind_name!r} (choose from {choices})"
        ) from None
    return kind, value


def build_expression(
    parts: list[tuple[SelectorKind, str]], builder: SelectorBuilder
) -> SelectorExpression:
    """Seed an expression with the first part and append the rest in order."""
    (first_kind, first_value), *rest = parts
    expr = builder.start(first_kind, first_value)
    for kind, value in rest:
        _APPENDERS[kind](expr, value)
    return expr


def make_builder() -> SelectorBuilder:
    return SelectorBuilder(BuilderConfig.from_env())
