"""CLI command: cssbuild build -- build one compound selector."""

from __future__ import annotations

import sys

import click

from cssbuild.cli.parts import build_expression, make_builder, parse_part
from cssbuild.selector import SelectorError


@click.command()
@click.argument("parts", nargs=-1, required=True)
def build(parts: tuple[str, ...]) -> None:
    """Build a selector from KIND=VALUE parts, in the order given.

    Example: cssbuild build element=a 'attribute=href$=".png"' pseudo-class=focus
    """
    parsed = [parse_part(p) for p in parts]

    try:
        expr = build_expression(parsed, make_builder())
    except SelectorError as exc:
        click.echo(f"Selector error: {exc}", err=True)
        sys.exit(1)

    click.echo(expr.render())
