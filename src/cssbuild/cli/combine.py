"""CLI command: cssbuild combine -- join two selectors with a combinator."""

from __future__ import annotations

import sys

import click

from cssbuild.cli.parts import build_expression, make_builder, parse_part
from cssbuild.selector import SelectorError


@click.command()
@click.argument("left")
@click.argument("combinator")
@click.argument("right")
def combine(left: str, combinator: str, right: str) -> None:
    """Combine two selectors, each given as whitespace-separated KIND=VALUE parts.

    Example: cssbuild combine "element=div id=main" + "element=table id=data"
    """
    left_parts = [parse_part(p) for p in left.split()]
    right_parts = [parse_part(p) for p in right.split()]
    if not left_parts or not right_parts:
        raise click.BadParameter("both selectors need at least one part")

    builder = make_builder()
    try:
        combined = builder.combine(
            build_expression(left_parts, builder),
            combinator,
            build_expression(right_parts, builder),
        )
    except SelectorError as exc:
        click.echo(f"Selector error: {exc}", err=True)
        sys.exit(1)

    click.echo(combined.render())
