"""Tests for the cssbuild CLI commands."""
from __future__ import annotations

import logging

from click.testing import CliRunner

from cssbuild import __version__
from cssbuild.cli.main import cli


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help(self) -> None:
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "assemble CSS selectors" in result.output
        assert "build" in result.output
        assert "combine" in result.output

    def test_version(self) -> None:
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


# ---------------------------------------------------------------------------
# build command
# ---------------------------------------------------------------------------


class TestBuildCommand:
    def test_build(self) -> None:
        result = CliRunner().invoke(
            cli, ["build", "element=a", 'attribute=href$=".png"', "pseudo-class=focus"]
        )
        assert result.exit_code == 0
        assert result.output.strip() == 'a[href$=".png"]:focus'

    def test_build_single_part(self) -> None:
        result = CliRunner().invoke(cli, ["build", "id=main"])
        assert result.exit_code == 0
        assert result.output.strip() == "#main"

    def test_order_violation(self) -> None:
        result = CliRunner().invoke(cli, ["build", "class=x", "element=y"])
        assert result.exit_code == 1
        assert "Selector error" in result.output
        assert "following order" in result.output

    def test_duplicate(self) -> None:
        result = CliRunner().invoke(cli, ["build", "element=a", "element=b"])
        assert result.exit_code == 1
        assert "more then one time" in result.output

    def test_malformed_part(self) -> None:
        result = CliRunner().invoke(cli, ["build", "div"])
        assert result.exit_code == 2
        assert "KIND=VALUE" in result.output

    def test_unknown_kind(self) -> None:
        result = CliRunner().invoke(cli, ["build", "tag=div"])
        assert result.exit_code == 2
        assert "unknown selector kind" in result.output

    def test_requires_parts(self) -> None:
        result = CliRunner().invoke(cli, ["build"])
        assert result.exit_code == 2

    def test_consume_mode_from_env(self) -> None:
        result = CliRunner().invoke(
            cli,
            ["build", "element=a", "class=b"],
            env={"CSSBUILD_CONSUME_ON_RENDER": "1"},
        )
        assert result.exit_code == 0
        assert result.output.strip() == "a.b"

    def test_verbose_enables_debug_logging(self, monkeypatch) -> None:
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))
        result = CliRunner().invoke(cli, ["-v", "build", "element=a"])
        assert result.exit_code == 0
        assert calls == [{"level": logging.DEBUG}]


# ---------------------------------------------------------------------------
# combine command
# ---------------------------------------------------------------------------


class TestCombineCommand:
    def test_combine(self) -> None:
        result = CliRunner().invoke(
            cli, ["combine", "element=div id=main", "+", "element=table id=data"]
        )
        assert result.exit_code == 0
        assert result.output.strip() == "div#main + table#data"

    def test_combine_space(self) -> None:
        result = CliRunner().invoke(cli, ["combine", "element=a", " ", "element=b"])
        assert result.exit_code == 0
        assert result.output.rstrip("\n") == "a   b"

    def test_combine_error(self) -> None:
        result = CliRunner().invoke(
            cli, ["combine", "id=a id=b", ">", "element=c"]
        )
        assert result.exit_code == 1
        assert "Selector error" in result.output

    def test_combine_empty_side(self) -> None:
        result = CliRunner().invoke(cli, ["combine", "  ", ">", "element=c"])
        assert result.exit_code == 2
