"""Tests for BuilderConfig."""

import dataclasses

import pytest

from cssbuild.config import BuilderConfig


class TestBuilderConfig:
    def test_defaults(self):
        config = BuilderConfig()
        assert config.consume_on_render is False
        assert config.logger_name == "cssbuild"

    def test_frozen(self):
        config = BuilderConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.consume_on_render = True  # type: ignore[misc]


class TestFromEnv:
    def test_unset(self, monkeypatch):
        monkeypatch.delenv("CSSBUILD_CONSUME_ON_RENDER", raising=False)
        monkeypatch.delenv("CSSBUILD_LOGGER", raising=False)
        assert BuilderConfig.from_env() == BuilderConfig()

    @pytest.mark.parametrize("value", ["1", "true", "YES", " on "])
    def test_truthy(self, monkeypatch, value):
        monkeypatch.setenv("CSSBUILD_CONSUME_ON_RENDER", value)
        assert BuilderConfig.from_env().consume_on_render is True

    @pytest.mark.parametrize("value", ["0", "false", "", "nope"])
    def test_falsy(self, monkeypatch, value):
        monkeypatch.setenv("CSSBUILD_CONSUME_ON_RENDER", value)
        assert BuilderConfig.from_env().consume_on_render is False

    def test_logger_name(self, monkeypatch):
        monkeypatch.setenv("CSSBUILD_LOGGER", "app.selectors")
        assert BuilderConfig.from_env().logger_name == "app.selectors"
