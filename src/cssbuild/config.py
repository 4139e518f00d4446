from __future__ import annotations

import os
from dataclasses import dataclass

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class BuilderConfig:
    consume_on_render: bool = False  # render() leaves the expression unusable
    logger_name: str = "cssbuild"

    @classmethod
    def from_env(cls) -> BuilderConfig:
        """Create a config from environment variables.

        Reads CSSBUILD_CONSUME_ON_RENDER and CSSBUILD_LOGGER; unset variables
        keep their defaults.
        """
        consume = os.environ.get("CSSBUILD_CONSUME_ON_RENDER", "")
        return cls(
            consume_on_render=consume.strip().lower() in _TRUTHY,
            logger_name=os.environ.get("CSSBUILD_LOGGER", cls.logger_name),
        )
