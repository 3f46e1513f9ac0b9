"""chainlist configuration."""

from __future__ import annotations

import os

from pydantic import BaseModel, Field, field_validator

from chainlist.exceptions import ConfigError


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in ("1", "true", "yes", "on")


class RenderConfig(BaseModel):
    separator: str = " -> "
    trim_trailing: bool = Field(default_factory=lambda: _env_flag("CHAINLIST_TRIM_TRAILING"))

    @field_validator("separator")
    @classmethod
    def _non_empty(cls, v: str) -> str:
        if not v:
            raise ConfigError("separator must not be empty")
        return v


class ChainConfig(BaseModel):
    render: RenderConfig = Field(default_factory=RenderConfig)
    check_cycles: bool = Field(default_factory=lambda: _env_flag("CHAINLIST_CHECK_CYCLES"))


_config: ChainConfig | None = None


def get_config() -> ChainConfig:
    """Return the process-wide config, building it from the environment once."""
    global _config
    if _config is None:
        _config = ChainConfig()
    return _config


def set_config(config: ChainConfig | None) -> None:
    """Replace the process-wide config. ``None`` rebuilds it on next access."""
    global _config
    _config = config
