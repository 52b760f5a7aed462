"""Runtime settings for envguard.

envguard has no configuration file. The few runtime knobs it has are
read from ``ENVGUARD_*`` environment variables.
"""

from __future__ import annotations

import os
from typing import Mapping

from pydantic import BaseModel, Field, ValidationError, field_validator

from envguard.utils.errors import ConfigurationError

ENV_LOG_LEVEL = "ENVGUARD_LOG_LEVEL"
ENV_LOG_STRUCTURED = "ENVGUARD_LOG_STRUCTURED"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"", "0", "false", "no", "off"}


class GuardConfig(BaseModel):
    """Main configuration for envguard."""

    model_config = {"frozen": True}

    log_level: str = Field(default="INFO", description="Log level for stderr output")
    structured_logs: bool = Field(default=False, description="Use structured log format")

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log level must be one of {', '.join(LOG_LEVELS)}")
        return level


def _parse_bool(raw: str, key: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise ConfigurationError(f"Invalid boolean for {key}: {raw!r}", config_key=key)


def load_config(environ: Mapping[str, str] | None = None) -> GuardConfig:
    """Load configuration from environment variables.

    Args:
        environ: Mapping to read from. Defaults to ``os.environ``.

    Returns:
        Loaded configuration

    Raises:
        ConfigurationError: If a variable holds an unusable value
    """
    if environ is None:
        environ = os.environ

    data: dict[str, object] = {}
    if ENV_LOG_LEVEL in environ:
        data["log_level"] = environ[ENV_LOG_LEVEL]
    if ENV_LOG_STRUCTURED in environ:
        data["structured_logs"] = _parse_bool(environ[ENV_LOG_STRUCTURED], ENV_LOG_STRUCTURED)

    try:
        return GuardConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid configuration: {e.errors()[0]['msg']}", config_key=ENV_LOG_LEVEL
        ) from e


def get_default_config() -> GuardConfig:
    """Get the default configuration."""
    return GuardConfig()
