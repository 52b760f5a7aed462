"""Utility functions for envguard."""

from envguard.utils.logging import configure_logging, get_logger, get_logger_with_context
from envguard.utils.errors import (
    EnvGuardError,
    ArgumentCountError,
    DisallowedFlagError,
    MissingEnvironmentVariableError,
    EnvironmentValueError,
    StdinReadError,
    ConfigurationError,
)
from envguard.utils.config import GuardConfig, get_default_config, load_config

__all__ = [
    # Logging
    "configure_logging",
    "get_logger",
    "get_logger_with_context",
    # Errors
    "EnvGuardError",
    "ArgumentCountError",
    "DisallowedFlagError",
    "MissingEnvironmentVariableError",
    "EnvironmentValueError",
    "StdinReadError",
    "ConfigurationError",
    # Config
    "GuardConfig",
    "get_default_config",
    "load_config",
]
