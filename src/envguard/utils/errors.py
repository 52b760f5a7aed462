"""Error types raised by the envguard driver.

The rule validator reports problems as values (see
``envguard.models.validation``); the exceptions here cover everything
around it that ends the process.
"""

from __future__ import annotations

from typing import Any

from envguard.models.common import ErrorReport


class EnvGuardError(Exception):
    """Base exception for envguard."""

    def __init__(self, message: str, code: str = "UNKNOWN_ERROR", details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def to_error_report(self) -> ErrorReport:
        """Convert to ErrorReport model."""
        return ErrorReport(code=self.code, message=self.message, details=self.details)


class ArgumentCountError(EnvGuardError):
    """Too many command-line arguments."""

    def __init__(self, count: int):
        super().__init__(
            "Incorrect arguments!",
            code="ARGUMENT_COUNT",
            details={"count": count},
        )


class DisallowedFlagError(EnvGuardError):
    """A disallowed flag was passed."""

    def __init__(self, flag: str):
        super().__init__(
            "Error: invalid flag detected!",
            code="DISALLOWED_FLAG",
            details={"flag": flag},
        )


class MissingEnvironmentVariableError(EnvGuardError):
    """The variable to check is not set."""

    def __init__(self, key: str):
        super().__init__(
            "Error reading env: does not exist!",
            code="MISSING_ENV",
            details={"key": key},
        )


class EnvironmentValueError(EnvGuardError):
    """The variable is set but its value was rejected."""

    def __init__(self, key: str, value: str, reason: str | None = None):
        details: dict[str, Any] = {"key": key, "value": value}
        if reason:
            details["reason"] = reason
        super().__init__(
            "Error in environment variable value.",
            code="INVALID_ENV_VALUE",
            details=details,
        )


class StdinReadError(EnvGuardError):
    """Standard input could not be read."""

    def __init__(self, message: str = "Error reading input!"):
        super().__init__(message, code="STDIN_READ")


class ConfigurationError(EnvGuardError):
    """Configuration error."""

    def __init__(self, message: str, config_key: str | None = None):
        details = {"config_key": config_key} if config_key else {}
        super().__init__(message, code="CONFIG_ERROR", details=details)
