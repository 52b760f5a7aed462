"""Command-line driver logic: argument checks, env check and stdin sentinel."""

from __future__ import annotations

import os
import sys
from typing import Mapping, Sequence, TextIO

from envguard.core.validator import EnvRuleValidator
from envguard.models.rules import ValidEnvKey
from envguard.utils.errors import (
    ArgumentCountError,
    DisallowedFlagError,
    EnvironmentValueError,
    MissingEnvironmentVariableError,
    StdinReadError,
)
from envguard.utils.logging import get_logger, get_logger_with_context

logger = get_logger("driver")

INVALID_FLAG = "--bad-flag"
VALID_FLAG = "--check-env"
MAX_ARGUMENTS = 1

CHECKED_KEY = ValidEnvKey.FOO
SENTINEL_KEY = ValidEnvKey.PINK


class GuardDriver:
    """Runs the envguard checks for one process invocation.

    Processing order:

    1. reject ``--bad-flag`` anywhere in the arguments
    2. reject more than one argument
    3. with ``--check-env``, validate ``FOO`` from the environment
    4. log the argument count
    5. read one line from stdin and answer the sentinel word

    Every failure is raised as an ``EnvGuardError`` subclass; the caller
    decides how to exit.

    Example:
        driver = GuardDriver()
        driver.run(["--check-env"])
    """

    def __init__(
        self,
        validator: EnvRuleValidator | None = None,
        environ: Mapping[str, str] | None = None,
        stdin: TextIO | None = None,
    ) -> None:
        """Initialize the driver.

        Args:
            validator: Validator for the env check. Uses the built-in
                rule table if None.
            environ: Environment to read from. Defaults to ``os.environ``
                at call time.
            stdin: Stream to read the sentinel line from. Defaults to
                ``sys.stdin`` at call time.
        """
        self._validator = validator or EnvRuleValidator()
        self._environ = environ
        self._stdin = stdin

    @property
    def validator(self) -> EnvRuleValidator:
        return self._validator

    @property
    def sentinel_word(self) -> str:
        return SENTINEL_KEY.as_str().lower()

    @property
    def sentinel_response(self) -> str:
        return "|".join(self._validator.table.allowed(SENTINEL_KEY.as_str()))

    def run(self, args: Sequence[str]) -> int:
        """Run argument handling followed by the stdin check.

        Args:
            args: Command-line arguments, program name excluded

        Returns:
            Number of arguments counted
        """
        count = self.handle_args(args)
        self.read_from_stdin()
        return count

    def handle_args(self, args: Sequence[str]) -> int:
        """Validate the arguments, run flag actions and log the count."""
        self.verify_input_flags(args)

        if len(args) > MAX_ARGUMENTS:
            raise ArgumentCountError(len(args))

        if args:
            self.process_flags(args)

        logger.info(f"Count: {len(args)}")
        return len(args)

    def verify_input_flags(self, args: Sequence[str]) -> None:
        if INVALID_FLAG in args:
            raise DisallowedFlagError(INVALID_FLAG)

    def process_flags(self, args: Sequence[str]) -> None:
        if VALID_FLAG in args:
            self.check_environment(CHECKED_KEY.as_str())

    def check_environment(self, key: str) -> str:
        """Validate an environment variable's current value.

        A key without a rule is only reported; its value is not checked.

        Args:
            key: Variable to read

        Returns:
            The accepted value

        Raises:
            MissingEnvironmentVariableError: If the variable is not set
            EnvironmentValueError: If the validator rejects the value
        """
        environ = self._environ if self._environ is not None else os.environ
        value = environ.get(key)
        if value is None:
            raise MissingEnvironmentVariableError(key)

        context_logger = get_logger_with_context(logger.name, key=key)
        if self._validator.is_known_key(key):
            result = self._validator.validate(key, value)
            if not result.valid:
                raise EnvironmentValueError(key, value, result.reason)
        else:
            context_logger.warning(f"No rule for environment variable: {key}, value not checked")

        context_logger.info(f"ENV: {key}={value}")
        return value

    def read_from_stdin(self) -> str | None:
        """Read one line and answer it if it is the sentinel word.

        Returns:
            The response that was logged, or None if the line did not match

        Raises:
            StdinReadError: If the stream cannot be read
        """
        stream = self._stdin if self._stdin is not None else sys.stdin
        try:
            line = stream.readline()
        except (OSError, ValueError) as e:
            raise StdinReadError() from e

        if line.strip().lower() != self.sentinel_word:
            return None

        response = self.sentinel_response
        logger.info(response)
        return response
