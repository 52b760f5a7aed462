"""EnvRuleValidator for checking environment variable values."""

from __future__ import annotations

import json

from envguard.models.rules import RuleTable
from envguard.models.validation import IssueKind, ValidationIssue, ValidationResult
from envguard.utils.logging import get_logger, get_logger_with_context

logger = get_logger("validator")


class EnvRuleValidator:
    """Validator for (key, value) pairs against a rule table.

    The validator owns an immutable RuleTable and keeps no other state,
    so the same inputs always produce the same result. Rejections are
    returned, not raised; each one is logged at ERROR level first.

    Example:
        validator = EnvRuleValidator()
        result = validator.validate("FOO", "baz")

        if not result.valid:
            print(result.reason)
    """

    def __init__(self, table: RuleTable | None = None) -> None:
        """Initialize the validator.

        Args:
            table: Rule table to validate against. Uses the built-in
                table if None.
        """
        if table is None:
            from envguard.knowledge.env_rules import get_default_rule_table

            table = get_default_rule_table()
        self._table = table

    @property
    def table(self) -> RuleTable:
        """The rule table this validator checks against."""
        return self._table

    def is_known_key(self, key: str) -> bool:
        """Check whether ``key`` has a rule in the table."""
        return self._table.contains(key)

    def validate(self, key: str, value: str) -> ValidationResult:
        """Validate a value for an environment variable.

        Args:
            key: Environment variable name
            value: Value to check

        Returns:
            ValidationResult, valid or carrying the rejection issue
        """
        if not key or not value:
            return self._reject(
                IssueKind.EMPTY_INPUT, key, value, (), "Key or value cannot be empty"
            )

        if not self._table.contains(key):
            return self._reject(
                IssueKind.UNKNOWN_KEY, key, value, (), f"Invalid environment variable: {key}"
            )

        allowed = self._table.allowed(key)
        if value not in allowed:
            return self._reject(
                IssueKind.INVALID_VALUE,
                key,
                value,
                allowed,
                f"Invalid value for environment variable: {key}, "
                f"found value: {value}, expected one of: {json.dumps(list(allowed))}",
            )

        return ValidationResult.ok()

    def _reject(
        self,
        kind: IssueKind,
        key: str,
        value: str,
        allowed: tuple[str, ...],
        message: str,
    ) -> ValidationResult:
        # Full detail, allowed values included, goes to ERROR on every rejection.
        get_logger_with_context(
            logger.name, kind=kind.value, key=key, value=value, allowed="|".join(allowed)
        ).error(message)
        return ValidationResult.fail(
            ValidationIssue(kind=kind, key=key, value=value, allowed=allowed, message=message)
        )
