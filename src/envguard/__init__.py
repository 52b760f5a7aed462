"""envguard: a small command-line gate for arguments, environment and stdin.

The package centres on an immutable rule table that maps recognized
environment variables to the values they may take:

- **Rule table**: ``FOO -> bar`` and ``PINK -> elephant``
- **Validator**: checks a (key, value) pair and reports why it was rejected
- **Driver**: counts arguments, rejects ``--bad-flag``, validates ``FOO``
  on ``--check-env`` and answers the ``pink`` sentinel on stdin

Usage:
    # Library API
    from envguard import EnvRuleValidator

    validator = EnvRuleValidator()
    result = validator.validate("FOO", "baz")
    print(result.reason)

CLI:
    envguard
    envguard --check-env
    echo pink | envguard
"""

__version__ = "0.1.0"

from envguard.core.validator import EnvRuleValidator
from envguard.core.driver import GuardDriver

from envguard.models.rules import EnvRule, RuleTable, ValidEnvKey
from envguard.models.validation import IssueKind, ValidationIssue, ValidationResult

from envguard.knowledge.env_rules import get_default_rule_table

from envguard.utils.errors import EnvGuardError

__all__ = [
    "__version__",
    # Core
    "EnvRuleValidator",
    "GuardDriver",
    # Models
    "EnvRule",
    "RuleTable",
    "ValidEnvKey",
    "IssueKind",
    "ValidationIssue",
    "ValidationResult",
    # Knowledge
    "get_default_rule_table",
    # Errors
    "EnvGuardError",
]
