"""Data models for envguard.

All models are Pydantic BaseModel with frozen=True for immutability.
"""

from envguard.models.common import ErrorReport
from envguard.models.rules import EnvRule, RuleTable, ValidEnvKey
from envguard.models.validation import IssueKind, ValidationIssue, ValidationResult

__all__ = [
    # Rules
    "EnvRule",
    "RuleTable",
    "ValidEnvKey",
    # Validation
    "IssueKind",
    "ValidationIssue",
    "ValidationResult",
    # Common
    "ErrorReport",
]
