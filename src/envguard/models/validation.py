"""Validation outcome models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class IssueKind(str, Enum):
    """Why a (key, value) pair was rejected."""

    EMPTY_INPUT = "empty_input"
    UNKNOWN_KEY = "unknown_key"
    INVALID_VALUE = "invalid_value"


class ValidationIssue(BaseModel):
    """Details of a rejected (key, value) pair."""

    model_config = {"frozen": True}

    kind: IssueKind = Field(description="Issue kind")
    key: str = Field(description="Variable name that was checked")
    value: str = Field(description="Value that was checked")
    allowed: tuple[str, ...] = Field(
        default=(), description="Allowed values for the key, if known"
    )
    message: str = Field(description="Human-readable reason")

    def __str__(self) -> str:
        return self.message


class ValidationResult(BaseModel):
    """Outcome of a validation: valid, or invalid with a reason."""

    model_config = {"frozen": True}

    valid: bool = Field(description="Whether the pair was accepted")
    issue: ValidationIssue | None = Field(default=None, description="Rejection details")

    @classmethod
    def ok(cls) -> ValidationResult:
        return cls(valid=True)

    @classmethod
    def fail(cls, issue: ValidationIssue) -> ValidationResult:
        return cls(valid=False, issue=issue)

    @property
    def kind(self) -> IssueKind | None:
        return self.issue.kind if self.issue else None

    @property
    def reason(self) -> str | None:
        return self.issue.message if self.issue else None

    def __bool__(self) -> bool:
        return self.valid
