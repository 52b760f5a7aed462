"""Rule table data models."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Iterable, Mapping

from pydantic import BaseModel, Field, PrivateAttr, field_validator


class ValidEnvKey(str, Enum):
    """Environment variables recognized by envguard."""

    FOO = "FOO"
    PINK = "PINK"

    def as_str(self) -> str:
        """Canonical text form of the variable name."""
        return self.value

    @classmethod
    def all(cls) -> list[ValidEnvKey]:
        """Every recognized key, in declaration order."""
        return list(cls)


class EnvRule(BaseModel):
    """A single rule: a variable name and the values it may take."""

    model_config = {"frozen": True}

    key: str = Field(description="Environment variable name")
    valid_values: tuple[str, ...] = Field(description="Allowed values, in order")

    @field_validator("key")
    @classmethod
    def _key_not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("rule key cannot be empty")
        return v

    @field_validator("valid_values")
    @classmethod
    def _values_not_empty(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        if not v:
            raise ValueError("rule must allow at least one value")
        return v


class RuleTable(BaseModel):
    """Immutable mapping of variable names to their allowed values.

    Build it once and share it freely; nothing mutates it after
    construction.

    Example:
        table = RuleTable.from_rules([EnvRule(key="FOO", valid_values=("bar",))])
        table.allowed("FOO")  # ("bar",)
    """

    model_config = {"frozen": True}

    entries: tuple[EnvRule, ...] = Field(default=(), description="Rules in table order")

    _lookup: Mapping[str, tuple[str, ...]] = PrivateAttr(default_factory=dict)

    @field_validator("entries")
    @classmethod
    def _unique_keys(cls, v: tuple[EnvRule, ...]) -> tuple[EnvRule, ...]:
        seen: set[str] = set()
        for rule in v:
            if rule.key in seen:
                raise ValueError(f"Duplicate rule for environment variable: {rule.key}")
            seen.add(rule.key)
        return v

    def model_post_init(self, __context: object) -> None:
        self._lookup = MappingProxyType({r.key: r.valid_values for r in self.entries})

    @classmethod
    def from_rules(cls, rules: Iterable[EnvRule]) -> RuleTable:
        """Build a table from rules.

        Raises:
            pydantic.ValidationError: If two rules share a key
        """
        return cls(entries=tuple(rules))

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Iterable[str]]) -> RuleTable:
        """Build a table from a ``{name: values}`` mapping."""
        return cls.from_rules(
            EnvRule(key=key, valid_values=tuple(values)) for key, values in mapping.items()
        )

    def contains(self, key: str) -> bool:
        return key in self._lookup

    def allowed(self, key: str) -> tuple[str, ...]:
        """Allowed values for ``key``, empty when the key is unknown."""
        return self._lookup.get(key, ())

    def keys(self) -> list[str]:
        return list(self._lookup)

    def rules(self) -> list[EnvRule]:
        return list(self.entries)

    def as_mapping(self) -> Mapping[str, tuple[str, ...]]:
        """Read-only view of the table."""
        return self._lookup

    def __contains__(self, key: object) -> bool:
        return key in self._lookup

    def __len__(self) -> int:
        return len(self.entries)
