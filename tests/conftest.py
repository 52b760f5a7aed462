"""Shared test fixtures for envguard tests."""

import io
import logging

import pytest

from envguard.core.driver import GuardDriver
from envguard.core.validator import EnvRuleValidator
from envguard.models.rules import EnvRule, RuleTable


@pytest.fixture(autouse=True)
def reset_envguard_logger():
    """Undo configure_logging so caplog sees records again."""
    yield
    logger = logging.getLogger("envguard")
    logger.handlers = []
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def sample_rule_table() -> RuleTable:
    """Create a rule table with more than one allowed value per key."""
    return RuleTable.from_rules(
        [
            EnvRule(key="MODE", valid_values=("fast", "safe")),
            EnvRule(key="REGION", valid_values=("eu", "us", "ap")),
        ]
    )


@pytest.fixture
def validator() -> EnvRuleValidator:
    """Create a validator over the built-in rule table."""
    return EnvRuleValidator()


@pytest.fixture
def make_driver(validator: EnvRuleValidator):
    """Build a driver with a fixed environment and stdin text."""

    def _make(env: dict[str, str] | None = None, stdin: str = "") -> GuardDriver:
        return GuardDriver(
            validator=validator,
            environ=env if env is not None else {},
            stdin=io.StringIO(stdin),
        )

    return _make
