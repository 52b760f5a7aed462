"""Core domain logic for envguard.

This module provides the rule validator and the command-line driver.
"""

from envguard.core.validator import EnvRuleValidator
from envguard.core.driver import GuardDriver

__all__ = [
    "EnvRuleValidator",
    "GuardDriver",
]
