"""Built-in knowledge base.

Contains the rule table for the environment variables envguard
recognizes.
"""

from envguard.knowledge.env_rules import get_default_rule_table, get_default_rules

__all__ = [
    "get_default_rule_table",
    "get_default_rules",
]
