"""Reference rule table for recognized environment variables."""

from envguard.models.rules import EnvRule, RuleTable, ValidEnvKey


def get_default_rules() -> list[EnvRule]:
    """Get the reference validation rules.

    Returns:
        One rule per recognized variable
    """
    return [
        EnvRule(key=ValidEnvKey.FOO.as_str(), valid_values=("bar",)),
        EnvRule(key=ValidEnvKey.PINK.as_str(), valid_values=("elephant",)),
    ]


def get_default_rule_table() -> RuleTable:
    """Build the reference rule table.

    Called once at startup; the result is immutable and may be shared.
    """
    return RuleTable.from_rules(get_default_rules())
