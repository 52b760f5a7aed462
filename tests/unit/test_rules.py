"""Unit tests for rule table models and the built-in rules."""

import pytest
from pydantic import ValidationError

from envguard.knowledge import get_default_rule_table, get_default_rules
from envguard.models.rules import EnvRule, RuleTable, ValidEnvKey


class TestValidEnvKey:
    """Tests for ValidEnvKey enum."""

    def test_as_str(self):
        """Test canonical text form."""
        assert ValidEnvKey.FOO.as_str() == "FOO"
        assert ValidEnvKey.PINK.as_str() == "PINK"

    def test_all(self):
        """Test all keys in declaration order."""
        assert ValidEnvKey.all() == [ValidEnvKey.FOO, ValidEnvKey.PINK]


class TestEnvRule:
    """Tests for EnvRule model."""

    def test_frozen(self):
        """Test rules are immutable."""
        rule = EnvRule(key="FOO", valid_values=("bar",))
        with pytest.raises(ValidationError):
            rule.key = "BAR"

    def test_empty_key_rejected(self):
        """Test a rule needs a key."""
        with pytest.raises(ValidationError):
            EnvRule(key="", valid_values=("bar",))

    def test_empty_values_rejected(self):
        """Test a rule needs at least one value."""
        with pytest.raises(ValidationError):
            EnvRule(key="FOO", valid_values=())


class TestRuleTable:
    """Tests for RuleTable model."""

    def test_lookup(self, sample_rule_table):
        """Test membership and allowed values."""
        assert sample_rule_table.contains("MODE")
        assert "REGION" in sample_rule_table
        assert sample_rule_table.allowed("MODE") == ("fast", "safe")
        assert sample_rule_table.allowed("MISSING") == ()
        assert sample_rule_table.keys() == ["MODE", "REGION"]
        assert len(sample_rule_table) == 2

    def test_from_mapping(self):
        """Test building from a plain mapping."""
        table = RuleTable.from_mapping({"A": ["1", "2"], "B": ("x",)})
        assert table.allowed("A") == ("1", "2")
        assert table.allowed("B") == ("x",)

    def test_duplicate_keys_rejected(self):
        """Test two rules for one key fail construction."""
        with pytest.raises(ValidationError, match="Duplicate"):
            RuleTable.from_rules(
                [
                    EnvRule(key="A", valid_values=("1",)),
                    EnvRule(key="A", valid_values=("2",)),
                ]
            )

    def test_mapping_view_is_read_only(self, sample_rule_table):
        """Test the mapping view cannot be written."""
        view = sample_rule_table.as_mapping()
        with pytest.raises(TypeError):
            view["MODE"] = ("slow",)  # type: ignore[index]

    def test_frozen(self, sample_rule_table):
        """Test entries cannot be reassigned."""
        with pytest.raises(ValidationError):
            sample_rule_table.entries = ()

    def test_empty_table(self):
        """Test an empty table knows nothing."""
        table = RuleTable()
        assert len(table) == 0
        assert not table.contains("FOO")


class TestDefaultRules:
    """Tests for the built-in rule table."""

    def test_reference_entries(self):
        """Test FOO and PINK allow-lists."""
        table = get_default_rule_table()
        assert table.allowed("FOO") == ("bar",)
        assert table.allowed("PINK") == ("elephant",)
        assert len(table) == 2

    def test_every_key_has_rule(self):
        """Test each ValidEnvKey appears exactly once."""
        keys = [rule.key for rule in get_default_rules()]
        assert sorted(keys) == sorted(k.as_str() for k in ValidEnvKey.all())

    def test_fresh_tables_are_equal(self):
        """Test building twice gives equal tables."""
        assert get_default_rule_table().entries == get_default_rule_table().entries
