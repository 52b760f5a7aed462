"""Integration tests for end-to-end workflows."""

import pytest
from typer.testing import CliRunner

from envguard import EnvRuleValidator, IssueKind, RuleTable, ValidEnvKey
from envguard.cli.main import app
from envguard.knowledge import get_default_rule_table


class TestValidationWorkflow:
    """The reference scenarios through the public API."""

    @pytest.fixture
    def shared_validator(self):
        """One table built at startup, shared by the validator."""
        return EnvRuleValidator(get_default_rule_table())

    @pytest.mark.parametrize(
        "key,value,expected",
        [
            ("FOO", "bar", None),
            ("FOO", "baz", IssueKind.INVALID_VALUE),
            ("FOO", "", IssueKind.EMPTY_INPUT),
            ("", "bar", IssueKind.EMPTY_INPUT),
            ("UNKNOWN", "x", IssueKind.UNKNOWN_KEY),
        ],
    )
    def test_scenarios(self, shared_validator, key, value, expected):
        """Test each scenario's outcome."""
        result = shared_validator.validate(key, value)
        assert result.kind == expected
        assert result.valid is (expected is None)

    def test_gate_then_validate(self, shared_validator):
        """Test is_known_key gating the strict check."""
        env = {"FOO": "bar", "PINK": "grey", "PATH": "/usr/bin"}
        checked = {
            key: shared_validator.validate(key, value)
            for key, value in env.items()
            if shared_validator.is_known_key(key)
        }
        assert set(checked) == {"FOO", "PINK"}
        assert checked["FOO"].valid
        assert checked["PINK"].issue.allowed == ("elephant",)

    def test_extending_the_table(self):
        """Test a new rule needs only a new table entry."""
        table = RuleTable.from_mapping(
            {**get_default_rule_table().as_mapping(), "COLOR": ("red", "blue")}
        )
        validator = EnvRuleValidator(table)
        assert validator.validate("COLOR", "blue").valid
        assert validator.validate(ValidEnvKey.FOO.as_str(), "bar").valid


class TestCliWorkflow:
    """A full CLI run: env check, count and stdin sentinel."""

    def test_check_env_and_sentinel(self):
        """Test all three outputs in order."""
        runner = CliRunner()
        result = runner.invoke(
            app,
            ["--check-env"],
            env={"FOO": "bar", "ENVGUARD_LOG_LEVEL": None},
            input="  pink  \n",
        )

        assert result.exit_code == 0
        output = result.output
        assert output.index("ENV: FOO=bar") < output.index("Count: 1") < output.index("elephant")
