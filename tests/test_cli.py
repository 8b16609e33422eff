"""Tests for the pattern checker CLI."""

from unittest.mock import patch

from typer.testing import CliRunner

from parseman.__main__ import app

runner = CliRunner()

ARGS = ["--", "test", "--bool-val", "true", "-i", "90", "--double", "1.5"]


class TestCheckCli:
    """Tests for `python -m parseman`."""

    def test_int_value(self):
        result = runner.invoke(app, [r"(-i\s*)(\d+)", "--type", "int", *ARGS])
        assert result.exit_code == 0
        assert "Value: 90" in result.output
        assert "Command line: 'test --bool-val true -i 90 --double 1.5 '" in result.output

    def test_bool_value(self):
        result = runner.invoke(app, [r"(--bool-val\s+)(true|false)", "-t", "bool", *ARGS])
        assert result.exit_code == 0
        assert "Value: True" in result.output

    def test_submatch_option(self):
        result = runner.invoke(app, [r"(--double\s*)(\d+\.\d+)", "--submatch", "0", *ARGS])
        assert result.exit_code == 0
        assert "Value: '--double 1.5'" in result.output

    def test_all_groups(self):
        result = runner.invoke(app, [r"(-i\s*)(\d+)", "--all-groups", *ARGS])
        assert result.exit_code == 0
        assert "[0] '-i 90'" in result.output
        assert "[2] '90'" in result.output

    def test_all_groups_without_match(self):
        result = runner.invoke(app, [r"(--nope)", "--all-groups", *ARGS])
        assert result.exit_code == 0
        assert "No match." in result.output

    def test_conversion_error_exit_code(self):
        result = runner.invoke(app, [r"(--bool-val\s+)(\w+)", "--type", "float", *ARGS])
        assert result.exit_code == 1
        assert "Cannot convert" in result.output

    def test_invalid_pattern_exit_code(self):
        result = runner.invoke(app, ["(unclosed", *ARGS])
        assert result.exit_code == 2
        assert "Invalid pattern" in result.output

    def test_errors_are_logged(self):
        with patch("parseman.__main__.logger") as mock_logger:
            result = runner.invoke(app, [r"(--bool-val\s+)(\w+)", "--type", "int", *ARGS])
        assert result.exit_code == 1
        mock_logger.error.assert_called_once()
        assert "Retrieval failed" in mock_logger.error.call_args[0][0]
