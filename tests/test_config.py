"""Unit tests for configuration loading."""

import re

import pytest

from parseman.config import LoggingConfig, ParserConfig


class TestParserConfig:
    """Tests for ParserConfig."""

    def test_defaults(self):
        config = ParserConfig()
        assert config.default_submatch == 2
        assert config.trace_retrievals is False
        assert config.flags == re.MULTILINE

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("PARSEMAN_DEFAULT_SUBMATCH", "1")
        monkeypatch.setenv("PARSEMAN_TRACE", "yes")

        config = ParserConfig.from_env(dotenv=False)

        assert config.default_submatch == 1
        assert config.trace_retrievals is True

    def test_from_env_defaults(self, monkeypatch):
        monkeypatch.delenv("PARSEMAN_DEFAULT_SUBMATCH", raising=False)
        monkeypatch.delenv("PARSEMAN_TRACE", raising=False)

        config = ParserConfig.from_env(dotenv=False)

        assert config == ParserConfig()

    def test_from_env_custom_prefix(self, monkeypatch):
        monkeypatch.setenv("MYAPP_DEFAULT_SUBMATCH", "0")

        config = ParserConfig.from_env(prefix="MYAPP_", dotenv=False)

        assert config.default_submatch == 0

    def test_invalid_integer(self, monkeypatch):
        monkeypatch.setenv("PARSEMAN_DEFAULT_SUBMATCH", "two")
        with pytest.raises(ValueError, match="PARSEMAN_DEFAULT_SUBMATCH"):
            ParserConfig.from_env(dotenv=False)

    def test_from_dotenv_file(self, monkeypatch, tmp_path):
        """A .env file in the working directory is honoured."""
        # setenv first so teardown also removes the value loaded from .env
        monkeypatch.setenv("PARSEMAN_DEFAULT_SUBMATCH", "")
        monkeypatch.delenv("PARSEMAN_DEFAULT_SUBMATCH")
        (tmp_path / ".env").write_text("PARSEMAN_DEFAULT_SUBMATCH=3\n")
        monkeypatch.chdir(tmp_path)

        config = ParserConfig.from_env()

        assert config.default_submatch == 3


class TestLoggingConfig:
    """Tests for LoggingConfig."""

    def test_from_env(self, monkeypatch, tmp_path):
        log_file = str(tmp_path / "parseman.log")
        monkeypatch.setenv("PARSEMAN_LOG_LEVEL", "debug")
        monkeypatch.setenv("PARSEMAN_LOG_CONSOLE", "0")
        monkeypatch.setenv("PARSEMAN_LOG_FILE", log_file)

        config = LoggingConfig.from_env(dotenv=False)

        assert config.log_level == "DEBUG"
        assert config.console_output is False
        assert config.log_file == log_file

    def test_defaults(self, monkeypatch):
        for name in ("PARSEMAN_LOG_LEVEL", "PARSEMAN_LOG_CONSOLE", "PARSEMAN_LOG_FILE"):
            monkeypatch.delenv(name, raising=False)

        assert LoggingConfig.from_env(dotenv=False) == LoggingConfig()
