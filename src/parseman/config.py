"""Configuration for the parser and its logging."""

import os
import re
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv

_TRUE_WORDS = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value.strip().lower() in _TRUE_WORDS


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}") from None


@dataclass
class ParserConfig:
    """Configuration for a Parser instance."""

    # Submatch extracted by get() when none is given
    default_submatch: int = 2

    # Emit every retrieved value at INFO instead of DEBUG
    trace_retrievals: bool = False

    # re flags used when compiling pattern text
    flags: int = re.MULTILINE

    @classmethod
    def from_env(cls, prefix: str = "PARSEMAN_", dotenv: bool = True) -> "ParserConfig":
        """
        Build a config from environment variables.

        Reads ``<prefix>DEFAULT_SUBMATCH`` and ``<prefix>TRACE``.

        Args:
            prefix: Environment variable prefix
            dotenv: Whether to load a ``.env`` file first

        Returns:
            ParserConfig populated from the environment

        Raises:
            ValueError: If an integer variable cannot be parsed
        """
        if dotenv:
            load_dotenv(find_dotenv(usecwd=True))
        return cls(
            default_submatch=_env_int(f"{prefix}DEFAULT_SUBMATCH", cls.default_submatch),
            trace_retrievals=_env_flag(f"{prefix}TRACE", cls.trace_retrievals),
        )


@dataclass
class LoggingConfig:
    """Configuration passed to setup_logger()."""

    log_level: str = "INFO"
    console_output: bool = True
    log_file: Optional[str] = None

    @classmethod
    def from_env(cls, prefix: str = "PARSEMAN_", dotenv: bool = True) -> "LoggingConfig":
        """Build a logging config from ``<prefix>LOG_LEVEL``, ``<prefix>LOG_CONSOLE`` and ``<prefix>LOG_FILE``."""
        if dotenv:
            load_dotenv(find_dotenv(usecwd=True))
        return cls(
            log_level=os.getenv(f"{prefix}LOG_LEVEL", cls.log_level).upper(),
            console_output=_env_flag(f"{prefix}LOG_CONSOLE", cls.console_output),
            log_file=os.getenv(f"{prefix}LOG_FILE") or None,
        )
