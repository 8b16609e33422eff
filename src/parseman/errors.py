"""Exceptions raised by the command-line parser.

Every error derives from :class:`ParsemanError`, and each one also subclasses
the closest built-in exception so callers can catch either.
"""

from typing import Any, Hashable

__all__ = [
    "ParsemanError",
    "PatternSyntaxError",
    "BadParserType",
    "ConversionError",
    "UnregisteredCommandError",
]


def _type_name(value_type: Any) -> str:
    return getattr(value_type, "__name__", repr(value_type))


class ParsemanError(Exception):
    """Base class for all parser errors."""


class PatternSyntaxError(ParsemanError, ValueError):
    """A pattern handed to ``Parser.set_pattern`` failed to compile."""

    def __init__(self, cmd: Hashable, pattern: str, reason: str):
        self.cmd = cmd
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid pattern for {cmd!r}: {pattern!r} ({reason})")


class BadParserType(ParsemanError, TypeError):
    """
    Raised by ``Parser.get`` when the requested type does not match the type
    declared with ``Parser.set_type``.

    Boolean requests never raise this error, since they are used as presence
    checks for any command.
    """

    def __init__(self, cmd: Hashable, declared: Any, requested: Any):
        self.cmd = cmd
        self.declared = declared
        self.requested = requested
        super().__init__(
            f"A bad type check has occurred for {cmd!r}: declared "
            f"{_type_name(declared)}, requested {_type_name(requested)}"
        )


class ConversionError(ParsemanError, ValueError):
    """The extracted submatch text could not be converted to the requested type."""

    def __init__(self, cmd: Hashable, text: str, value_type: Any):
        self.cmd = cmd
        self.text = text
        self.value_type = value_type
        super().__init__(
            f"Cannot convert {text!r} to {_type_name(value_type)} for {cmd!r}"
        )


class UnregisteredCommandError(ParsemanError, LookupError):
    """A command was looked up before its pattern or type was registered."""

    def __init__(self, cmd: Hashable, missing: str):
        self.cmd = cmd
        self.missing = missing
        super().__init__(f"No {missing} registered for {cmd!r}")
