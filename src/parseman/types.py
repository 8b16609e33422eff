"""Value type tags and submatch conversion."""

import re
from typing import Any, Callable, Hashable, TypeVar

from parseman.errors import BadParserType, ConversionError

__all__ = [
    "BOOL_WORDS",
    "check_requested_type",
    "convert",
    "is_presence_request",
]

T = TypeVar("T")

# Literal words accepted for boolean submatches (case-sensitive)
BOOL_WORDS: dict[str, bool] = {"true": True, "false": False}

# Plain ASCII numerals; int()/float() alone would also take '1_000', 'nan', 'inf' and non-ASCII digits
NUMBER_FORMS: dict[type, re.Pattern] = {
    int: re.compile(r"[+-]?[0-9]+", re.ASCII),
    float: re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?", re.ASCII),
}


def is_presence_request(value_type: Any) -> bool:
    """Return True when ``value_type`` asks for a boolean result."""
    return value_type is bool


def check_requested_type(cmd: Hashable, declared: Any, requested: Any) -> None:
    """
    Ensure the requested type may be retrieved for a command.

    Args:
        cmd: Command key, used for the error message
        declared: Type registered with ``Parser.set_type``
        requested: Type passed to ``Parser.get``

    Raises:
        BadParserType: If ``requested`` is not bool and differs from ``declared``
    """
    if is_presence_request(requested):
        return
    if requested != declared:
        raise BadParserType(cmd, declared, requested)


def convert(cmd: Hashable, text: str, value_type: Callable[[str], T]) -> T:
    """
    Convert extracted submatch text to ``value_type``.

    Examples:
        '' as bool -> False (the pattern did not match)
        'true' as bool -> True
        '90' as int -> 90
        '1.5' as float -> 1.5
        'Hello, World!' as str -> 'Hello, World!'

    Surrounding whitespace is ignored for bool, int and float. Numbers must
    be plain ASCII numerals: '1_000', 'nan', 'inf' and non-ASCII digits are
    rejected.

    Args:
        cmd: Command key, used for the error message
        text: Submatch text, empty when there was no match or no such group
        value_type: Target type

    Returns:
        The converted value

    Raises:
        ConversionError: If the text cannot be parsed as ``value_type``
    """
    if is_presence_request(value_type):
        word = text.strip()
        if word == "":
            return False  # type: ignore[return-value]
        try:
            return BOOL_WORDS[word]  # type: ignore[return-value]
        except KeyError:
            raise ConversionError(cmd, text, value_type) from None

    if value_type is str:
        return text  # type: ignore[return-value]

    if value_type in NUMBER_FORMS:
        text = text.strip()
        if not NUMBER_FORMS[value_type].fullmatch(text):
            raise ConversionError(cmd, text, value_type)

    try:
        return value_type(text)
    except (ValueError, TypeError, ArithmeticError) as e:
        raise ConversionError(cmd, text, value_type) from e
