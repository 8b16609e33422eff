"""Regex-driven extraction of typed values from a command line."""

import re
from dataclasses import dataclass
from typing import Any, Callable, Hashable, Iterable, Optional, TypeVar, Union

from parseman.config import ParserConfig
from parseman.errors import PatternSyntaxError, UnregisteredCommandError
from parseman.logger import get_logger
from parseman.types import check_requested_type, convert

__all__ = ["Parser", "Retrieval", "RetrievalHook"]

logger = get_logger("parseman.parser")

T = TypeVar("T")


@dataclass(frozen=True)
class Retrieval:
    """A single value produced by Parser.get()."""

    cmd: Hashable
    submatch: int
    text: str
    value: Any


RetrievalHook = Callable[[Retrieval], None]


class Parser:
    """
    Extract typed values for application-defined commands from a command line.

    The argument vector is joined back into one string (each token followed by
    a single space) so that every command can be located with a regex search.
    Each command key, typically an ``enum.Enum`` member, needs a pattern
    (``set_pattern``) and a type (``set_type``) before ``get`` is called.

    Example:
        >>> p = Parser(["-i", "90"])
        >>> p.register(Opt.COUNT, r"(-i\\s*)(\\d+)", int)
        >>> p.get(Opt.COUNT, int)
        90

    Parser instances are not internally thread-safe: registering while another
    thread registers or retrieves must be serialized by the caller.
    """

    def __init__(self, argv: Iterable[str], config: Optional[ParserConfig] = None):
        """
        Args:
            argv: Argument tokens, usually ``sys.argv[1:]``
            config: Parser configuration (defaults to ``ParserConfig()``)

        Raises:
            TypeError: If ``argv`` is a single string
        """
        if isinstance(argv, str):
            raise TypeError("argv must be a sequence of tokens, not a string; use Parser.from_string()")
        self.config = config or ParserConfig()
        self._cmdline = "".join(f"{token} " for token in argv)
        self._patterns: dict[Hashable, re.Pattern] = {}
        self._types: dict[Hashable, Any] = {}
        self._hooks: list[RetrievalHook] = []
        logger.debug(f"Reconstructed command line: {self._cmdline!r}")

    @classmethod
    def from_string(cls, line: str, config: Optional[ParserConfig] = None) -> "Parser":
        """Build a parser from a single command-line string."""
        return cls([line], config=config)

    @property
    def cmdline(self) -> str:
        """The reconstructed command line, with a trailing space."""
        return self._cmdline

    def set_type(self, cmd: Hashable, value_type: Any) -> None:
        """
        Declare the value type of a command.

        Any callable type is accepted; ``bool``, ``int``, ``float`` and ``str``
        are the usual choices. A later call replaces the previous declaration.

        Args:
            cmd: Command key
            value_type: Type that ``get`` must be called with
        """
        if not callable(value_type):
            raise TypeError(f"value_type must be a type or callable, got {value_type!r}")
        self._types[cmd] = value_type
        logger.debug(f"Declared type {getattr(value_type, '__name__', value_type)} for {cmd!r}")

    def set_pattern(self, cmd: Hashable, pattern: Union[str, re.Pattern]) -> None:
        """
        Set the regular expression used to find a command.

        The pattern is searched for anywhere in the command line, not matched
        against all of it. A later call replaces the previous pattern.

        Args:
            cmd: Command key
            pattern: Pattern text, compiled with ``config.flags``, or a compiled pattern

        Raises:
            PatternSyntaxError: If the pattern text does not compile
        """
        if isinstance(pattern, re.Pattern):
            compiled = pattern
        else:
            try:
                compiled = re.compile(pattern, self.config.flags)
            except re.error as e:
                logger.warning(f"Rejected pattern {pattern!r} for {cmd!r}: {e}")
                raise PatternSyntaxError(cmd, pattern, str(e)) from e
        self._patterns[cmd] = compiled
        logger.debug(f"Set pattern {compiled.pattern!r} for {cmd!r}")

    def register(self, cmd: Hashable, pattern: Union[str, re.Pattern], value_type: Any) -> None:
        """Set both the pattern and the type of a command."""
        self.set_pattern(cmd, pattern)
        self.set_type(cmd, value_type)

    def is_registered(self, cmd: Hashable) -> bool:
        """Return True if the command has both a pattern and a type."""
        return cmd in self._patterns and cmd in self._types

    def matches(self, cmd: Hashable) -> bool:
        """
        Check whether the command's pattern occurs in the command line.

        Unlike ``get(cmd, bool)`` this ignores submatch text entirely.

        Raises:
            UnregisteredCommandError: If no pattern is registered for ``cmd``
        """
        return self._search(cmd) is not None

    def submatch(self, cmd: Hashable, index: int) -> str:
        """
        Return the raw text of a submatch.

        Group 0 is the whole match. An empty string is returned when the
        pattern does not match, when ``index`` is outside the pattern's
        groups, or when the group did not take part in the match.

        Raises:
            UnregisteredCommandError: If no pattern is registered for ``cmd``
        """
        match = self._search(cmd)
        if match is None or not 0 <= index <= match.re.groups:
            return ""
        return match.group(index) or ""

    def groups(self, cmd: Hashable) -> list[str]:
        """
        Return the text of every submatch, group 0 first.

        Returns an empty list when the pattern does not match.

        Raises:
            UnregisteredCommandError: If no pattern is registered for ``cmd``
        """
        match = self._search(cmd)
        if match is None:
            return []
        return [match.group(index) or "" for index in range(match.re.groups + 1)]

    def get(self, cmd: Hashable, value_type: Callable[..., T], submatch: Optional[int] = None) -> T:
        """
        Return the value of a command converted to ``value_type``.

        With ``bool`` the result reports whether the command was given: an
        empty submatch yields False and the words ``true``/``false`` yield
        their value. Every other type must equal the declared type.

        Args:
            cmd: Command key
            value_type: Requested type
            submatch: Group to convert; defaults to ``config.default_submatch`` (2).
                If you're having trouble with conversions, check this value.

        Returns:
            The converted value

        Raises:
            UnregisteredCommandError: If the pattern or type was never registered
            BadParserType: If ``value_type`` is not bool and differs from the declared type
            ConversionError: If the submatch cannot be parsed as ``value_type``
        """
        if cmd not in self._types:
            logger.warning(f"get() called for {cmd!r} without a declared type")
            raise UnregisteredCommandError(cmd, "type")
        check_requested_type(cmd, self._types[cmd], value_type)

        index = self.config.default_submatch if submatch is None else submatch
        text = self.submatch(cmd, index)
        value = convert(cmd, text, value_type)

        level = "INFO" if self.config.trace_retrievals else "DEBUG"
        logger.log(level, f"{cmd!r}[{index}] = {value!r}")
        if self._hooks:
            record = Retrieval(cmd=cmd, submatch=index, text=text, value=value)
            for hook in list(self._hooks):
                hook(record)
        return value

    def add_retrieval_hook(self, hook: RetrievalHook) -> None:
        """Call ``hook`` with a Retrieval record after every successful get()."""
        self._hooks.append(hook)

    def remove_retrieval_hook(self, hook: RetrievalHook) -> None:
        """Stop calling a hook added with add_retrieval_hook()."""
        self._hooks.remove(hook)

    def _search(self, cmd: Hashable) -> Optional[re.Match]:
        try:
            pattern = self._patterns[cmd]
        except KeyError:
            logger.warning(f"No pattern registered for {cmd!r}")
            raise UnregisteredCommandError(cmd, "pattern") from None
        return pattern.search(self._cmdline)

    def __repr__(self) -> str:
        return f"Parser(cmdline={self._cmdline!r}, commands={len(self._patterns)})"
