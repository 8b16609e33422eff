"""Parseman: regex-driven extraction of typed values from a command line."""

from parseman.config import LoggingConfig, ParserConfig
from parseman.errors import (
    BadParserType,
    ConversionError,
    ParsemanError,
    PatternSyntaxError,
    UnregisteredCommandError,
)
from parseman.logger import disable_logger, get_logger, setup_logger
from parseman.parser import Parser, Retrieval, RetrievalHook

__version__ = "0.1.0"

# Silent unless the host program calls setup_logger()
disable_logger()

__all__ = [
    "Parser",
    "Retrieval",
    "RetrievalHook",
    "ParserConfig",
    "LoggingConfig",
    "ParsemanError",
    "PatternSyntaxError",
    "BadParserType",
    "ConversionError",
    "UnregisteredCommandError",
    "setup_logger",
    "disable_logger",
    "get_logger",
]
