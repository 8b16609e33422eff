"""Logging configuration for Parseman using loguru.

The library namespace is disabled on import (see ``parseman/__init__.py``);
call :func:`setup_logger` from the host program to see parser activity.
"""

import os
import sys
from loguru import logger
from typing import Optional

# Store the configured log file path to ensure consistency
_log_file_path: Optional[str] = None
_handler_ids: list[int] = []


def setup_logger(
    log_level: str = "INFO",
    console_output: bool = True,
    log_file: Optional[str] = None,
    rotation: str = "10 MB",
    retention: str = "7 days",
    compression: str = "zip",
) -> None:
    """
    Enable Parseman logging and install console and/or file sinks.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        console_output: Whether to output to stderr
        log_file: Optional path to a log file (relative paths resolve against the CWD)
        rotation: Log rotation size
        retention: How long to keep old logs
        compression: Compression format for old logs
    """
    global _log_file_path

    # Only drop sinks we installed ourselves; the host may own others
    for handler_id in _handler_ids:
        logger.remove(handler_id)
    _handler_ids.clear()

    logger.enable("parseman")

    if console_output:
        _handler_ids.append(
            logger.add(
                sys.stderr,
                level=log_level,
                format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{extra[name]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
                filter=_parseman_only,
                colorize=True,
            )
        )

    if log_file is not None:
        if not os.path.isabs(log_file):
            log_file = os.path.abspath(log_file)
        _log_file_path = log_file
        _handler_ids.append(
            logger.add(
                log_file,
                level=log_level,
                format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[name]}:{function}:{line} - {message}",
                filter=_parseman_only,
                rotation=rotation,
                retention=retention,
                compression=compression,
                encoding="utf-8",
            )
        )


def disable_logger() -> None:
    """Remove the sinks installed by :func:`setup_logger` and silence the namespace."""
    for handler_id in _handler_ids:
        logger.remove(handler_id)
    _handler_ids.clear()
    logger.disable("parseman")


def get_log_file_path() -> Optional[str]:
    """Return the file sink path configured by the last :func:`setup_logger` call."""
    return _log_file_path


def get_logger(name: Optional[str] = None):
    """
    Get a configured logger instance.

    Args:
        name: Optional name for the logger

    Returns:
        Logger instance
    """
    return logger.bind(name=name or "parseman")


def _parseman_only(record) -> bool:
    return record["name"] is not None and record["name"].startswith("parseman")
