"""Logging configuration for stepspec.

The library only ever logs through ``logging.getLogger(__name__)``. Host
applications that want readable output can attach a Rich handler to the
package logger with ``configure_logging``.
"""

import logging
import sys
from enum import IntEnum
from typing import TextIO

from rich.console import Console
from rich.logging import RichHandler

from .config import LoggingConfig

PACKAGE_LOGGER = "stepspec"


class LogLevel(IntEnum):
    """Log level enumeration."""

    QUIET = logging.WARNING
    NORMAL = logging.INFO
    VERBOSE = logging.DEBUG


def configure_logging(
    verbosity: int = 0,
    quiet: bool = False,
    no_color: bool = False,
    stream: TextIO = sys.stderr,
) -> Console:
    """Attach a Rich handler to the stepspec package logger.

    Calling this again replaces the previously attached handler, and the root
    logger is left untouched.

    Args:
        verbosity: 0=normal, 1+=verbose (debug records from the parser)
        quiet: Only warnings and errors (takes precedence over verbosity)
        no_color: Disable colored output
        stream: Output stream for logs

    Returns:
        Console the handler writes to
    """
    if quiet:
        level = LogLevel.QUIET
    elif verbosity >= 1:
        level = LogLevel.VERBOSE
    else:
        level = LogLevel.NORMAL

    console = Console(
        file=stream,
        force_terminal=not no_color,
        no_color=no_color,
    )
    handler = RichHandler(
        console=console,
        show_time=verbosity >= 1,
        show_path=verbosity >= 1,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in list(logger.handlers):
        if isinstance(existing, RichHandler):
            logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False

    return console


def configure_logging_from_config(config: LoggingConfig, stream: TextIO = sys.stderr) -> Console:
    """Configure logging from the ``[logging]`` section of stepspec.toml."""
    return configure_logging(
        verbosity=config.verbosity,
        quiet=config.quiet,
        no_color=config.no_color,
        stream=stream,
    )
