"""Diagnostic logging to standard error.

Log lines look like ``[LOG] 2024-01-01 12:00:00 - message``; errors use the
``[ERROR]`` tag. Standard output is left for the report.
"""

import logging
import sys
from typing import TextIO

LOGGER_NAME = "gh_issue_export"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class TaggedFormatter(logging.Formatter):
    """Formatter that prefixes each record with a LOG or ERROR tag."""

    def __init__(self) -> None:
        super().__init__("[%(tag)s] %(asctime)s - %(message)s", datefmt=DATE_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        record.tag = "ERROR" if record.levelno >= logging.ERROR else "LOG"
        return super().format(record)


def setup_logging(
    stream: TextIO | None = None, level: int = logging.INFO
) -> logging.Logger:
    """Attach a single stderr handler to the package logger.

    Calling this again replaces the previous handler.

    Args:
        stream: Destination stream, standard error by default
        level: Minimum level to emit

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(TaggedFormatter())
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
