"""
Structured logging configuration for reactions.

Library modules only obtain loggers through get_logger(); handlers are
installed by setup_logging(), which the CLI calls on startup.

Environment Variables:
    REACTIONS_LOG_LEVEL: Log level (DEBUG, INFO, WARNING, ERROR) - default: WARNING
    REACTIONS_LOG_FORMAT: Log format (json, text) - default: text

Usage:
    from reactions.logging_config import setup_logging, get_logger

    setup_logging()
    logger = get_logger(__name__, action_type="list1.AddItem")
    logger.debug("Reducing action")
"""

import logging
import os
import sys
from typing import Optional

from pythonjsonlogger.json import JsonFormatter

LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def setup_logging(level: Optional[str] = None, log_format: Optional[str] = None) -> None:
    """
    Configure the root logger.

    Explicit arguments win over REACTIONS_LOG_LEVEL / REACTIONS_LOG_FORMAT.
    Logs go to stderr so that machine-readable CLI output on stdout stays clean.
    """
    log_level = (level or os.getenv("REACTIONS_LOG_LEVEL", "WARNING")).upper()
    fmt = (log_format or os.getenv("REACTIONS_LOG_FORMAT", "text")).lower()
    resolved = LEVELS.get(log_level, logging.WARNING)

    root_logger = logging.getLogger()
    root_logger.setLevel(resolved)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(resolved)
    handler.addFilter(ActionTypeFilter())

    if fmt == "json":
        formatter = JsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s %(action_type)s",
            rename_fields={
                "asctime": "timestamp",
                "name": "logger",
                "levelname": "level",
            },
        )
    else:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s [action=%(action_type)s]",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    handler.setFormatter(formatter)
    root_logger.addHandler(handler)


def get_logger(name: str, action_type: Optional[str] = None) -> logging.LoggerAdapter:
    """
    Get a logger carrying the action type being processed.

    Args:
        name: Logger name (typically __name__)
        action_type: Action type for correlating log lines

    Returns:
        LoggerAdapter with action_type in extra fields
    """
    logger = logging.getLogger(name)
    return logging.LoggerAdapter(logger, {"action_type": action_type or "N/A"})


class ActionTypeFilter(logging.Filter):
    """
    Logging filter that adds action_type to records that lack it.

    Keeps the formatters working for records from other libraries.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "action_type"):
            record.action_type = "N/A"  # type: ignore
        return True
