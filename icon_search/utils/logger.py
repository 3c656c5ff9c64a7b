"""
Logging utilities
"""
import logging
import sys
from typing import Optional

from icon_search.config.settings import settings

_configured_loggers: list[logging.Logger] = []


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a configured logger instance

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name or "icon-search-service")

    # Already configured
    if logger.handlers:
        return logger

    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)
    logger.setLevel(log_level)

    stream = sys.stderr if settings.log_stream.lower() == "stderr" else sys.stdout
    handler = logging.StreamHandler(stream)
    handler.setLevel(log_level)

    formatter = logging.Formatter(
        fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )
    handler.setFormatter(formatter)

    logger.addHandler(handler)
    logger.propagate = False
    _configured_loggers.append(logger)

    return logger


def redirect_to_stderr() -> None:
    """
    Point every logger created by get_logger (and future ones) at stderr.

    stdout is the protocol channel when the MCP server runs over stdio.
    """
    settings.log_stream = "stderr"
    for logger in _configured_loggers:
        for handler in logger.handlers:
            if isinstance(handler, logging.StreamHandler):
                handler.setStream(sys.stderr)
