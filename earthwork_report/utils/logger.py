"""Logging configuration.

This module sets up logging for the entire application with
appropriate formatters and handlers. Log output goes to stderr so the
report itself can be written to stdout.
"""

import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional, TextIO

# Handlers installed by setup_logger, keyed by logger name ('' for root)
_installed_handlers: Dict[str, List[logging.Handler]] = {}


def setup_logger(
    name: Optional[str] = None,
    level: int = logging.INFO,
    log_file: Optional[Path] = None,
    format_string: Optional[str] = None,
    stream: Optional[TextIO] = None
) -> logging.Logger:
    """
    Set up and configure logger.

    Components log through per-class loggers, so the CLI configures the
    root logger (name=None) to see all of them.

    Args:
        name: Logger name (default: root logger)
        level: Logging level (default: INFO)
        log_file: Optional file path for log output
        format_string: Custom format string (optional)
        stream: Console stream (default: stderr)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Avoid adding duplicate handlers
    key = name or ''
    if key in _installed_handlers:
        for handler in _installed_handlers[key]:
            handler.setLevel(level)
        return logger

    if format_string is None:
        format_string = (
            '%(asctime)s - %(name)s - %(levelname)s - '
            '%(filename)s:%(lineno)d - %(message)s'
        )

    formatter = logging.Formatter(format_string, datefmt='%Y-%m-%d %H:%M:%S')
    handlers: List[logging.Handler] = []

    console_handler = logging.StreamHandler(stream or sys.stderr)
    handlers.append(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    _installed_handlers[key] = handlers
    return logger


def remove_handlers(name: Optional[str] = None):
    """
    Detach and close the handlers setup_logger installed on a logger.

    Args:
        name: Logger name (default: root logger)
    """
    logger = logging.getLogger(name)
    for handler in _installed_handlers.pop(name or '', []):
        logger.removeHandler(handler)
        handler.close()
