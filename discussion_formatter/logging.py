"""
Centralized logging configuration for discussion_formatter.

Usage:
    from discussion_formatter.logging import setup_logging, get_logger

    # In __main__.py (once at startup)
    setup_logging(level='DEBUG', log_file='/tmp/discussion_formatter.log')

    # In any module
    logger = get_logger(__name__)
    logger.debug("Some debug message")

Theme lookup and style resolution log one debug line per missing file or
colorless style, which swamps a DEBUG log for a long source file. Those
loggers are held at INFO unless setup_logging(trace_themes=True).
"""

import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = 'discussion_formatter'

DEFAULT_LOG_FILE = '/tmp/discussion_formatter.log'

# Per-lookup / per-style debug chatter
THEME_TRACE_LOGGERS = (
    'discussion_formatter.theme.loader',
    'discussion_formatter.theme.resolver',
)


def setup_logging(
    level: str = 'WARNING',
    log_file: Optional[str] = None,
    console: bool = False,
    trace_themes: bool = False,
) -> None:
    """
    Configure the discussion_formatter logger tree.

    Args:
        level: Log level ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')
        log_file: Path to log file (only used if level is DEBUG or INFO)
        console: If True, also log to console (stderr)
        trace_themes: Let theme lookup/resolution debug lines through
    """
    numeric_level = getattr(logging, level.upper(), logging.WARNING)

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(numeric_level)
    root.handlers.clear()

    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    handlers = []
    if numeric_level <= logging.INFO and log_file:
        handlers.append(logging.FileHandler(log_file, mode='w'))
    if console:
        handlers.append(logging.StreamHandler(sys.stderr))
    for handler in handlers:
        handler.setLevel(numeric_level)
        handler.setFormatter(formatter)
        root.addHandler(handler)

    if not root.handlers:
        root.addHandler(logging.NullHandler())

    # NOTSET defers to the root level set above
    trace_level = logging.NOTSET if trace_themes else max(numeric_level, logging.INFO)
    for name in THEME_TRACE_LOGGERS:
        logging.getLogger(name).setLevel(trace_level)

    root.debug(f"Logging configured: level={level}, log_file={log_file}, "
               f"console={console}, trace_themes={trace_themes}")


def get_logger(name: str) -> logging.Logger:
    """Logger for a module, always parented under 'discussion_formatter'."""
    if name.startswith(ROOT_LOGGER_NAME):
        return logging.getLogger(name)
    return logging.getLogger(f'{ROOT_LOGGER_NAME}.{name}')
