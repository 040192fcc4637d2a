"""
Logging configuration for DuckDNS Updater.

This module provides logging setup with support for console and file output.
Tokens are automatically masked in log messages.
"""

from __future__ import annotations

import logging
import logging.handlers
import re
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path
    from typing import Final


# Pattern to match tokens in log messages
# Each tuple is (pattern, replacement)
# Keep the first 6 characters and mask the rest
SENSITIVE_PATTERNS: Final[list[tuple[re.Pattern[str], str]]] = [
    # token query parameter in update URLs
    (
        re.compile(r"(token=)([^\s&\"']{0,6})([^\s&\"']*)", re.IGNORECASE),
        r"\1\2******",
    ),
    # "Set token from <source> to <value>"
    (
        re.compile(r"(token from \w+ to )(\S{0,6})(\S*)", re.IGNORECASE),
        r"\1\2******",
    ),
]


# Constants
LOGGER_NAME: Final[str] = "duckdns_updater"
LOG_FORMAT: Final[str] = "%(asctime)s %(levelname)-5s [%(name)s] %(message)s"
DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"


class SensitiveFilter(logging.Filter):
    """
    A logging filter that masks DuckDNS tokens.

    Update URLs carry the token as a query parameter, so debug output
    would otherwise print it in full.
    """

    @staticmethod
    def _mask_sensitive(value: str) -> str:
        """
        Apply all sensitive patterns to mask a string.

        Parameters
        ----------
        value : str
            The string to process.

        Returns
        -------
        str
            The string with sensitive data masked.
        """
        result = value
        for pattern, replacement in SENSITIVE_PATTERNS:
            result = pattern.sub(replacement, result)
        return result

    def filter(self, record: logging.LogRecord) -> bool:
        """
        Filter and modify log record to mask sensitive data.

        Parameters
        ----------
        record : logging.LogRecord
            The log record to process.

        Returns
        -------
        bool
            Always returns True (record is always logged).
        """
        # Render first so tokens passed as arguments are masked in context
        # (e.g. "token=%s" with the token in record.args)
        if record.args:
            record.msg = record.getMessage()
            record.args = None
        if record.msg:
            record.msg = self._mask_sensitive(str(record.msg))
        return True


def _configure_handler(handler: logging.Handler) -> None:
    """
    Configure a logging handler with formatter and sensitive filter.

    Parameters
    ----------
    handler : logging.Handler
        The handler to configure.
    """
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    sensitive_filter = SensitiveFilter()

    handler.setFormatter(formatter)
    handler.addFilter(sensitive_filter)


def setup_logging(*, debug: bool = False, log_file: Path | None = None) -> logging.Logger:
    """
    Set up and return the package logger.

    The returned logger is handed to each component explicitly.

    Parameters
    ----------
    debug : bool, optional
        Log at DEBUG level instead of INFO.
    log_file : Path | None, optional
        Also write log records to this file.

    Returns
    -------
    logging.Logger
        The configured logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)

    # Clear any existing handlers
    logger.handlers.clear()

    # Console handler
    console_handler = logging.StreamHandler()
    _configure_handler(console_handler)
    logger.addHandler(console_handler)

    # File handler (if requested)
    if log_file is not None:
        log_path = log_file.expanduser()
        try:
            log_path.parent.mkdir(parents=True, exist_ok=True)

            file_handler = logging.handlers.WatchedFileHandler(
                str(log_path),
                encoding="utf-8",
                delay=False,
            )
            _configure_handler(file_handler)
            logger.addHandler(file_handler)
            logger.debug('File logging enabled: "%s".', log_path)
        except OSError as e:
            logger.critical("Failed to enable file logging: %s", e)
            sys.exit(1)

    # Prevent propagation to root logger
    logger.propagate = False

    logger.debug("Logging level: %s", logging.getLevelName(logger.level))
    return logger
