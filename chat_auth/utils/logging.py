"""Logging configuration for the chat client.

Provides centralized logging with secret redaction so chat tokens and
proxy passwords are never written to log files.
"""

import logging
import re
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List, Optional


LOGGER_NAME = "chat_auth"

# Secret patterns to redact from logs
SECRET_PATTERNS = [
    # token=..., "password": "...", etc.
    (re.compile(r'(token"?\s*[:=]\s*"?)[^\s,}\]"]+', re.IGNORECASE), r'\1[REDACTED]'),
    (re.compile(r'(password"?\s*[:=]\s*"?)[^\s,}\]"]+', re.IGNORECASE), r'\1[REDACTED]'),
    # Proxy URLs with credentials
    (re.compile(r'(\w+://)[^/\s:@]+:[^/\s@]+@'), r'\1[REDACTED]@'),
    # Bare Slack tokens (bot, user, app, refresh, ...)
    (re.compile(r'xox[abposr]-[A-Za-z0-9-]+'), '[REDACTED]'),
]


class SecretRedactingFormatter(logging.Formatter):
    """Formatter that redacts secrets from log messages."""

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record, redacting any secrets."""
        message = super().format(record)
        return redact(message)


def redact(message: str) -> str:
    """Apply every secret pattern to a string."""
    for pattern, replacement in SECRET_PATTERNS:
        message = pattern.sub(replacement, message)
    return message


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Rotate the chat log at 1 MB, keeping three old files
LOG_MAX_BYTES = 1024 * 1024
LOG_BACKUP_COUNT = 3

# HTTP library loggers whose records can carry proxy URLs
TRANSPORT_LOGGERS = ("urllib3",)


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[Path] = None,
    console: bool = True
) -> logging.Logger:
    """
    Route package and transport logging through redacting handlers.

    The "chat_auth" logger gets the requested level. Transport library
    loggers share the same handlers at WARNING, so proxy failures land
    in the chat log with credentials scrubbed.

    Args:
        level: Level for the "chat_auth" logger
        log_file: Rotating log file, omitted for console only
        console: Also write to stderr

    Returns:
        The "chat_auth" logger
    """
    formatter = SecretRedactingFormatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    handlers: List[logging.Handler] = []

    if console:
        handlers.append(logging.StreamHandler(sys.stderr))

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(RotatingFileHandler(
            log_file,
            maxBytes=LOG_MAX_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding="utf-8"
        ))

    for handler in handlers:
        handler.setFormatter(formatter)

    logger = _install(logging.getLogger(LOGGER_NAME), handlers, level)
    for name in TRANSPORT_LOGGERS:
        _install(logging.getLogger(name), handlers, logging.WARNING)
    return logger


def _install(
    logger: logging.Logger,
    handlers: List[logging.Handler],
    level: int
) -> logging.Logger:
    # Repeated setup replaces only the handlers installed here
    for handler in list(logger.handlers):
        if isinstance(handler.formatter, SecretRedactingFormatter):
            logger.removeHandler(handler)
            handler.close()
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger
