"""
Runtime configuration and logging.

Settings come from the environment, with a local .env file loaded first:
    EXAMS_LOG_LEVEL  — root log level (default WARNING)
    EXAMS_LOG_FILE   — optional path; adds a rotating file log (5 MB, 3 backups)
    EXAMS_API_HOST   — bind host for the HTTP API (default 127.0.0.1)
    EXAMS_API_PORT   — bind port for the HTTP API (default 8000)

Bad values never stop the report: an unknown log level falls back to WARNING,
an unusable log file is skipped, and the port is only parsed when serving.

Logs always go to stderr. stdout carries report output only.
"""

import logging
import logging.handlers
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

LOG_LEVEL = os.getenv("EXAMS_LOG_LEVEL", "WARNING").upper()
LOG_FILE  = os.getenv("EXAMS_LOG_FILE") or None
API_HOST  = os.getenv("EXAMS_API_HOST", "127.0.0.1")
API_PORT  = os.getenv("EXAMS_API_PORT", "8000")  # parsed by the server entry point only

DEFAULT_LOG_LEVEL = logging.WARNING
LOG_FORMAT = "%(asctime)s  %(levelname)s  %(message)s"

log = logging.getLogger(__name__)

# Handlers installed by setup_logging(), so a second call replaces them.
_installed: list[logging.Handler] = []


def _resolve_level(name: str) -> int | None:
    """Map a level name like 'info' to its number; None if logging doesn't know it."""
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else None


def setup_logging(level: str | None = None, log_file: str | None = None) -> None:
    """Configure the root logger with a stderr handler and an optional rotating file."""
    root = logging.getLogger()
    for handler in _installed:
        root.removeHandler(handler)
        handler.close()
    _installed.clear()

    fmt = logging.Formatter(LOG_FORMAT)

    stream = logging.StreamHandler(sys.stderr)
    stream.setFormatter(fmt)
    _installed.append(stream)

    log_file = log_file or LOG_FILE
    file_error = None
    if log_file:
        path = Path(log_file)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            rotating = logging.handlers.RotatingFileHandler(
                path, maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8"
            )
        except OSError as e:
            file_error = e
        else:
            rotating.setFormatter(fmt)
            _installed.append(rotating)

    requested = level or LOG_LEVEL
    resolved = _resolve_level(requested)
    root.setLevel(DEFAULT_LOG_LEVEL if resolved is None else resolved)
    for handler in _installed:
        root.addHandler(handler)

    if resolved is None:
        log.warning("Unknown log level %r, using WARNING.", requested)
    if file_error is not None:
        log.warning("Cannot open log file %s (%s), logging to stderr only.", log_file, file_error)
