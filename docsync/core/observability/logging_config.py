"""
Logging configuration — central setup for the docsync CLI.

Called once at startup by ``docsync.main``.  Every module that does
``logger = logging.getLogger(__name__)`` inherits this config.

Levels are resolved in precedence order:
    --debug  >  --verbose  >  --quiet  >  DOCSYNC_LOG_LEVEL  >  WARNING

Log records always go to stderr: stdout carries the operator prompts
and the navigation snippet, which must stay copy-pasteable.
"""

from __future__ import annotations

import logging
import os
import sys

LEVEL_ENV = "DOCSYNC_LOG_LEVEL"
FILE_ENV = "DOCSYNC_LOG_FILE"
FILE_LEVEL_ENV = "DOCSYNC_LOG_FILE_LEVEL"

# ── Format strings ──────────────────────────────────────────────

_FMT_MINIMAL = "%(levelname)s: %(message)s"
_FMT_VERBOSE = "%(asctime)s [%(name)s] %(message)s"
_FMT_DEBUG = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s"
_DATEFMT_CONSOLE = "%H:%M:%S"
_DATEFMT_FILE = "%Y-%m-%d %H:%M:%S"


def resolve_level(debug: bool = False, verbose: bool = False, quiet: bool = False) -> str:
    """Pick the console level name from CLI flags, then the environment."""
    if debug:
        return "DEBUG"
    if verbose:
        return "INFO"
    if quiet:
        return "ERROR"
    return os.environ.get(LEVEL_ENV, "WARNING")


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
) -> None:
    """Configure Python logging for the whole process.

    Args:
        level: Console level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Optional path to a log file, always written in full format.
        log_file_level: Separate level for the log file; defaults to ``level``.
    """
    numeric_level = _parse_level(level)

    if numeric_level <= logging.DEBUG:
        console_fmt = logging.Formatter(_FMT_DEBUG, datefmt=_DATEFMT_CONSOLE)
    elif numeric_level <= logging.INFO:
        console_fmt = logging.Formatter(_FMT_VERBOSE, datefmt=_DATEFMT_CONSOLE)
    else:
        console_fmt = logging.Formatter(_FMT_MINIMAL)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(numeric_level)
    console.setFormatter(console_fmt)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(console)

    effective_level = numeric_level
    if log_file:
        file_level = _parse_level(log_file_level) if log_file_level else numeric_level
        effective_level = min(effective_level, file_level)

        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(logging.Formatter(_FMT_DEBUG, datefmt=_DATEFMT_FILE))
        root.addHandler(fh)

    root.setLevel(effective_level)
    logging.raiseExceptions = False


def _parse_level(level: str | None) -> int:
    """Convert a level name to its numeric constant, WARNING if unknown."""
    if not level:
        return logging.WARNING
    numeric = getattr(logging, level.upper(), None)
    if not isinstance(numeric, int):
        return logging.WARNING
    return numeric
