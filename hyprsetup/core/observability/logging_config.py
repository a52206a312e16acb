"""
Logging configuration — process-wide setup, called once by main.py.

Every module does ``logger = logging.getLogger(__name__)`` and inherits
this config. The session view is not a log sink: per-package progress
("Successfully installed waybar") goes to the process log, only the
action's final outcome goes to the view.

Level precedence:
    --debug / --verbose  >  HYPRSETUP_LOG_LEVEL  >  WARNING

HYPRSETUP_LOG_FILE adds a file handler (its own level from
HYPRSETUP_LOG_FILE_LEVEL). While the full-screen UI owns the terminal
the file is the place to read install progress.
"""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from typing import Iterator

# ── Formats ─────────────────────────────────────────────────────

# (format, datefmt) for the console, picked by the most verbose level
_CONSOLE_FORMATS: list[tuple[int, str, str | None]] = [
    (logging.DEBUG, "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d  %(message)s", "%H:%M:%S"),
    (logging.INFO, "%(asctime)s [%(name)s] %(message)s", "%H:%M:%S"),
]
_CONSOLE_DEFAULT = "%(message)s"

_FILE_FORMAT = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d  %(message)s"
_FILE_DATEFMT = "%Y-%m-%d %H:%M:%S"

# chatty at DEBUG, silenced otherwise
_NOISY_LOGGERS = ("asyncio", "prompt_toolkit")

_CONSOLE_HANDLER = "console"


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
    quiet_third_party: bool = True,
) -> None:
    """Configure the root logger for the whole process.

    Replaces any handlers already on the root logger, so calling it
    twice does not duplicate output.

    Args:
        level: Console level name (DEBUG, INFO, WARNING, ...).
        log_file: Optional path of a log file to append to.
        log_file_level: Level for the file; defaults to ``level``.
        quiet_third_party: Hold asyncio and prompt_toolkit at WARNING
            unless the console is at DEBUG.
    """
    console_level = _parse_level(level)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(_console_handler(console_level))
    root_level = console_level

    if log_file:
        file_level = _parse_level(log_file_level) if log_file_level else console_level
        root.addHandler(_file_handler(log_file, file_level))
        root_level = min(root_level, file_level)

    root.setLevel(root_level)

    if quiet_third_party and console_level > logging.DEBUG:
        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)

    logging.raiseExceptions = False


def _console_handler(level: int) -> logging.Handler:
    fmt, datefmt = _CONSOLE_DEFAULT, None
    for threshold, candidate, candidate_datefmt in _CONSOLE_FORMATS:
        if level <= threshold:
            fmt, datefmt = candidate, candidate_datefmt
            break

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_CONSOLE_HANDLER)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt, datefmt=datefmt))
    return handler


@contextmanager
def console_suspended() -> Iterator[None]:
    """Mute the console handler for the duration of the block.

    The full-screen UI owns the terminal while it runs; records still
    reach the log file, if one is configured.
    """
    root = logging.getLogger()
    muted = [(h, h.level) for h in root.handlers if h.get_name() == _CONSOLE_HANDLER]
    for handler, _level in muted:
        handler.setLevel(logging.CRITICAL + 1)
    try:
        yield
    finally:
        for handler, level in muted:
            handler.setLevel(level)


def _file_handler(path: str, level: int) -> logging.Handler:
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_FILE_FORMAT, datefmt=_FILE_DATEFMT))
    return handler


def _parse_level(level: str | None) -> int:
    """Level name to its numeric value; unknown names mean WARNING."""
    if not level:
        return logging.WARNING
    numeric = getattr(logging, level.upper(), None)
    return numeric if isinstance(numeric, int) else logging.WARNING
