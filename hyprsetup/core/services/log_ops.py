"""
Save Logs action — append the session log to a file.

The file lives in the platform temp directory and is opened for
append, so saving twice keeps both copies in order.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from hyprsetup.core.errors import IOFailure
from hyprsetup.core.models.session import OutcomeEvent
from hyprsetup.core.models.settings import SetupConfig

logger = logging.getLogger(__name__)


def save_logs(
    settings: SetupConfig,
    lines: Iterable[str],
    path: Path | None = None,
) -> OutcomeEvent:
    """Append ``lines`` (one per line) to the session log file.

    Args:
        settings: Provides the default log file location.
        lines: Snapshot of the session log taken at dispatch time.
        path: Explicit target (default: ``settings.log_path()``).
    """
    target = path or settings.log_path()

    try:
        handle = target.open("a", encoding="utf-8")
    except OSError as e:
        logger.error("Cannot open %s: %s", target, e)
        return OutcomeEvent(
            status="Failed to open log file for writing",
            error=IOFailure("open", target, e),
        )

    count = 0
    try:
        with handle:
            for line in lines:
                handle.write(line + "\n")
                count += 1
    except OSError as e:
        # also covers the flush when the handle closes
        logger.error("Write to %s failed after %d lines: %s", target, count, e)
        return OutcomeEvent(
            status="Failed to write to log file",
            error=IOFailure("write", target, e),
        )

    logger.info("Saved %d log lines to %s", count, target)
    return OutcomeEvent(status=f"Logs saved to {target}")
