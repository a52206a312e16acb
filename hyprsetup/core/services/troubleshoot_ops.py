"""
Troubleshoot action — run diagnostic checks in order.

Checks run one after another and the first one that reports an error
ends the action with that error. A check can also report an
informational finding (``note``): it is shown to the user but never
stops the remaining checks.
"""

from __future__ import annotations

import logging
import os
import shutil
from dataclasses import dataclass
from typing import Callable, Mapping

from hyprsetup.core.errors import NotFoundError, SetupError
from hyprsetup.core.models.session import OutcomeEvent
from hyprsetup.core.models.settings import SetupConfig

logger = logging.getLogger(__name__)

NO_ISSUES = "No common issues found."


@dataclass
class CheckResult:
    """Result of a single diagnostic check."""

    name: str
    message: str
    error: SetupError | None = None
    note: bool = False  # informational finding, not a failure

    @property
    def ok(self) -> bool:
        return self.error is None


Check = Callable[[SetupConfig], CheckResult]


def check_compositor_installed(
    settings: SetupConfig,
    which: Callable[[str], str | None] = shutil.which,
) -> CheckResult:
    """The compositor executable resolves on $PATH."""
    exe = settings.compositor_executable
    path = which(exe)
    if path is None:
        return CheckResult(
            name="compositor",
            message=f"{exe} not found in PATH",
            error=NotFoundError(exe),
        )
    return CheckResult(name="compositor", message=f"{exe} is installed.")


def check_runtime_dir(
    settings: SetupConfig,
    environ: Mapping[str, str] | None = None,
) -> CheckResult:
    """The runtime directory variable has the expected value."""
    env = os.environ if environ is None else environ
    var = settings.runtime_dir.variable
    expected = settings.runtime_dir.path
    actual = env.get(var, "")
    if actual != expected:
        return CheckResult(
            name="runtime_dir",
            message=f"{var} is set to {actual}, expected {expected}",
            note=True,
        )
    return CheckResult(name="runtime_dir", message=f"{var} is correctly set to {expected}.")


DEFAULT_CHECKS: tuple[Check, ...] = (
    check_compositor_installed,
    check_runtime_dir,
)


def troubleshoot(
    settings: SetupConfig,
    checks: tuple[Check, ...] = DEFAULT_CHECKS,
) -> OutcomeEvent:
    """Run ``checks`` in order, stopping at the first error."""
    notes: list[str] = []
    for check in checks:
        result = check(settings)
        if not result.ok:
            logger.warning("Check %s failed: %s", result.name, result.message)
            return OutcomeEvent(status=result.message, error=result.error, notes=tuple(notes))
        if result.note:
            logger.info("Check %s: %s", result.name, result.message)
            notes.append(result.message)
        else:
            logger.debug("Check %s passed: %s", result.name, result.message)

    return OutcomeEvent(status=NO_ISSUES, notes=tuple(notes))
