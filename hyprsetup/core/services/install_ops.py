"""
Install action — packages one by one, then the compositor config.

Packages are installed strictly in the configured order, one command
per package. The first failure ends the action: later packages are not
attempted and the config copy never runs. Progress for each package
goes to the process log; the session only sees the final outcome.
"""

from __future__ import annotations

import logging
import threading
import time
from pathlib import Path
from typing import Callable

from hyprsetup.adapters.base import Adapter, ExecutionContext
from hyprsetup.core.errors import CommandFailure, IOFailure
from hyprsetup.core.models.action import Action
from hyprsetup.core.models.session import OutcomeEvent
from hyprsetup.core.models.settings import SetupConfig

logger = logging.getLogger(__name__)

INSTALL_OK = "Hyprland installation and configuration completed successfully."


def install_packages(
    settings: SetupConfig,
    adapter: Adapter,
    *,
    working_dir: Path | None = None,
    home: Path | None = None,
    cancel: threading.Event | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> OutcomeEvent:
    """Install every configured package, then copy the config file.

    Args:
        settings: Package list, package-manager command, config file spec.
        adapter: Runs each install command (shell, or mock).
        working_dir: Where the source config lives (default: cwd).
        home: Home directory override (default: the user's home).
        cancel: Set when the session ends; checked between packages.
        sleep: Pacing delay between installs (injectable for tests).

    Returns:
        The action's single OutcomeEvent.
    """
    working_dir = working_dir or Path.cwd()
    pm = settings.package_manager

    for pkg in settings.packages:
        if cancel is not None and cancel.is_set():
            logger.info("Install cancelled before %s", pkg)
            return OutcomeEvent(status=f"Installation cancelled before {pkg}")

        command = [*pm.command, pkg]
        ctx = ExecutionContext(
            action=Action(
                id=f"install:{pkg}",
                name=f"Install {pkg}",
                adapter=adapter.name,
                params={"command": command, "sudo": pm.sudo, "timeout": pm.timeout},
            ),
            working_dir=str(working_dir),
        )
        receipt = adapter.run(ctx)
        if receipt.failed:
            logger.warning("Failed to install %s: %s", pkg, receipt.error)
            return OutcomeEvent(
                status=f"Failed to install {pkg}",
                error=CommandFailure(command, receipt.detail, receipt.return_code),
            )

        logger.info("Successfully installed %s", pkg)
        if settings.install_delay > 0:
            sleep(settings.install_delay)

    try:
        dest = copy_config_file(settings, working_dir=working_dir, home=home)
    except IOFailure as e:
        logger.error("%s", e)
        return OutcomeEvent(status=_copy_failure_status(e.step, settings), error=e)

    logger.info("Installed config to %s", dest)
    return OutcomeEvent(status=INSTALL_OK)


def _copy_failure_status(step: str, settings: SetupConfig) -> str:
    name = Path(settings.config_file.source).name
    if step == "mkdir":
        return "Failed to create hypr configuration directory"
    if step == "read":
        return f"Failed to read {name}"
    return f"Failed to write {name}"


def copy_config_file(
    settings: SetupConfig,
    *,
    working_dir: Path,
    home: Path | None = None,
) -> Path:
    """Copy the config file byte-for-byte into the user's config dir.

    Creates the destination directory (and parents) if needed and
    overwrites an existing destination file.

    Returns:
        The destination path.

    Raises:
        IOFailure: step is one of ``mkdir``, ``read``, ``write``.
    """
    spec = settings.config_file
    if home is None:
        try:
            home = Path.home()
        except RuntimeError as e:
            raise IOFailure("mkdir", "~", OSError(str(e))) from e

    dest = spec.dest_path(home)
    try:
        dest.parent.mkdir(mode=0o755, parents=True, exist_ok=True)
    except OSError as e:
        raise IOFailure("mkdir", dest.parent, e) from e

    source = spec.source_path(working_dir)
    try:
        data = source.read_bytes()
    except OSError as e:
        raise IOFailure("read", source, e) from e

    try:
        dest.write_bytes(data)
    except OSError as e:
        raise IOFailure("write", dest, e) from e

    return dest
