"""
Hyprland Setup Assistant — CLI entrypoint.

Usage:
    hyprsetup                  # interactive session
    hyprsetup --mock           # walk through an install without pkg/sudo
    python -m hyprsetup.main --help
"""

from __future__ import annotations

import asyncio
import logging
import os
import sys
from pathlib import Path

import click

from hyprsetup import __version__
from hyprsetup.core.observability.logging_config import setup_logging

logger = logging.getLogger(__name__)


@click.command()
@click.version_option(version=__version__, prog_name="hyprsetup")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to hyprsetup.yml (default: auto-detect).",
)
@click.option("--mock", is_flag=True, help="Simulate package installs (no pkg, no sudo).")
def cli(verbose: bool, debug: bool, config_path: str | None, mock: bool) -> None:
    """Hyprland Setup Assistant — install and configure Hyprland on FreeBSD."""
    from hyprsetup.adapters import MockAdapter, ShellCommandAdapter
    from hyprsetup.core.config.loader import ConfigError, load_settings
    from hyprsetup.core.services.runtime_env import prepare_runtime_environment
    from hyprsetup.core.services.task_runner import TaskRunner

    # ── Logging setup (once, at process start) ──────────────────
    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    else:
        level = os.environ.get("HYPRSETUP_LOG_LEVEL", "WARNING")

    setup_logging(
        level=level,
        log_file=os.environ.get("HYPRSETUP_LOG_FILE"),
        log_file_level=os.environ.get("HYPRSETUP_LOG_FILE_LEVEL"),
        quiet_third_party=not debug,
    )

    try:
        settings = load_settings(Path(config_path) if config_path else None)
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)

    env = prepare_runtime_environment(settings.runtime_dir)
    startup_notes = (env.warning,) if env.warning else ()

    adapter = MockAdapter(default_output="[mock] installed") if mock else ShellCommandAdapter()
    runner = TaskRunner(settings, adapter)

    try:
        asyncio.run(_run_session(runner, startup_notes))
    except Exception as e:
        logger.critical("Alas, there's been an error: %s", e)
        sys.exit(1)


async def _run_session(runner, startup_notes: tuple[str, ...]):
    from hyprsetup.core.engine.session import Session
    from hyprsetup.ui.tui.app import run_tui

    session = Session(runner, startup_notes=startup_notes)
    return await run_tui(session)


if __name__ == "__main__":
    cli()
