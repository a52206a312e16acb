"""
Shared test fixtures and configuration.
"""

import logging
from pathlib import Path

import pytest

from hyprsetup.adapters.mock import MockAdapter
from hyprsetup.core.models.settings import SetupConfig

_CONF_BYTES = b"# test config\nmonitor = , preferred, auto, 1\n\xe2\x9c\x93 utf-8 bytes kept as-is\n"


@pytest.fixture
def settings(tmp_path: Path) -> SetupConfig:
    """Fast settings: three packages, no pacing delay, logs under tmp_path."""
    return SetupConfig(
        packages=["A", "B", "C"],
        install_delay=0,
        log_file=str(tmp_path / "hyprland_setup.log"),
    )


@pytest.fixture
def workdir(tmp_path: Path) -> Path:
    """Working directory holding the source hyprland.conf."""
    work = tmp_path / "work"
    work.mkdir()
    (work / "hyprland.conf").write_bytes(_CONF_BYTES)
    return work


@pytest.fixture
def home(tmp_path: Path) -> Path:
    """Empty home directory (no .config yet)."""
    path = tmp_path / "home"
    path.mkdir()
    return path


@pytest.fixture
def mock_pm() -> MockAdapter:
    """Package manager double that succeeds unless told otherwise."""
    return MockAdapter(adapter_name="pkg-mock")


@pytest.fixture
def conf_bytes() -> bytes:
    """Exact contents of the source hyprland.conf in ``workdir``."""
    return _CONF_BYTES


@pytest.fixture
def isolated_logging():
    """Undo whatever setup_logging does to the root and noisy loggers."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    noisy = {name: logging.getLogger(name).level for name in ("asyncio", "prompt_toolkit")}
    raise_exceptions = logging.raiseExceptions
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
    for name, lvl in noisy.items():
        logging.getLogger(name).setLevel(lvl)
    logging.raiseExceptions = raise_exceptions
