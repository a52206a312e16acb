"""
Setup settings — what to install, where config goes, what to check.

Every field has a default matching the stock FreeBSD setup, so the
assistant runs without any settings file. A ``hyprsetup.yml`` can
override any of them (see ``hyprsetup.core.config.loader``).
"""

from __future__ import annotations

import tempfile
from pathlib import Path

from pydantic import BaseModel, Field

DEFAULT_TITLE = "Hyprland Setup Assistant for FreeBSD"

DEFAULT_PACKAGES = [
    "hyprland",
    "wlroots",
    "xwayland",
    "waybar",
    "grim",
    "jq",
    "wofi",
    "alacritty",
    "pam_xdg",
    "hyprpaper",
]


class PackageManagerConfig(BaseModel):
    """How a single package gets installed."""

    command: list[str] = Field(default_factory=lambda: ["pkg", "install", "-y"])
    sudo: bool = True
    timeout: int = 600


class ConfigFileSpec(BaseModel):
    """The compositor config file copied into the user's home."""

    source: str = "hyprland.conf"   # relative to the working directory
    dest_dir: str = ".config/hypr"  # relative to the home directory

    def source_path(self, working_dir: Path) -> Path:
        path = Path(self.source)
        return path if path.is_absolute() else working_dir / path

    def dest_path(self, home: Path) -> Path:
        return home / self.dest_dir / Path(self.source).name


class RuntimeDirConfig(BaseModel):
    """The runtime directory variable ensured at startup."""

    variable: str = "XDG_RUNTIME_DIR"
    path: str = "/tmp"
    create_if_missing: bool = True
    mode: int = 0o700


class SetupConfig(BaseModel):
    """Root settings for the assistant."""

    title: str = DEFAULT_TITLE
    packages: list[str] = Field(default_factory=lambda: list(DEFAULT_PACKAGES))
    package_manager: PackageManagerConfig = Field(default_factory=PackageManagerConfig)
    install_delay: float = 0.5
    config_file: ConfigFileSpec = Field(default_factory=ConfigFileSpec)
    compositor_executable: str = "Hyprland"
    runtime_dir: RuntimeDirConfig = Field(default_factory=RuntimeDirConfig)
    log_file: str = "hyprland_setup.log"

    def log_path(self) -> Path:
        """Where Save Logs appends the session log."""
        path = Path(self.log_file)
        return path if path.is_absolute() else Path(tempfile.gettempdir()) / path
