"""
Settings loader — reads hyprsetup.yml into a SetupConfig.

The settings file is optional: without one the assistant runs with the
built-in defaults. Lookup order is an explicit path (``--config``),
then ``HYPRSETUP_CONFIG``, then ``hyprsetup.yml`` found by walking up
from the working directory.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from hyprsetup.core.models.settings import SetupConfig

logger = logging.getLogger(__name__)

# Default settings filename
SETTINGS_FILE = "hyprsetup.yml"
SETTINGS_ENV_VAR = "HYPRSETUP_CONFIG"


class ConfigError(Exception):
    """Raised when the settings file is unreadable or invalid."""


def find_settings_file(start_dir: Path | None = None) -> Path | None:
    """Search for hyprsetup.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to hyprsetup.yml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / SETTINGS_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def load_settings(path: Path | None = None) -> SetupConfig:
    """Load and validate the assistant settings.

    Args:
        path: Explicit path to a settings file. If None, the
            ``HYPRSETUP_CONFIG`` variable and an upward search are tried.

    Returns:
        Validated SetupConfig (defaults when no file exists).

    Raises:
        ConfigError: If an explicitly named file is missing, or any
            settings file is invalid.
    """
    explicit = path is not None
    if path is None and os.environ.get(SETTINGS_ENV_VAR):
        path = Path(os.environ[SETTINGS_ENV_VAR])
        explicit = True
    if path is None:
        path = find_settings_file()

    if path is None:
        logger.debug("No %s found — using built-in defaults", SETTINGS_FILE)
        return SetupConfig()

    if not path.is_file():
        if explicit:
            raise ConfigError(f"Settings file not found: {path}")
        return SetupConfig()

    logger.debug("Loading settings from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return SetupConfig()

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    try:
        settings = SetupConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid settings in {path}: {e}") from e

    logger.info("Loaded settings from %s (%d packages)", path, len(settings.packages))
    return settings
