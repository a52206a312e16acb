"""
Runtime environment — ensure the compositor's runtime directory.

Runs once at startup, before the session starts. It sets the runtime
directory variable for this process (and the commands it spawns) and
creates the directory if it is missing. A failure is logged as a
warning; the assistant still starts.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import MutableMapping

from hyprsetup.core.models.settings import RuntimeDirConfig

logger = logging.getLogger(__name__)


@dataclass
class RuntimeEnvResult:
    variable: str
    path: Path
    created: bool = False
    warning: str | None = None

    @property
    def ok(self) -> bool:
        return self.warning is None


def prepare_runtime_environment(
    config: RuntimeDirConfig,
    environ: MutableMapping[str, str] | None = None,
) -> RuntimeEnvResult:
    """Set ``config.variable`` to ``config.path`` and make sure the path exists."""
    env = os.environ if environ is None else environ
    path = Path(config.path)
    env[config.variable] = config.path
    result = RuntimeEnvResult(variable=config.variable, path=path)

    if path.exists() or not config.create_if_missing:
        return result

    try:
        path.mkdir(mode=config.mode, parents=True)
        result.created = True
        logger.info("Created runtime directory %s", path)
    except FileExistsError:
        pass
    except OSError as e:
        result.warning = f"Failed to create {path}: {e}"
        logger.warning("%s", result.warning)

    return result
