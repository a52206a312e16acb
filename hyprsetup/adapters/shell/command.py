"""
Shell command adapter — run one external command, capture its output.

Used for package installs (``sudo pkg install -y <name>``). stdout and
stderr are captured together, in the order the command wrote them,
since that combined text is what the user sees when an install fails.
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
import time

from hyprsetup.adapters.base import Adapter, ExecutionContext
from hyprsetup.core.models.action import Receipt

logger = logging.getLogger(__name__)

# Keep the tail of very chatty package-manager output
_MAX_OUTPUT = 4000


class ShellCommandAdapter(Adapter):
    """Execute a command (argv list) and capture combined output.

    Action params:
        command (list[str]): argv of the command to execute.
        sudo (bool): Prefix with ``sudo`` unless already root (default: False).
        timeout (int): Timeout in seconds (default: 600).
    """

    @property
    def name(self) -> str:
        return "shell"

    def is_available(self) -> bool:
        return shutil.which("sh") is not None

    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        command = context.action.params.get("command")
        if not command:
            return False, "Missing required param: 'command'"
        if not isinstance(command, list) or not all(isinstance(a, str) for a in command):
            return False, "Param 'command' must be a list of strings"
        return True, ""

    def execute(self, context: ExecutionContext) -> Receipt:
        command = build_argv(
            context.action.params["command"],
            sudo=context.action.params.get("sudo", False),
        )
        timeout = context.action.params.get("timeout", 600)

        logger.debug("Executing: %s (cwd=%s)", " ".join(command), context.working_dir)
        start = time.monotonic()

        try:
            result = subprocess.run(
                command,
                cwd=context.working_dir,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                timeout=timeout,
            )
        except subprocess.TimeoutExpired:
            return Receipt.failure(
                adapter=self.name,
                action_id=context.action.id,
                error=f"Command timed out after {timeout}s",
                metadata={"command": command, "timeout": timeout},
            )
        except OSError as e:
            return Receipt.failure(
                adapter=self.name,
                action_id=context.action.id,
                error=f"Command execution error: {e}",
                metadata={"command": command},
            )

        elapsed_ms = int((time.monotonic() - start) * 1000)
        output = (result.stdout or "")[-_MAX_OUTPUT:].strip()

        if result.returncode == 0:
            return Receipt.success(
                adapter=self.name,
                action_id=context.action.id,
                output=output,
                duration_ms=elapsed_ms,
                return_code=0,
                metadata={"command": command},
            )

        return Receipt.failure(
            adapter=self.name,
            action_id=context.action.id,
            error=f"Command exited with code {result.returncode}",
            output=output,
            duration_ms=elapsed_ms,
            return_code=result.returncode,
            metadata={"command": command},
        )


def build_argv(command: list[str], *, sudo: bool = False) -> list[str]:
    """Prefix ``sudo`` when elevation is wanted and we are not root."""
    if sudo and os.geteuid() != 0:
        return ["sudo", *command]
    return list(command)
