"""
Error taxonomy — failures a setup action can end with.

Actions never let these escape: each one is caught where it happens
and turned into the action's single Outcome Event. The ``kind`` label
is what the session log shows next to the detail.
"""

from __future__ import annotations

from pathlib import Path


class SetupError(Exception):
    """Base class for every failure reported by a setup action."""

    kind = "SetupError"


class CommandFailure(SetupError):
    """An external command exited non-zero (or could not be run at all)."""

    kind = "CommandFailure"

    def __init__(self, command: list[str], output: str, return_code: int | None = None):
        self.command = list(command)
        self.output = output
        self.return_code = return_code
        super().__init__(output or f"Command exited with code {return_code}")


class IOFailure(SetupError):
    """A file or directory could not be created, read or written."""

    kind = "IOError"

    def __init__(self, step: str, path: Path | str, cause: OSError):
        self.step = step
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"{step} {self.path}: {cause.strerror or cause}")


class NotFoundError(SetupError):
    """An expected executable is not on the search path."""

    kind = "NotFoundError"

    def __init__(self, executable: str):
        self.executable = executable
        super().__init__(f"executable {executable!r} not found in $PATH")
