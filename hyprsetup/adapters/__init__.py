"""Adapters — bindings to the external tools the setup shells out to.

Public re-exports for convenient access.
"""

from hyprsetup.adapters.base import Adapter, ExecutionContext
from hyprsetup.adapters.mock import MockAdapter
from hyprsetup.adapters.shell.command import ShellCommandAdapter

__all__ = [
    "Adapter",
    "ExecutionContext",
    "MockAdapter",
    "ShellCommandAdapter",
]
