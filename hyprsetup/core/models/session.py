"""
Session models — the UI state and the events that change it.

SessionState is immutable: the controller's update function returns a
new state for every event. Events come from two places, the keyboard
and finished background actions, and both arrive through the same
queue (see ``hyprsetup.core.engine.session``).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from hyprsetup.core.errors import SetupError
from hyprsetup.core.models.settings import DEFAULT_TITLE


class MenuEntry(str, Enum):
    """Fixed, ordered menu of the assistant."""

    INSTALL = "Install Hyprland"
    CONFIGURE = "Configure Hyprland"
    TROUBLESHOOT = "Troubleshoot"
    SAVE_LOGS = "Save Logs"
    EXIT = "Exit"


MENU_LABELS: tuple[str, ...] = tuple(entry.value for entry in MenuEntry)


class Phase(str, Enum):
    IDLE = "idle"
    BUSY = "busy"
    EXITING = "exiting"


@dataclass(frozen=True)
class SessionState:
    """Everything the view needs; created once per process."""

    title: str = DEFAULT_TITLE
    labels: tuple[str, ...] = MENU_LABELS
    cursor: int = 0
    selected: str | None = None
    logs: tuple[str, ...] = ()
    busy: bool = False
    exiting: bool = False
    tick: int = 0  # drives the "Processing..." dots

    @property
    def phase(self) -> Phase:
        if self.exiting:
            return Phase.EXITING
        if self.busy:
            return Phase.BUSY
        return Phase.IDLE

    @property
    def current(self) -> str:
        """Label under the cursor."""
        return self.labels[self.cursor]


# ── Events ─────────────────────────────────────────────────────


@dataclass(frozen=True)
class KeyEvent:
    """A key press, named the way the key bindings report it."""

    key: str  # "up", "down", "enter", "q", "ctrl+c", ...


@dataclass(frozen=True)
class TickEvent:
    """Periodic heartbeat animating the progress indicator."""


@dataclass(frozen=True)
class OutcomeEvent:
    """The single result of a background action.

    ``notes`` are informational findings that are worth showing but
    did not stop the action (e.g. an unexpected environment value).
    """

    status: str
    error: SetupError | None = None
    notes: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return self.error is None

    def log_lines(self) -> list[str]:
        """Lines appended to the session log for this outcome."""
        lines = list(self.notes)
        lines.append(self.status)
        if self.error is not None:
            lines.append(f"Error: {self.error.kind}: {self.error}")
        return lines


SessionEvent = KeyEvent | TickEvent | OutcomeEvent
