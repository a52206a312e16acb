"""
Session controller — the state machine behind the menu.

``update`` is the only place SessionState changes: it takes the current
state and one event and returns the next state plus at most one effect
for the session loop to carry out (start an action, or quit).
``render`` turns a state into styled text fragments. Both are pure:
no I/O, no mutation, same input gives the same output.

States:
    idle     no action running, waiting for input
    busy     an action was dispatched, waiting for its outcome
    exiting  terminal; every further event is dropped
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from hyprsetup.core.models.session import (
    MENU_LABELS,
    KeyEvent,
    MenuEntry,
    OutcomeEvent,
    Phase,
    SessionEvent,
    SessionState,
    TickEvent,
)
from hyprsetup.core.models.settings import DEFAULT_TITLE

logger = logging.getLogger(__name__)

UP_KEYS = frozenset({"up", "k"})
DOWN_KEYS = frozenset({"down", "j"})
ENTER_KEYS = frozenset({"enter"})
QUIT_KEYS = frozenset({"q", "ctrl+c"})

# Style tags understood by the terminal UI
STYLE_TITLE = "class:title"
STYLE_MENU = "class:menu"
STYLE_CURSOR = "class:menu.cursor"
STYLE_SELECTED = "class:selected"
STYLE_PROGRESS = "class:progress"
STYLE_LOG = "class:log"
STYLE_NOTICE = "class:notice"

_PAD = "  "

Fragments = list[tuple[str, str]]


# ── Effects ────────────────────────────────────────────────────


@dataclass(frozen=True)
class Dispatch:
    """Start the action for ``entry``.

    ``logs`` is the session log at dispatch time (what Save Logs writes).
    """

    entry: MenuEntry
    logs: tuple[str, ...] = ()


@dataclass(frozen=True)
class Quit:
    """End the session."""


Effect = Dispatch | Quit


@dataclass(frozen=True)
class Transition:
    state: SessionState
    effect: Effect | None = None


def initial_state(title: str = DEFAULT_TITLE, labels: tuple[str, ...] = MENU_LABELS) -> SessionState:
    """Idle, cursor on the first entry, nothing selected, empty log."""
    if not labels:
        raise ValueError("menu needs at least one entry")
    return SessionState(title=title, labels=tuple(labels))


# ── Update ─────────────────────────────────────────────────────


def update(state: SessionState, event: SessionEvent) -> Transition:
    """Apply one event to ``state``."""
    phase = state.phase
    if phase is Phase.EXITING:
        logger.debug("Session exiting, dropping %r", event)
        return Transition(state)

    if isinstance(event, KeyEvent):
        return _on_key(state, event.key)

    if isinstance(event, TickEvent):
        if phase is not Phase.BUSY:
            return Transition(state)
        return Transition(replace(state, tick=state.tick + 1))

    if isinstance(event, OutcomeEvent):
        return Transition(
            replace(
                state,
                logs=state.logs + tuple(event.log_lines()),
                busy=False,
            )
        )

    logger.warning("Unknown event type: %r", event)
    return Transition(state)


def _on_key(state: SessionState, key: str) -> Transition:
    if key in QUIT_KEYS:
        return Transition(replace(state, exiting=True), Quit())

    if key in UP_KEYS:
        return _move(state, max(0, state.cursor - 1))

    if key in DOWN_KEYS:
        return _move(state, min(len(state.labels) - 1, state.cursor + 1))

    if key in ENTER_KEYS:
        return _on_enter(state)

    return Transition(state)


def _move(state: SessionState, cursor: int) -> Transition:
    if cursor == state.cursor:
        return Transition(state)
    return Transition(replace(state, cursor=cursor))


def _on_enter(state: SessionState) -> Transition:
    label = state.current

    if label == MenuEntry.EXIT.value:
        return Transition(replace(state, selected=label, exiting=True), Quit())

    # one action at a time; Exit above is never blocked
    if state.phase is Phase.BUSY:
        logger.info("Ignoring %r: %r is still running", label, state.selected)
        return Transition(state)

    try:
        entry = MenuEntry(label)
    except ValueError:
        logger.warning("No action bound to menu entry %r", label)
        return Transition(replace(state, selected=label))

    return Transition(
        replace(state, selected=label, busy=True, tick=0),
        Dispatch(entry=entry, logs=state.logs),
    )


# ── Render ─────────────────────────────────────────────────────


def render(state: SessionState) -> Fragments:
    """Styled view of ``state`` as ``(style, text)`` fragments."""
    frags: Fragments = [("", "\n")]
    frags.append((STYLE_TITLE, f"{_PAD}{state.title}\n"))
    frags.append(("", "\n"))

    for index, label in enumerate(state.labels):
        if index == state.cursor:
            frags.append((STYLE_CURSOR, f"{_PAD}> {label}\n"))
        else:
            frags.append((STYLE_MENU, f"{_PAD}  {label}\n"))

    if state.selected is not None:
        frags.append(("", "\n"))
        frags.append((STYLE_SELECTED, f"{_PAD}Selected: {state.selected}\n"))
        if state.phase is Phase.BUSY:
            frags.append((STYLE_PROGRESS, f"{_PAD}Processing{'.' * (state.tick % 4)}\n"))
        for line in state.logs:
            frags.append((STYLE_LOG, f"{_PAD}{line}\n"))

    if state.phase is Phase.EXITING:
        frags.append(("", "\n"))
        frags.append((STYLE_NOTICE, f"{_PAD}Exiting...\n"))

    frags.append(("", "\n"))
    return frags


def render_text(state: SessionState) -> str:
    """Plain-text projection of ``render``."""
    return "".join(text for _style, text in render(state))
