"""
Session loop — one queue, one update function.

Key presses, progress ticks and action outcomes are all posted to the
same ``asyncio.Queue`` and applied one at a time by ``update``, so the
state never sees interleaved changes. The loop carries out the effect
``update`` returns (start an action, or quit) and notifies ``on_change``
so the UI can redraw.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Callable

from hyprsetup.core.engine.controller import Dispatch, Effect, Quit, initial_state, update
from hyprsetup.core.models.session import OutcomeEvent, SessionEvent, SessionState, TickEvent
from hyprsetup.core.services.task_runner import TaskRunner

logger = logging.getLogger(__name__)

STARTUP_STATUS = "Initializing Hyprland Setup..."


class Session:
    """Owns the authoritative SessionState for one run of the assistant."""

    def __init__(
        self,
        runner: TaskRunner,
        state: SessionState | None = None,
        *,
        tick_interval: float = 0.3,
        on_change: Callable[[SessionState], None] | None = None,
        startup_notes: tuple[str, ...] = (),
    ) -> None:
        self.runner = runner
        self.state = state or initial_state(title=runner.settings.title)
        self.tick_interval = tick_interval
        self.on_change = on_change
        self._queue: asyncio.Queue[SessionEvent] = asyncio.Queue()
        self._queue.put_nowait(OutcomeEvent(status=STARTUP_STATUS, notes=startup_notes))

    def post(self, event: SessionEvent) -> None:
        """Queue an event; safe to call from callbacks on the session loop."""
        self._queue.put_nowait(event)

    async def run(self) -> SessionState:
        """Process events until the state is exiting; returns the final state."""
        ticker = asyncio.create_task(self._tick()) if self.tick_interval > 0 else None
        try:
            while not self.state.exiting:
                event = await self._queue.get()
                self.handle(event)
        finally:
            if ticker is not None:
                ticker.cancel()
            self.runner.cancel_all()
        logger.info("Session ended")
        return self.state

    def handle(self, event: SessionEvent) -> Effect | None:
        """Apply one event and carry out its effect."""
        transition = update(self.state, event)
        changed = transition.state is not self.state
        self.state = transition.state
        effect = transition.effect

        if isinstance(effect, Dispatch):
            logger.debug("Dispatching %s", effect.entry.value)
            self.runner.dispatch(effect, self.post)
        elif isinstance(effect, Quit):
            logger.info("Quit requested (%d action(s) in flight)", self.runner.in_flight)

        if changed and self.on_change is not None:
            self.on_change(self.state)
        return effect

    async def _tick(self) -> None:
        while True:
            await asyncio.sleep(self.tick_interval)
            self.post(TickEvent())
