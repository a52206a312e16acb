"""
Task runner — starts menu actions in the background.

Each dispatched action runs its blocking steps on a daemon worker
thread and is tracked as an ``asyncio.Task`` on the session loop. When
the action finishes, its single OutcomeEvent is handed to ``deliver``
(the session queue).

Cancellation is cooperative: ``cancel_all`` sets each action's cancel
token and cancels its task without waiting for it. A worker still in
the middle of a package install finishes that command on its own; its
outcome is dropped.
"""

from __future__ import annotations

import asyncio
import logging
import threading
from functools import partial
from pathlib import Path
from typing import Callable

from hyprsetup.adapters.base import Adapter
from hyprsetup.core.engine.controller import Dispatch
from hyprsetup.core.errors import SetupError
from hyprsetup.core.models.session import MenuEntry, OutcomeEvent
from hyprsetup.core.models.settings import SetupConfig
from hyprsetup.core.services.configure_ops import configure
from hyprsetup.core.services.install_ops import install_packages
from hyprsetup.core.services.log_ops import save_logs
from hyprsetup.core.services.troubleshoot_ops import troubleshoot

logger = logging.getLogger(__name__)

Deliver = Callable[[OutcomeEvent], None]


class TaskRunner:
    """Maps menu entries to actions and runs them off the event loop."""

    def __init__(
        self,
        settings: SetupConfig,
        adapter: Adapter,
        *,
        working_dir: Path | None = None,
        home: Path | None = None,
    ) -> None:
        self.settings = settings
        self.adapter = adapter
        self.working_dir = working_dir
        self.home = home
        self._tasks: dict[asyncio.Task, threading.Event] = {}

    @property
    def in_flight(self) -> int:
        """Number of dispatched actions that have not finished."""
        return len(self._tasks)

    def action_for(
        self,
        dispatch: Dispatch,
        cancel: threading.Event | None = None,
    ) -> Callable[[], OutcomeEvent]:
        """The blocking callable that performs ``dispatch``."""
        entry = dispatch.entry
        if entry is MenuEntry.INSTALL:
            return partial(
                install_packages,
                self.settings,
                self.adapter,
                working_dir=self.working_dir,
                home=self.home,
                cancel=cancel,
            )
        if entry is MenuEntry.CONFIGURE:
            return partial(configure, self.settings)
        if entry is MenuEntry.TROUBLESHOOT:
            return partial(troubleshoot, self.settings)
        if entry is MenuEntry.SAVE_LOGS:
            return partial(save_logs, self.settings, dispatch.logs)
        raise ValueError(f"No action for menu entry: {entry.value}")

    def run_action(
        self,
        dispatch: Dispatch,
        cancel: threading.Event | None = None,
    ) -> OutcomeEvent:
        """Run an action to completion on the calling thread.

        Always returns an OutcomeEvent; an unexpected exception becomes
        a failed outcome instead of killing the worker.
        """
        logger.info("Starting action: %s", dispatch.entry.value)
        try:
            outcome = self.action_for(dispatch, cancel)()
        except Exception as e:
            logger.exception("Action %s crashed", dispatch.entry.value)
            return OutcomeEvent(
                status=f"{dispatch.entry.value} failed unexpectedly",
                error=SetupError(str(e)),
            )
        logger.info("Finished action: %s — %s", dispatch.entry.value, outcome.status)
        return outcome

    def dispatch(self, dispatch: Dispatch, deliver: Deliver) -> asyncio.Task:
        """Start ``dispatch`` in the background; must run on the session loop."""
        cancel = threading.Event()
        task = asyncio.create_task(
            self._run(dispatch, cancel, deliver),
            name=f"action:{dispatch.entry.name.lower()}",
        )
        self._tasks[task] = cancel
        task.add_done_callback(self._forget)
        return task

    def cancel_all(self) -> None:
        """Signal every in-flight action to stop; does not wait."""
        for task, cancel in list(self._tasks.items()):
            logger.info("Cancelling %s", task.get_name())
            cancel.set()
            task.cancel()

    async def _run(
        self,
        dispatch: Dispatch,
        cancel: threading.Event,
        deliver: Deliver,
    ) -> None:
        loop = asyncio.get_running_loop()
        future: asyncio.Future[OutcomeEvent] = loop.create_future()

        def worker() -> None:
            outcome = self.run_action(dispatch, cancel)
            try:
                loop.call_soon_threadsafe(_resolve, future, outcome)
            except RuntimeError:
                logger.debug("Session loop closed; dropping outcome of %s", dispatch.entry.value)

        threading.Thread(
            target=worker,
            name=f"action-{dispatch.entry.name.lower()}",
            daemon=True,
        ).start()

        outcome = await future
        if cancel.is_set():
            logger.debug("Dropping outcome of cancelled %s", dispatch.entry.value)
            return
        deliver(outcome)

    def _forget(self, task: asyncio.Task) -> None:
        self._tasks.pop(task, None)


def _resolve(future: asyncio.Future, outcome: OutcomeEvent) -> None:
    if not future.done():
        future.set_result(outcome)
