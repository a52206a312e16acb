"""
Terminal UI — prompt_toolkit front end for the session.

The UI owns no state. Key bindings post KeyEvents to the session, the
window shows ``render(session.state)``, and every state change asks the
application to redraw. When the session reaches its exiting state the
application is closed.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable

from prompt_toolkit.application import Application
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.layout import HSplit, Layout, Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.styles import Style

from hyprsetup.core.engine.controller import render
from hyprsetup.core.engine.session import Session
from hyprsetup.core.models.session import KeyEvent, SessionEvent, SessionState
from hyprsetup.core.observability.logging_config import console_suspended

logger = logging.getLogger(__name__)

TUI_STYLE = Style.from_dict(
    {
        "title": "bold #e5e7eb",
        "menu": "#e5e7eb",
        "menu.cursor": "bold #22c55e",
        "selected": "#9ca3af",
        "progress": "italic #9ca3af",
        "log": "#FFA07A",
        "notice": "bold #e5e7eb",
    }
)

# prompt_toolkit key name -> session key name
KEY_MAP = {
    "up": "up",
    "down": "down",
    "k": "k",
    "j": "j",
    "enter": "enter",
    "q": "q",
    "c-c": "ctrl+c",
}


def build_key_bindings(post: Callable[[SessionEvent], None]) -> KeyBindings:
    kb = KeyBindings()

    for pt_key, name in KEY_MAP.items():

        def _handler(event: Any, name: str = name) -> None:
            post(KeyEvent(name))

        kb.add(pt_key)(_handler)

    return kb


def build_application(session: Session, **app_kwargs: Any) -> Application:
    """Full-screen application bound to ``session``.

    Extra keyword arguments (``input``, ``output``) go to ``Application``.
    """
    control = FormattedTextControl(
        lambda: FormattedText(render(session.state)),
        focusable=True,
        show_cursor=False,
    )
    return Application(
        layout=Layout(HSplit([Window(content=control, wrap_lines=True)])),
        key_bindings=build_key_bindings(session.post),
        style=TUI_STYLE,
        full_screen=True,
        **app_kwargs,
    )


async def run_tui(session: Session, app: Application | None = None) -> SessionState:
    """Run the UI and the session loop together until the session exits.

    Console logging is muted meanwhile so it cannot draw over the screen.
    """
    app = app or build_application(session)
    session.on_change = lambda _state: app.invalidate()
    session_task = asyncio.create_task(session.run(), name="session")

    def _close(_task: asyncio.Task) -> None:
        if app.is_running:
            app.exit()

    session_task.add_done_callback(_close)

    with console_suspended():
        try:
            await app.run_async()
        finally:
            if not session_task.done():
                logger.debug("UI closed before the session; requesting quit")
                session.post(KeyEvent("ctrl+c"))

        return await session_task
