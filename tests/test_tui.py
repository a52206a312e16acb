"""
Tests for the prompt_toolkit front end, driven through a pipe input.
"""

import asyncio

import pytest
from prompt_toolkit.input import create_pipe_input
from prompt_toolkit.output import DummyOutput

from hyprsetup.core.engine.session import STARTUP_STATUS, Session
from hyprsetup.core.models.session import KeyEvent
from hyprsetup.core.observability.logging_config import setup_logging
from hyprsetup.core.services.task_runner import TaskRunner
from hyprsetup.ui.tui.app import KEY_MAP, build_application, build_key_bindings, run_tui


@pytest.fixture
def pipe():
    with create_pipe_input() as inp:
        yield inp


def _drive(session, pipe, text="", *, close_after=None):
    async def scenario():
        app = build_application(session, input=pipe, output=DummyOutput())
        if text:
            pipe.send_text(text)
        if close_after is not None:
            asyncio.get_running_loop().call_later(close_after, app.exit)
        return await asyncio.wait_for(run_tui(session, app), 10)

    return asyncio.run(scenario())


class TestKeyBindings:
    def test_every_key_posts_its_name(self):
        posted = []
        kb = build_key_bindings(posted.append)
        for binding in kb.bindings:
            binding.handler(None)
        assert {e.key for e in posted} == set(KEY_MAP.values())
        assert all(isinstance(e, KeyEvent) for e in posted)

    def test_ctrl_c_maps_to_quit_key(self):
        assert KEY_MAP["c-c"] == "ctrl+c"


class TestRunTui:
    def test_q_quits(self, settings, mock_pm, pipe):
        session = Session(TaskRunner(settings, mock_pm), tick_interval=0)
        final = _drive(session, pipe, "q")
        assert final.exiting
        assert final.selected is None

    def test_exit_entry(self, settings, mock_pm, pipe):
        session = Session(TaskRunner(settings, mock_pm), tick_interval=0)
        final = _drive(session, pipe, "jjjj\r")
        assert final.selected == "Exit"
        assert final.exiting

    def test_closing_ui_ends_session(self, settings, mock_pm, pipe):
        session = Session(TaskRunner(settings, mock_pm), tick_interval=0)
        final = _drive(session, pipe, close_after=0.2)
        assert final.exiting
        assert final.logs == (STARTUP_STATUS,)

    @pytest.mark.usefixtures("isolated_logging")
    def test_failure_logs_stay_off_the_screen(self, settings, mock_pm, workdir, home, pipe, capsys):
        setup_logging(level="WARNING")
        mock_pm.set_failure("install:B", output="pkg: no such package B")
        runner = TaskRunner(settings, mock_pm, working_dir=workdir, home=home)
        session = Session(runner, tick_interval=0)

        async def scenario():
            app = build_application(session, input=pipe, output=DummyOutput())
            ui = asyncio.create_task(run_tui(session, app))
            pipe.send_text("\r")
            deadline = asyncio.get_running_loop().time() + 5
            while "Failed to install B" not in session.state.logs:
                assert asyncio.get_running_loop().time() < deadline
                await asyncio.sleep(0.01)
            pipe.send_text("q")
            return await asyncio.wait_for(ui, 5)

        final = asyncio.run(scenario())
        assert "Failed to install B" in final.logs
        assert capsys.readouterr().err == ""
