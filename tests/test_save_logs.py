"""
Tests for the save-logs action — append-only log file.
"""

import tempfile
from pathlib import Path

from hyprsetup.core.errors import IOFailure
from hyprsetup.core.models.settings import SetupConfig
from hyprsetup.core.services.log_ops import save_logs

LINES = ("Initializing Hyprland Setup...", "Failed to install B", "Error: CommandFailure: boom")


class TestSaveLogs:
    def test_writes_lines(self, settings):
        outcome = save_logs(settings, LINES)
        path = settings.log_path()
        assert outcome.ok
        assert outcome.status == f"Logs saved to {path}"
        assert path.read_text(encoding="utf-8").splitlines() == list(LINES)

    def test_appends_on_second_save(self, settings):
        save_logs(settings, LINES)
        save_logs(settings, LINES)
        lines = settings.log_path().read_text(encoding="utf-8").splitlines()
        assert len(lines) == 2 * len(LINES)
        assert lines == list(LINES) * 2

    def test_empty_log_creates_file(self, settings):
        outcome = save_logs(settings, ())
        assert outcome.ok
        assert settings.log_path().read_text() == ""

    def test_open_failure(self, settings, tmp_path: Path):
        target = tmp_path / "missing-dir" / "log.txt"
        outcome = save_logs(settings, LINES, path=target)
        assert outcome.status == "Failed to open log file for writing"
        assert isinstance(outcome.error, IOFailure)
        assert outcome.error.path == target

    def test_write_failure_releases_handle(self, settings, monkeypatch):
        handles = []
        real_open = Path.open

        class FailingHandle:
            def __init__(self, inner):
                self.inner = inner
                self.closed = False

            def write(self, text):
                raise OSError(28, "No space left on device")

            def __enter__(self):
                return self

            def __exit__(self, *exc):
                self.inner.close()
                self.closed = True
                return False

        def fake_open(self, *args, **kwargs):
            handle = FailingHandle(real_open(self, *args, **kwargs))
            handles.append(handle)
            return handle

        monkeypatch.setattr(Path, "open", fake_open)
        outcome = save_logs(settings, LINES)

        assert outcome.status == "Failed to write to log file"
        assert isinstance(outcome.error, IOFailure)
        assert handles and handles[0].closed

    def test_default_location_is_tempdir(self):
        assert SetupConfig().log_path() == Path(tempfile.gettempdir()) / "hyprland_setup.log"
