"""
Tests for the CLI entrypoint — global options, settings errors, startup.
"""

import textwrap
from pathlib import Path

import pytest
from click.testing import CliRunner

from hyprsetup import main as main_module
from hyprsetup.adapters import MockAdapter, ShellCommandAdapter
from hyprsetup.main import cli


pytestmark = pytest.mark.usefixtures("isolated_logging")


@pytest.fixture
def project(tmp_path: Path, monkeypatch) -> Path:
    """A working directory with a hyprsetup.yml and a scratch runtime dir."""
    runtime = tmp_path / "run"
    (tmp_path / "hyprsetup.yml").write_text(textwrap.dedent(f"""\
        packages: [jq]
        install_delay: 0
        runtime_dir:
          path: {runtime}
    """))
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("HYPRSETUP_CONFIG", raising=False)
    monkeypatch.setenv("XDG_RUNTIME_DIR", "/untouched")
    return tmp_path


@pytest.fixture
def captured(monkeypatch):
    """Replace the interactive session with a recorder."""
    calls = {}

    async def fake_run_session(runner, startup_notes):
        calls["runner"] = runner
        calls["notes"] = startup_notes

    monkeypatch.setattr(main_module, "_run_session", fake_run_session)
    return calls


class TestCLIGlobal:
    """Tests for global CLI behavior."""

    def test_help(self):
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "Hyprland Setup Assistant" in result.output
        assert "--mock" in result.output

    def test_version(self):
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output


class TestStartup:
    def test_runs_session_with_settings(self, project: Path, captured):
        result = CliRunner().invoke(cli, [])
        assert result.exit_code == 0
        runner = captured["runner"]
        assert runner.settings.packages == ["jq"]
        assert isinstance(runner.adapter, ShellCommandAdapter)
        assert captured["notes"] == ()
        assert (project / "run").is_dir()

    def test_mock_flag(self, project: Path, captured):
        result = CliRunner().invoke(cli, ["--mock"])
        assert result.exit_code == 0
        assert isinstance(captured["runner"].adapter, MockAdapter)

    def test_runtime_dir_warning_becomes_note(self, project: Path, captured):
        blocker = project / "blocker"
        blocker.write_text("x")
        cfg = project / "custom.yml"
        cfg.write_text(f"runtime_dir:\n  path: {blocker / 'run'}\n")
        result = CliRunner().invoke(cli, ["--config", str(cfg)])
        assert result.exit_code == 0
        (note,) = captured["notes"]
        assert "Failed to create" in note

    def test_missing_config_file(self, project: Path, captured):
        result = CliRunner().invoke(cli, ["--config", str(project / "nope.yml")])
        assert result.exit_code == 1
        assert "not found" in result.output
        assert captured == {}

    def test_invalid_config_file(self, project: Path, captured):
        (project / "hyprsetup.yml").write_text("install_delay: [\n")
        result = CliRunner().invoke(cli, [])
        assert result.exit_code == 1
        assert "Invalid YAML" in result.output

    def test_session_crash_exits_nonzero(self, project: Path, monkeypatch):
        messages = []

        async def broken(runner, startup_notes):
            raise RuntimeError("terminal went away")

        monkeypatch.setattr(main_module, "_run_session", broken)
        monkeypatch.setattr(main_module.logger, "critical", lambda msg, *a: messages.append(msg % a))

        result = CliRunner().invoke(cli, [])
        assert result.exit_code == 1
        assert messages == ["Alas, there's been an error: terminal went away"]
