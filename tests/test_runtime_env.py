"""
Tests for the startup runtime-directory step.
"""

from pathlib import Path

from hyprsetup.core.models.settings import RuntimeDirConfig
from hyprsetup.core.services.runtime_env import prepare_runtime_environment


class TestPrepareRuntimeEnvironment:
    def test_sets_variable(self, tmp_path: Path):
        env: dict[str, str] = {"XDG_RUNTIME_DIR": "/somewhere/else"}
        result = prepare_runtime_environment(RuntimeDirConfig(path=str(tmp_path)), environ=env)
        assert env["XDG_RUNTIME_DIR"] == str(tmp_path)
        assert result.ok
        assert not result.created

    def test_creates_missing_dir(self, tmp_path: Path):
        target = tmp_path / "run"
        env: dict[str, str] = {}
        result = prepare_runtime_environment(RuntimeDirConfig(path=str(target)), environ=env)
        assert result.created
        assert target.is_dir()
        assert (target.stat().st_mode & 0o777) == 0o700

    def test_create_disabled(self, tmp_path: Path):
        target = tmp_path / "run"
        cfg = RuntimeDirConfig(path=str(target), create_if_missing=False)
        result = prepare_runtime_environment(cfg, environ={})
        assert not target.exists()
        assert result.ok

    def test_failure_is_a_warning(self, tmp_path: Path, caplog):
        blocker = tmp_path / "file"
        blocker.write_text("x")
        env: dict[str, str] = {}
        result = prepare_runtime_environment(RuntimeDirConfig(path=str(blocker / "run")), environ=env)
        assert not result.ok
        assert "Failed to create" in result.warning
        assert env["XDG_RUNTIME_DIR"] == str(blocker / "run")
        assert any(r.levelname == "WARNING" for r in caplog.records)

    def test_custom_variable(self, tmp_path: Path):
        env: dict[str, str] = {}
        prepare_runtime_environment(RuntimeDirConfig(variable="MY_RUNTIME", path=str(tmp_path)), environ=env)
        assert env == {"MY_RUNTIME": str(tmp_path)}
