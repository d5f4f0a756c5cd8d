"""Tests for ``unrealqt configure``."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml
from click.testing import CliRunner

from unrealqt.cli import configure_cmd
from unrealqt.cli.main import cli
from unrealqt.config.models import WizardConfig
from unrealqt.config.store import ConfigStore
from unrealqt.exceptions import IdeLaunchError

from tests.helpers import CONF_ID, ENV_ID, settings_text


def _configure(runner: CliRunner, config_dir: Path, *args: str):
    return runner.invoke(cli, ["--config-dir", str(config_dir), "configure", "--yes", *args])


class TestConfigureSuccess:
    def test_stores_ids(self, runner, config_dir, patch_qtcreator) -> None:
        launches = patch_qtcreator()
        result = _configure(runner, config_dir)

        assert result.exit_code == 0, result.output
        assert len(launches) == 1
        data = yaml.safe_load((config_dir / "config.yaml").read_text(encoding="utf-8"))
        assert data == {"environment_id": ENV_ID, "toolchain_configuration_id": CONF_ID}
        assert ENV_ID in result.output

    def test_passes_qtcreator_option(self, runner, config_dir, patch_qtcreator) -> None:
        launches = patch_qtcreator()
        result = _configure(runner, config_dir, "--qtcreator", "/opt/qtc")
        assert result.exit_code == 0, result.output
        assert launches[0][1] == "/opt/qtc"

    def test_program_dir_option(self, runner, config_dir, patch_qtcreator, tmp_path) -> None:
        launches = patch_qtcreator()
        scratch_dir = tmp_path / "scratch"
        result = _configure(runner, config_dir, "--program-dir", str(scratch_dir))
        assert result.exit_code == 0, result.output
        assert launches[0][0] == scratch_dir / "temp.pro"
        assert not (scratch_dir / "temp.pro").exists()

    def test_reset_removes_previous(self, runner, config_dir, patch_qtcreator) -> None:
        ConfigStore(config_dir).save(WizardConfig(CONF_ID, ENV_ID))
        patch_qtcreator()
        result = _configure(runner, config_dir, "--reset")
        assert result.exit_code == 0, result.output
        assert "Removed" in result.output
        assert ConfigStore(config_dir).load() == WizardConfig(ENV_ID, CONF_ID)


class TestConfigureFailures:
    """Each wizard failure exits with its own code."""

    def test_missing_settings_file_exit_10(self, runner, config_dir, patch_qtcreator) -> None:
        patch_qtcreator(None)
        result = _configure(runner, config_dir)
        assert result.exit_code == 10
        assert "ERROR" in result.output

    @pytest.mark.parametrize("text, code", [
        (settings_text().replace("EnvironmentId", "X"), 12),
        (settings_text(env="{0-0-0-0-0}"), 13),
        (settings_text().replace("ProjectConfiguration.Id", "X"), 14),
        (settings_text(conf="{0-0-0-0-0}"), 15),
    ])
    def test_extraction_failures(self, runner, config_dir, patch_qtcreator, text, code) -> None:
        patch_qtcreator(text)
        result = _configure(runner, config_dir)
        assert result.exit_code == code
        assert not (config_dir / "config.yaml").exists()

    def test_launch_failure_exit_17(self, runner, config_dir, monkeypatch) -> None:
        def failing_launch(path: Path, executable: str | None = None) -> int:
            raise IdeLaunchError("qtcreator not found on PATH")

        monkeypatch.setattr(configure_cmd, "launch_and_wait", failing_launch)
        monkeypatch.setattr(configure_cmd, "default_program_dir", lambda: config_dir.parent / "program")
        result = _configure(runner, config_dir)

        assert result.exit_code == 17
        assert "Launching Qt Creator" in result.output
        assert "launched" not in result.output
        assert "not found on PATH" in result.output
