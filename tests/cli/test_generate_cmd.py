"""Tests for ``unrealqt generate``."""

from __future__ import annotations

from pathlib import Path

from click.testing import CliRunner

from unrealqt.cli.main import cli
from unrealqt.config.models import WizardConfig
from unrealqt.config.store import ConfigStore

from tests.helpers import CONF_ID, ENV_ID


def _generate(runner: CliRunner, config_dir: Path, *args: str, input: str | None = None):
    return runner.invoke(cli, ["--config-dir", str(config_dir), "generate", *args], input=input)


class TestDisclaimer:
    def test_decline_exits_1(self, runner, config_dir, unreal_project_dir) -> None:
        result = _generate(runner, config_dir, str(unreal_project_dir), input="n\n")
        assert result.exit_code == 1
        assert "declined" in result.output
        assert not ConfigStore(config_dir).disclaimer_accepted()

    def test_accept_is_remembered(self, runner, config_dir, unreal_project_dir) -> None:
        ConfigStore(config_dir).save(WizardConfig(ENV_ID, CONF_ID))
        result = _generate(runner, config_dir, str(unreal_project_dir), input="y\n")
        assert result.exit_code == 0, result.output
        assert ConfigStore(config_dir).disclaimer_accepted()

        again = _generate(runner, config_dir, str(unreal_project_dir))
        assert again.exit_code == 0, again.output
        assert "Disclaimer" not in again.output


class TestGenerate:
    def test_with_stored_config(self, runner, config_dir, unreal_project_dir) -> None:
        ConfigStore(config_dir).save(WizardConfig(ENV_ID, CONF_ID))
        result = _generate(runner, config_dir, str(unreal_project_dir), "--yes")

        assert result.exit_code == 0, result.output
        assert (unreal_project_dir / "MyGame.pro").is_file()
        assert (unreal_project_dir / "defines.pri").is_file()
        assert (unreal_project_dir / "includes.pri").is_file()
        pro_user = (unreal_project_dir / "MyGame.pro.user").read_text(encoding="utf-8")
        assert ENV_ID in pro_user
        assert CONF_ID in pro_user

    def test_runs_wizard_when_unconfigured(
        self, runner, config_dir, unreal_project_dir, patch_qtcreator,
    ) -> None:
        launches = patch_qtcreator()
        result = _generate(runner, config_dir, str(unreal_project_dir), "--yes")

        assert result.exit_code == 0, result.output
        assert len(launches) == 1
        assert ConfigStore(config_dir).load() == WizardConfig(ENV_ID, CONF_ID)
        assert (unreal_project_dir / "MyGame.pro.user").is_file()

    def test_wizard_failure_exit_code(
        self, runner, config_dir, unreal_project_dir, patch_qtcreator,
    ) -> None:
        patch_qtcreator(None)
        result = _generate(runner, config_dir, str(unreal_project_dir), "--yes")
        assert result.exit_code == 10
        assert not (unreal_project_dir / "MyGame.pro").exists()

    def test_invalid_stored_config_exit_20(self, runner, config_dir, unreal_project_dir) -> None:
        config_dir.mkdir(parents=True)
        (config_dir / "config.yaml").write_text(
            "environment_id: nope\ntoolchain_configuration_id: nope\n", encoding="utf-8"
        )
        result = _generate(runner, config_dir, str(unreal_project_dir), "--yes")
        assert result.exit_code == 20

    def test_not_a_project_exit_21(self, runner, config_dir, tmp_path) -> None:
        ConfigStore(config_dir).save(WizardConfig(ENV_ID, CONF_ID))
        empty = tmp_path / "empty"
        empty.mkdir()
        result = _generate(runner, config_dir, str(empty), "--yes")
        assert result.exit_code == 21

    def test_prompts_until_valid_path(self, runner, config_dir, unreal_project_dir, tmp_path) -> None:
        ConfigStore(config_dir).save(WizardConfig(ENV_ID, CONF_ID))
        answers = f"{tmp_path / 'nowhere'}\n\"{unreal_project_dir}\"\n"
        result = _generate(runner, config_dir, "--yes", input=answers)

        assert result.exit_code == 0, result.output
        assert "Invalid project directory" in result.output
        assert (unreal_project_dir / "MyGame.pro").is_file()
