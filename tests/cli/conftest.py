"""Shared fixtures for CLI tests.

The Qt Creator launch is replaced by a fake that writes the settings file
the real IDE would leave behind, so the wizard runs without a GUI.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest
from click.testing import CliRunner

from unrealqt.cli import configure_cmd

from tests.helpers import settings_text


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click CliRunner for invoking commands."""
    return CliRunner()


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    return tmp_path / "appdata"


@pytest.fixture
def patch_qtcreator(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Callable[[str | None], list]:
    """Replace the IDE launch; returns a list that records launches."""

    monkeypatch.setattr(configure_cmd, "default_program_dir", lambda: tmp_path / "program")

    def install(text: str | None = settings_text()) -> list:
        launches: list = []

        def fake_launch(path: Path, executable: str | None = None) -> int:
            launches.append((path, executable))
            if text is not None:
                path.with_name(path.name + ".user").write_text(text, encoding="utf-8")
            return 0

        monkeypatch.setattr(configure_cmd, "launch_and_wait", fake_launch)
        return launches

    return install
