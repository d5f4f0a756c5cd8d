"""Shared fixtures for unrealqt tests."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from unrealqt.config.store import ConfigStore

from tests.helpers import write_unreal_project


@pytest.fixture
def store(tmp_path: Path) -> ConfigStore:
    """A ConfigStore rooted in a temporary directory."""
    return ConfigStore(tmp_path / "appdata")


@pytest.fixture
def program_dir(tmp_path: Path) -> Path:
    """Directory for the wizard's scratch files."""
    return tmp_path / "program"


@pytest.fixture
def fake_qtcreator() -> Callable[..., Callable[[Path], int]]:
    """Build a launcher that behaves like Qt Creator after kit selection.

    The returned launcher writes ``<scratch>.user`` with the given text
    (or nothing when the text is None) and records each call.
    """

    def factory(text: str | None = None) -> Callable[[Path], int]:
        def launcher(path: Path) -> int:
            launcher.calls.append(path)
            assert path.exists(), "scratch project must exist during launch"
            if text is not None:
                path.with_name(path.name + ".user").write_text(text, encoding="utf-8")
            return 0

        launcher.calls = []
        return launcher

    return factory


@pytest.fixture
def unreal_project_dir(tmp_path: Path) -> Path:
    """An Unreal project directory named MyGame."""
    return write_unreal_project(tmp_path / "MyGame")
