"""Data models for Unreal projects and their parsed vcxproj contents."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class UnrealProject:
    """An Unreal Engine C++ project on disk.

    Attributes:
        name: Project name, the stem of the ``.uproject`` file.
        directory: Directory holding the ``.uproject``.
        uproject: Path to the ``.uproject`` file.
        vcxproj: Path to the generated Visual Studio project.
    """

    name: str
    directory: Path
    uproject: Path
    vcxproj: Path


@dataclass
class VcxprojModel:
    """What the Qt project needs from a generated vcxproj.

    Paths are forward-slash strings relative to the project directory,
    or absolute (engine headers usually are).
    """

    sources: list[str] = field(default_factory=list)
    headers: list[str] = field(default_factory=list)
    defines: list[str] = field(default_factory=list)
    include_paths: list[str] = field(default_factory=list)
    engine_dir: str | None = None
