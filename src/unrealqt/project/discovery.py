"""Locate and validate an Unreal project directory.

The project directory is the one holding the ``.uproject`` file. Its
Visual Studio project is expected at
``Intermediate/ProjectFiles/<Name>.vcxproj``, which Unreal writes when
"Generate Visual Studio project files" is run on the ``.uproject``. The
``.vcxproj`` must carry the same name as the ``.uproject`` (the default).
"""

from __future__ import annotations

from pathlib import Path

from unrealqt.exceptions import ProjectError
from unrealqt.project.models import UnrealProject

VCXPROJ_DIR = Path("Intermediate") / "ProjectFiles"


def clean_path_input(raw: str) -> str:
    """Strip the quotes a terminal adds to drag-and-dropped paths."""
    return raw.strip().replace('"', "")


def find_project(path: str | Path) -> UnrealProject:
    """Validate *path* as an Unreal project directory.

    Raises:
        ProjectError: If the directory does not exist, holds no
            ``.uproject`` file, or has no generated vcxproj.
    """
    directory = Path(clean_path_input(str(path))).expanduser()
    if not directory.is_dir():
        raise ProjectError(f"Not a directory: {directory}")

    uprojects = sorted(directory.glob("*.uproject"))
    if not uprojects:
        raise ProjectError(f"No .uproject file in {directory}")

    uproject = uprojects[0]
    name = uproject.stem
    vcxproj = directory / VCXPROJ_DIR / f"{name}.vcxproj"
    if not vcxproj.is_file():
        raise ProjectError(
            f"{vcxproj} not found. Right-click {uproject.name} and choose "
            "'Generate Visual Studio project files' first."
        )
    return UnrealProject(
        name=name,
        directory=directory.resolve(),
        uproject=uproject.resolve(),
        vcxproj=vcxproj.resolve(),
    )
