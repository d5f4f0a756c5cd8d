"""Render and write the Qt Creator project for an Unreal project.

Four files are written next to the ``.uproject``:

- ``<Name>.pro``: HEADERS and SOURCES from the vcxproj.
- ``defines.pri``: one ``DEFINES +=`` line per preprocessor define.
- ``includes.pri``: one ``INCLUDEPATH +=`` line per include path.
- ``<Name>.pro.user``: the kit binding, built from the ``WizardConfig``
  ids, with build/clean steps that call the engine's batch files.

Usage::

    gen = QtProjectGenerator(project, read_vcxproj(project.vcxproj), config)
    written = gen.write()
"""

from __future__ import annotations

import logging
from pathlib import Path
from xml.sax.saxutils import escape

from unrealqt.config.models import WizardConfig
from unrealqt.exceptions import GenerationError, ProjectError
from unrealqt.project.models import UnrealProject, VcxprojModel
from unrealqt.project.templates import (
    BUILD_CONFIGURATION,
    BUILD_STEP_LIST,
    PRO_FOOTER,
    PRO_HEADER,
    PRO_USER,
)

logger = logging.getLogger(__name__)

DEFINES_PRI = "defines.pri"
INCLUDES_PRI = "includes.pri"

# (display name, target suffix, UBT configuration)
BUILD_CONFIGURATIONS: list[tuple[str, str, str]] = [
    ("Development Editor", "Editor", "Development"),
    ("DebugGame Editor", "Editor", "DebugGame"),
    ("Development", "", "Development"),
    ("Shipping", "", "Shipping"),
]

_STEP_LISTS: list[tuple[str, str]] = [
    ("Build.bat", "ProjectExplorer.BuildSteps.Build"),
    ("Clean.bat", "ProjectExplorer.BuildSteps.Clean"),
]


def _fill(template: str, values: dict[str, str]) -> str:
    for key, value in values.items():
        template = template.replace("{{" + key + "}}", value)
    return template


def _xml(value: str) -> str:
    return escape(value, {'"': "&quot;"})


def _qmake_list(variable: str, items: list[str]) -> str:
    if not items:
        return f"{variable} +=\n"
    lines = [f"{variable} += \\"]
    for i, item in enumerate(items):
        suffix = " \\" if i < len(items) - 1 else ""
        lines.append(f"    {item}{suffix}")
    return "\n".join(lines) + "\n"


def render_pro(name: str, model: VcxprojModel) -> str:
    """Render ``<Name>.pro``."""
    return (
        _fill(PRO_HEADER, {"PROJECT_NAME": name})
        + "\n"
        + _qmake_list("HEADERS", model.headers)
        + "\n"
        + _qmake_list("SOURCES", model.sources)
        + PRO_FOOTER
    )


def render_defines_pri(model: VcxprojModel) -> str:
    """Render ``defines.pri``."""
    return "".join(f'DEFINES += "{d}"\n' for d in model.defines)


def render_includes_pri(model: VcxprojModel) -> str:
    """Render ``includes.pri``."""
    return "".join(f'INCLUDEPATH += "{p}"\n' for p in model.include_paths)


def editor_executable(engine_dir: str) -> str:
    """Return the editor binary for an engine: UnrealEditor (UE5) or UE4Editor."""
    ue5 = f"{engine_dir}/Binaries/Win64/UnrealEditor.exe"
    if Path(ue5).is_file():
        return ue5
    return f"{engine_dir}/Binaries/Win64/UE4Editor.exe"


def _render_build_configuration(
    index: int, entry: tuple[str, str, str], project: UnrealProject, engine_dir: str,
) -> str:
    display_name, suffix, configuration = entry
    uproject = project.uproject.as_posix()
    arguments = f'{project.name}{suffix} Win64 {configuration} -Project="{uproject}" -WaitMutex'
    step_lists = "".join(
        _fill(BUILD_STEP_LIST, {
            "LIST_INDEX": str(list_index),
            "ARGUMENTS": _xml(arguments),
            "COMMAND": _xml(f"{engine_dir}/Build/BatchFiles/{batch}"),
            "STEP_LIST_ID": step_id,
        })
        for list_index, (batch, step_id) in enumerate(_STEP_LISTS)
    )
    return _fill(BUILD_CONFIGURATION, {
        "INDEX": str(index),
        "PROJECT_DIR": _xml(project.directory.as_posix()),
        "STEP_LISTS": step_lists,
        "DISPLAY_NAME": _xml(display_name),
    })


def render_pro_user(project: UnrealProject, model: VcxprojModel, config: WizardConfig) -> str:
    """Render ``<Name>.pro.user`` bound to the configured kit.

    Raises:
        ProjectError: If the engine directory could not be determined
            from the vcxproj build command.
    """
    if not model.engine_dir:
        raise ProjectError(
            f"Cannot determine the engine directory from {project.vcxproj}"
        )
    engine_dir = model.engine_dir
    configurations = "".join(
        _render_build_configuration(i, entry, project, engine_dir)
        for i, entry in enumerate(BUILD_CONFIGURATIONS)
    )
    return _fill(PRO_USER, {
        "ENVIRONMENT_ID": config.environment_id,
        "CONFIGURATION_ID": config.toolchain_configuration_id,
        "BUILD_CONFIGURATIONS": configurations,
        "BUILD_CONFIGURATION_COUNT": str(len(BUILD_CONFIGURATIONS)),
        "UPROJECT_PATH": _xml(project.uproject.as_posix()),
        "EDITOR_EXECUTABLE": _xml(editor_executable(engine_dir)),
        "PROJECT_DIR": _xml(project.directory.as_posix()),
        "PROJECT_NAME": _xml(project.name),
    })


class QtProjectGenerator:
    """Writes the Qt Creator files for one Unreal project.

    Attributes:
        project: The validated Unreal project.
        model: Parsed vcxproj contents.
        config: Qt Creator ids from the wizard.
    """

    def __init__(self, project: UnrealProject, model: VcxprojModel, config: WizardConfig) -> None:
        self.project = project
        self.model = model
        self.config = config

    def render(self) -> dict[str, str]:
        """Render all files, keyed by file name."""
        name = self.project.name
        return {
            f"{name}.pro": render_pro(name, self.model),
            DEFINES_PRI: render_defines_pri(self.model),
            INCLUDES_PRI: render_includes_pri(self.model),
            f"{name}.pro.user": render_pro_user(self.project, self.model, self.config),
        }

    def write(self) -> list[Path]:
        """Render and write all files into the project directory.

        Returns:
            Paths of the written files, in write order.

        Raises:
            GenerationError: If any file cannot be written.
        """
        rendered = self.render()
        written: list[Path] = []
        for filename, content in rendered.items():
            path = self.project.directory / filename
            try:
                path.write_text(content, encoding="utf-8")
            except OSError as exc:
                raise GenerationError(f"Cannot write {path}: {exc}") from exc
            logger.debug("Wrote %s", path)
            written.append(path)
        return written
