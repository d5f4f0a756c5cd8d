"""Read the parts of an Unreal-generated vcxproj that Qt Creator needs.

Unreal's project files are NMake makefile projects: compilation goes
through ``Build.bat``, and the IntelliSense data lives in the
``NMakePreprocessorDefinitions`` and ``NMakeIncludeSearchPath``
properties. Source and header lists come from the ``ClCompile`` and
``ClInclude`` items.

Paths in the vcxproj are relative to ``Intermediate/ProjectFiles``; they
are re-based onto the project directory so the ``.pro`` file, which sits
next to the ``.uproject``, can use them directly.
"""

from __future__ import annotations

import posixpath
import re
import xml.etree.ElementTree as ET
from pathlib import Path

from unrealqt.exceptions import ProjectError
from unrealqt.project.models import VcxprojModel

NS = {"ns": "http://schemas.microsoft.com/developer/msbuild/2003"}

# Location of the vcxproj relative to the project directory.
VCXPROJ_BASE = "Intermediate/ProjectFiles"

_ABSOLUTE_RE = re.compile(r"^(?:[A-Za-z]:/|/)")
_BUILD_BAT_RE = re.compile(r'"?([^"]*?)[\\/]Build[\\/]BatchFiles[\\/]Build\.bat', re.IGNORECASE)


def _split_list(value: str | None) -> list[str]:
    """Split an MSBuild ``;`` list, dropping empties and ``$(...)`` macros."""
    if not value:
        return []
    items = []
    for item in value.split(";"):
        item = item.strip()
        if item and not item.startswith("$("):
            items.append(item)
    return items


def _dedupe(items: list[str]) -> list[str]:
    return list(dict.fromkeys(items))


def rebase_path(raw: str, base: str = VCXPROJ_BASE) -> str:
    """Convert a vcxproj path to a forward-slash project-relative path.

    Absolute paths are returned with forward slashes but otherwise as-is.
    """
    path = raw.strip().replace("\\", "/")
    if _ABSOLUTE_RE.match(path):
        return path
    return posixpath.normpath(posixpath.join(base, path))


def engine_dir_from_command(command: str | None) -> str | None:
    """Extract the engine directory from an NMake build command line."""
    if not command:
        return None
    match = _BUILD_BAT_RE.search(command)
    if match is None:
        return None
    return match.group(1).replace("\\", "/")


def _first_property(root: ET.Element, name: str) -> str | None:
    for prop_group in root.findall(".//ns:PropertyGroup", NS):
        element = prop_group.find(f"ns:{name}", NS)
        if element is not None and element.text:
            return element.text
    return None


def _item_paths(root: ET.Element, item: str) -> list[str]:
    paths = []
    for element in root.findall(f".//ns:{item}", NS):
        include = element.get("Include")
        if include:
            paths.append(rebase_path(include))
    return _dedupe(paths)


def read_vcxproj(path: Path) -> VcxprojModel:
    """Parse an Unreal-generated vcxproj.

    Raises:
        ProjectError: If the file cannot be read or is not valid XML.
    """
    try:
        root = ET.parse(path).getroot()
    except ET.ParseError as exc:
        raise ProjectError(f"Malformed vcxproj {path}: {exc}") from exc
    except OSError as exc:
        raise ProjectError(f"Cannot read {path}: {exc}") from exc

    defines = _split_list(_first_property(root, "NMakePreprocessorDefinitions"))
    includes = [
        rebase_path(p)
        for p in _split_list(_first_property(root, "NMakeIncludeSearchPath"))
    ]
    return VcxprojModel(
        sources=_item_paths(root, "ClCompile"),
        headers=_item_paths(root, "ClInclude"),
        defines=_dedupe(defines),
        include_paths=_dedupe(includes),
        engine_dir=engine_dir_from_command(_first_property(root, "NMakeBuildCommandLine")),
    )
