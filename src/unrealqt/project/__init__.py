"""Unreal project discovery, vcxproj reading and Qt project generation."""

from __future__ import annotations

from unrealqt.project.discovery import find_project
from unrealqt.project.generator import QtProjectGenerator
from unrealqt.project.models import UnrealProject, VcxprojModel
from unrealqt.project.vcxproj import read_vcxproj

__all__ = [
    "QtProjectGenerator",
    "UnrealProject",
    "VcxprojModel",
    "find_project",
    "read_vcxproj",
]
