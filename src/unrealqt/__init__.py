"""unrealqt: Generate Qt Creator projects from Unreal Engine C++ projects."""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Directory name used under the per-user application-data folder.
_APP_DIR_NAME = "UnrealQtGenerator"
