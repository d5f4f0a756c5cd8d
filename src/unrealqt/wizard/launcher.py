"""Launch Qt Creator on a file and block until it exits.

The wizard needs the IDE to stay in the foreground until the user closes
it, so every launch path here waits for the child process. There is no
timeout and no cancellation: the user sets the pace.

Launch strategy:
    1. An explicit executable (``--qtcreator`` or ``UNREALQT_QTCREATOR``).
    2. The OS file association, in a blocking form where one exists:
       ``cmd /c start "" /wait`` on Windows, ``open -W`` on macOS.
    3. ``qtcreator`` on ``PATH`` (Linux, where ``xdg-open`` returns early).
"""

from __future__ import annotations

import logging
import os
import platform
import shutil
import subprocess
from pathlib import Path

from unrealqt.exceptions import IdeLaunchError

logger = logging.getLogger(__name__)

QTCREATOR_ENV = "UNREALQT_QTCREATOR"
QTCREATOR_EXECUTABLE = "qtcreator"


def _current_platform() -> str:
    system = platform.system().lower()
    if system == "darwin":
        return "macos"
    return "windows" if system == "windows" else "linux"


def build_command(path: Path, executable: str | None = None) -> list[str]:
    """Build the argv used to open *path* and wait for the IDE to exit.

    Raises:
        IdeLaunchError: If no way of opening the file is available.
    """
    exe = executable or os.environ.get(QTCREATOR_ENV)
    if exe:
        return [exe, str(path)]

    system = _current_platform()
    if system == "windows":
        return ["cmd", "/c", "start", "", "/wait", str(path)]
    if system == "macos":
        return ["open", "-W", str(path)]

    found = shutil.which(QTCREATOR_EXECUTABLE)
    if found is None:
        raise IdeLaunchError(
            f"'{QTCREATOR_EXECUTABLE}' not found on PATH; "
            f"pass --qtcreator or set {QTCREATOR_ENV}"
        )
    return [found, str(path)]


def launch_and_wait(path: Path, executable: str | None = None) -> int:
    """Open *path* in Qt Creator and block until the process exits.

    The exit code is returned but carries no meaning for the caller; only
    the files Qt Creator leaves behind matter.
    """
    command = build_command(path, executable)
    logger.debug("Launching %s", command)
    try:
        completed = subprocess.run(command, check=False)
    except OSError as exc:
        raise IdeLaunchError(f"Cannot start {command[0]}: {exc}") from exc
    logger.debug("Qt Creator exited with code %d", completed.returncode)
    return completed.returncode
