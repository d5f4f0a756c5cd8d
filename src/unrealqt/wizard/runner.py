"""The configuration discovery wizard.

Qt Creator does not expose its environment id or the id of a kit
anywhere documented. The wizard obtains both by letting Qt Creator do the
work: it opens an empty ``temp.pro``, the user selects their Unreal
Engine kit and hits "Configure Project", and Qt Creator writes
``temp.pro.user`` next to it. The ids are then scraped from that file.

Flow::

    clear stale temp.pro.user -> create temp.pro -> launch IDE, block
        -> temp.pro.user exists? -> read it -> delete scratch files
        -> extract ids -> save

Every failure is terminal and raised as a ``WizardError`` subclass. The
scratch files are removed on both success and failure; a failed removal
is only logged. A settings file left behind by an earlier run is removed
before launching; if it cannot be removed the run fails.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from unrealqt.config.models import WizardConfig
from unrealqt.config.store import ConfigStore
from unrealqt.exceptions import (
    FileReadFailureError,
    MissingExpectedFileError,
    ScratchProjectError,
)
from unrealqt.wizard.extract import extract_config
from unrealqt.wizard.launcher import launch_and_wait

logger = logging.getLogger(__name__)

SCRATCH_PROJECT_NAME = "temp.pro"
SETTINGS_SUFFIX = ".user"

# Opens the given file in the IDE and blocks until it exits.
Launcher = Callable[[Path], object]


class ConfigWizard:
    """Discovers the Qt Creator ids and persists them.

    Args:
        program_dir: Directory for the scratch project and the settings
            file Qt Creator writes next to it.
        store: Where the resulting config is saved.
        launcher: Callable that opens a file in Qt Creator and blocks
            until the IDE exits. Defaults to ``launch_and_wait``.

    Usage::

        wizard = ConfigWizard(Path("/tmp/unrealqt"), ConfigStore())
        config = wizard.run()
    """

    def __init__(
        self,
        program_dir: Path,
        store: ConfigStore,
        launcher: Launcher | None = None,
    ) -> None:
        self.program_dir = program_dir
        self.store = store
        self.launcher = launcher if launcher is not None else launch_and_wait

    @property
    def scratch_project(self) -> Path:
        return self.program_dir / SCRATCH_PROJECT_NAME

    @property
    def settings_file(self) -> Path:
        return self.program_dir / (SCRATCH_PROJECT_NAME + SETTINGS_SUFFIX)

    def run(self) -> WizardConfig:
        """Run the wizard end to end.

        Blocks for as long as the IDE stays open; there is no timeout.

        Returns:
            The discovered and saved ``WizardConfig``.

        Raises:
            WizardError: A subclass naming the step that failed.
        """
        self._create_scratch_project()
        try:
            self.launcher(self.scratch_project)
            logger.debug("Qt Creator closed")
            text = self._read_settings()
        finally:
            self._cleanup()

        config = extract_config(text)
        self.store.save(config)
        logger.info("Saved Qt Creator ids to %s", self.store.config_path)
        return config

    def _create_scratch_project(self) -> None:
        stale = self.settings_file
        if stale.exists():
            try:
                stale.unlink()
            except OSError as exc:
                raise ScratchProjectError(
                    f"Cannot remove stale settings file {stale}: {exc}"
                ) from exc
            logger.debug("Removed stale settings file %s", stale)
        try:
            self.program_dir.mkdir(parents=True, exist_ok=True)
            self.scratch_project.write_text("", encoding="utf-8")
        except OSError as exc:
            raise ScratchProjectError(
                f"Cannot create {self.scratch_project}: {exc}"
            ) from exc

    def _read_settings(self) -> str:
        path = self.settings_file
        if not path.is_file():
            raise MissingExpectedFileError(
                f"{path} was not created. Select a kit and press "
                "'Configure Project' before closing Qt Creator."
            )
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise FileReadFailureError(f"Cannot read {path}: {exc}") from exc

    def _cleanup(self) -> None:
        for path in (self.settings_file, self.scratch_project):
            try:
                path.unlink(missing_ok=True)
            except OSError:
                logger.warning("Could not delete temporary file %s", path)
