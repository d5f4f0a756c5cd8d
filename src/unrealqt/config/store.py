"""Per-user storage for the wizard configuration and disclaimer state.

Layout of the application-data directory::

    config.yaml   environment_id / toolchain_configuration_id
    vars.conf     first-run disclaimer marker ("DisclaimerAccepted")

The directory is ``%APPDATA%\\UnrealQtGenerator`` on Windows and
``$XDG_CONFIG_HOME/unrealqt`` (``~/.config/unrealqt``) elsewhere. The
``UNREALQT_CONFIG_DIR`` environment variable overrides both.
"""

from __future__ import annotations

import logging
import os
import sys
import tempfile
from pathlib import Path

import yaml

from unrealqt import _APP_DIR_NAME
from unrealqt.config.models import WizardConfig
from unrealqt.exceptions import (
    CONFIGURATION_ID,
    ENVIRONMENT_ID,
    ConfigError,
    ConfigWriteError,
)

logger = logging.getLogger(__name__)

CONFIG_DIR_ENV = "UNREALQT_CONFIG_DIR"
CONFIG_FILENAME = "config.yaml"
DISCLAIMER_FILENAME = "vars.conf"
DISCLAIMER_MARKER = "DisclaimerAccepted"


def default_config_dir() -> Path:
    """Resolve the per-user application-data directory."""
    override = os.environ.get(CONFIG_DIR_ENV)
    if override:
        return Path(override)
    if sys.platform == "win32" and os.environ.get("APPDATA"):
        return Path(os.environ["APPDATA"]) / _APP_DIR_NAME
    base = os.environ.get("XDG_CONFIG_HOME") or (Path.home() / ".config")
    return Path(base) / "unrealqt"


class ConfigStore:
    """Reads and writes ``WizardConfig`` values in a config directory.

    Usage::

        store = ConfigStore()
        config = store.load()
        if config is None:
            ...  # run the wizard
    """

    def __init__(self, directory: Path | None = None) -> None:
        self.directory = directory if directory is not None else default_config_dir()

    @property
    def config_path(self) -> Path:
        return self.directory / CONFIG_FILENAME

    @property
    def disclaimer_path(self) -> Path:
        return self.directory / DISCLAIMER_FILENAME

    # -- Wizard config ------------------------------------------------------

    def exists(self) -> bool:
        return self.config_path.is_file()

    def load(self) -> WizardConfig | None:
        """Load the stored config.

        Returns:
            The stored ``WizardConfig``, or None if nothing is stored yet.

        Raises:
            ConfigError: If the file is unreadable, malformed, or either id
                is missing or not in canonical shape.
        """
        path = self.config_path
        if not self.exists():
            return None
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError) as exc:
            raise ConfigError(f"Cannot read {path}: {exc}") from exc
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc

        if not isinstance(data, dict):
            raise ConfigError(f"{path} does not contain a mapping")
        missing = [k for k in (ENVIRONMENT_ID, CONFIGURATION_ID) if k not in data]
        if missing:
            raise ConfigError(f"{path} is missing {', '.join(missing)}")

        config = WizardConfig(
            environment_id=data[ENVIRONMENT_ID],
            toolchain_configuration_id=data[CONFIGURATION_ID],
        )
        bad = config.invalid_fields()
        if bad:
            raise ConfigError(f"{path} has invalid {', '.join(bad)}; run 'unrealqt configure'")
        return config

    def save(self, config: WizardConfig) -> Path:
        """Persist *config*, replacing any stored one.

        The file is written to a temporary file in the same directory and
        then renamed over ``config.yaml``, so a failed write leaves the
        previous config intact.

        Raises:
            ConfigWriteError: If the directory or file cannot be written.
        """
        content = yaml.safe_dump(config.as_dict(), default_flow_style=False, sort_keys=True)
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            fd, tmp = tempfile.mkstemp(suffix=".yaml", prefix="config_", dir=self.directory)
            try:
                with open(fd, "w", encoding="utf-8") as f:
                    f.write(content)
                os.replace(tmp, self.config_path)
            except OSError:
                Path(tmp).unlink(missing_ok=True)
                raise
        except OSError as exc:
            raise ConfigWriteError(f"Cannot write {self.config_path}: {exc}") from exc
        logger.debug("Wrote configuration to %s", self.config_path)
        return self.config_path

    def clear(self) -> bool:
        """Remove the stored config. Returns True if a file was removed."""
        try:
            self.config_path.unlink()
        except FileNotFoundError:
            return False
        return True

    # -- First-run disclaimer -----------------------------------------------

    def disclaimer_accepted(self) -> bool:
        return self.disclaimer_path.is_file()

    def accept_disclaimer(self) -> None:
        """Record disclaimer acceptance. Failure is logged, not raised."""
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            self.disclaimer_path.write_text(DISCLAIMER_MARKER, encoding="utf-8")
        except OSError:
            logger.warning("Disclaimer acceptance could not be stored in %s", self.directory)
