"""Wizard configuration model and its per-user store."""

from __future__ import annotations

from unrealqt.config.models import WizardConfig, is_valid_qt_id
from unrealqt.config.store import ConfigStore, default_config_dir

__all__ = [
    "ConfigStore",
    "WizardConfig",
    "default_config_dir",
    "is_valid_qt_id",
]
