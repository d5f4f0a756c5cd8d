"""Configuration discovery wizard: drive Qt Creator, scrape its ids.

Public API::

    from unrealqt.wizard import ConfigWizard

    config = ConfigWizard(program_dir, store).run()
"""

from __future__ import annotations

from unrealqt.wizard.extract import (
    extract_config,
    extract_configuration_id,
    extract_environment_id,
)
from unrealqt.wizard.launcher import build_command, launch_and_wait
from unrealqt.wizard.runner import ConfigWizard

__all__ = [
    "ConfigWizard",
    "build_command",
    "extract_config",
    "extract_configuration_id",
    "extract_environment_id",
    "launch_and_wait",
]
