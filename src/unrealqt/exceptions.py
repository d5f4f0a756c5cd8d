"""unrealqt exception hierarchy.

All public exceptions inherit from UnrealQtError, giving callers a single
base class to catch. Every error is terminal for the command that raised
it; the CLI turns each one into a labelled message and the ``exit_code``
carried by the exception class, so an operator can tell from the exit
status alone which step failed.
"""

from __future__ import annotations


class UnrealQtError(Exception):
    """Base exception for all unrealqt errors."""

    exit_code: int = 1
    step: str = "unrealqt"


class WizardError(UnrealQtError):
    """Base class for failures of the configuration discovery wizard."""

    step = "configuration wizard"


class ScratchProjectError(WizardError):
    """Raised when the scratch ``temp.pro`` file cannot be created."""

    exit_code = 18
    step = "create scratch project"


class IdeLaunchError(WizardError):
    """Raised when Qt Creator cannot be started at all.

    A launch that starts and exits (with any exit code) is not an error
    here; whether it did its job is judged by the settings file.
    """

    exit_code = 17
    step = "launch Qt Creator"


class MissingExpectedFileError(WizardError):
    """Raised when Qt Creator exited without writing ``temp.pro.user``.

    Covers both a user who closed the IDE without selecting a kit and an
    IDE that crashed; the two cannot be told apart.
    """

    exit_code = 10
    step = "locate settings file"


class FileReadFailureError(WizardError):
    """Raised when the generated settings file cannot be read."""

    exit_code = 11
    step = "read settings file"


# Field names used by the two extraction errors.
ENVIRONMENT_ID = "environment_id"
CONFIGURATION_ID = "toolchain_configuration_id"


class PatternNotFoundError(WizardError):
    """Raised when an identifier tag is absent from the settings file."""

    step = "extract identifier"
    _codes = {ENVIRONMENT_ID: 12, CONFIGURATION_ID: 14}

    def __init__(self, field: str) -> None:
        self.field = field
        self.exit_code = self._codes.get(field, 12)
        super().__init__(f"No {field} found in the Qt Creator settings file")


class InvalidIdentifierShapeError(WizardError):
    """Raised when a captured identifier is not in canonical shape.

    Guards against format drift in the undocumented settings file: the
    pattern may still match while capturing something that is not an id.
    """

    step = "validate identifier"
    _codes = {ENVIRONMENT_ID: 13, CONFIGURATION_ID: 15}

    def __init__(self, field: str, value: str) -> None:
        self.field = field
        self.value = value
        self.exit_code = self._codes.get(field, 13)
        super().__init__(f"Captured {field} {value!r} is not a valid Qt id")


class ConfigWriteError(WizardError):
    """Raised when the discovered configuration cannot be persisted."""

    exit_code = 16
    step = "write configuration"


class ConfigError(UnrealQtError):
    """Raised when the stored configuration is unreadable or invalid.

    A stored config with a missing or malformed id is never defaulted;
    the wizard has to be run again.
    """

    exit_code = 20
    step = "load configuration"


class ProjectError(UnrealQtError):
    """Raised for an invalid Unreal project directory or vcxproj file."""

    exit_code = 21
    step = "read Unreal project"


class GenerationError(UnrealQtError):
    """Raised when the Qt Creator project files cannot be written."""

    exit_code = 22
    step = "write Qt project"
