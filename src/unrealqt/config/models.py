"""WizardConfig data model and the canonical Qt id shape.

Qt Creator identifies environments and kits with brace-enclosed GUIDs in
lowercase, e.g. ``{01234567-89ab-cdef-0123-456789abcdef}``. Both fields of
a ``WizardConfig`` must have exactly that shape.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from unrealqt.exceptions import CONFIGURATION_ID, ENVIRONMENT_ID

# ---------------------------------------------------------------------------
# Canonical id shape: {8-4-4-4-12} lowercase hex
# ---------------------------------------------------------------------------

QT_ID_BODY = (
    r"\{[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}\}"
)

_QT_ID_RE = re.compile(QT_ID_BODY)


def is_valid_qt_id(value: object) -> bool:
    """Return True if *value* is a string in canonical Qt id shape."""
    return isinstance(value, str) and _QT_ID_RE.fullmatch(value) is not None


@dataclass(frozen=True)
class WizardConfig:
    """The two ids discovered by the configuration wizard.

    Attributes:
        environment_id: Qt Creator's per-installation environment id.
        toolchain_configuration_id: Id of the user's Unreal Engine kit.
    """

    environment_id: str
    toolchain_configuration_id: str

    def invalid_fields(self) -> list[str]:
        """Return the names of fields that are not canonical Qt ids."""
        bad: list[str] = []
        if not is_valid_qt_id(self.environment_id):
            bad.append(ENVIRONMENT_ID)
        if not is_valid_qt_id(self.toolchain_configuration_id):
            bad.append(CONFIGURATION_ID)
        return bad

    def as_dict(self) -> dict[str, str]:
        return {
            ENVIRONMENT_ID: self.environment_id,
            CONFIGURATION_ID: self.toolchain_configuration_id,
        }
