"""Identifier extraction from Qt Creator ``.pro.user`` settings files.

The settings file format is undocumented and changes between Qt Creator
releases, so extraction is deliberately two-phase:

1. A regex locates the tag and captures the brace-enclosed token after it.
   The capture accepts anything up to the closing brace.
2. The captured token must then pass ``is_valid_qt_id``. A token that
   matched but is not a canonical id means the format drifted, and is an
   error rather than a value to store.

Relevant fragments of a settings file::

    <variable>EnvironmentId</variable>
    <value type="QByteArray">{01234567-89ab-cdef-0123-456789abcdef}</value>

    <value type="QString" key="ProjectExplorer.ProjectConfiguration.Id">{fedcba98-...}</value>
"""

from __future__ import annotations

import re

from unrealqt.config.models import WizardConfig, is_valid_qt_id
from unrealqt.exceptions import (
    CONFIGURATION_ID,
    ENVIRONMENT_ID,
    InvalidIdentifierShapeError,
    PatternNotFoundError,
)

# Brace-enclosed token; shape is checked separately.
_TOKEN = r"(?P<id>\{[^}<\s]*\})"

ENVIRONMENT_ID_PATTERN = re.compile(
    r"<variable>EnvironmentId</variable>\s*\n\s*"
    r'<value type="QByteArray">' + _TOKEN
)

CONFIGURATION_ID_PATTERN = re.compile(
    r'key="ProjectExplorer\.ProjectConfiguration\.Id">' + _TOKEN
)


def _extract(pattern: re.Pattern[str], text: str, field: str) -> str:
    match = pattern.search(text)
    if match is None:
        raise PatternNotFoundError(field)
    value = match.group("id")
    if not is_valid_qt_id(value):
        raise InvalidIdentifierShapeError(field, value)
    return value


def extract_environment_id(text: str) -> str:
    """Return the EnvironmentId from settings-file text.

    Raises:
        PatternNotFoundError: The EnvironmentId tag is absent.
        InvalidIdentifierShapeError: The captured token is not a Qt id.
    """
    return _extract(ENVIRONMENT_ID_PATTERN, text, ENVIRONMENT_ID)


def extract_configuration_id(text: str) -> str:
    """Return the kit's ProjectConfiguration id from settings-file text.

    Raises:
        PatternNotFoundError: No ``ProjectExplorer.ProjectConfiguration.Id``
            key with a brace-enclosed value is present.
        InvalidIdentifierShapeError: The captured token is not a Qt id.
    """
    return _extract(CONFIGURATION_ID_PATTERN, text, CONFIGURATION_ID)


def extract_config(text: str) -> WizardConfig:
    """Extract both ids into a ``WizardConfig``.

    The environment id is extracted first, so its error is the one
    reported when both fields are broken.
    """
    environment_id = extract_environment_id(text)
    configuration_id = extract_configuration_id(text)
    return WizardConfig(
        environment_id=environment_id,
        toolchain_configuration_id=configuration_id,
    )
