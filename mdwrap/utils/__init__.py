"""App constants and utilities."""

from .constants import (
    ADD_NEXT_OCCURRENCE_SHORTCUT,
    APP_NAME,
    APP_ORG,
    CLEAR_CURSORS_SHORTCUT,
    DEFAULT_FORMAT_LABELS,
    DEFAULT_FORMATS,
    DEFAULT_LOG_LEVEL,
    DEFAULT_SHORTCUTS,
)

__all__ = [
    "APP_ORG",
    "APP_NAME",
    "DEFAULT_FORMATS",
    "DEFAULT_FORMAT_LABELS",
    "DEFAULT_SHORTCUTS",
    "ADD_NEXT_OCCURRENCE_SHORTCUT",
    "CLEAR_CURSORS_SHORTCUT",
    "DEFAULT_LOG_LEVEL",
]
