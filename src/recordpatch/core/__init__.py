"""Core RecordPatch utilities.

This module exports configuration, logging and the error taxonomy.
"""

from recordpatch.core.config import Settings, get_settings
from recordpatch.core.exceptions import (
    MissingRecordError,
    RecordPatchError,
    TrackerClosedError,
    UnclonableValueError,
    UpdateServiceError,
)
from recordpatch.core.logging import LoggingContext, configure_logging, get_logger

__all__ = [
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    "LoggingContext",
    "MissingRecordError",
    "RecordPatchError",
    "TrackerClosedError",
    "UnclonableValueError",
    "UpdateServiceError",
]
