"""RecordPatch - change tracking for partial record updates.

Captures a baseline of a record's attributes and computes the minimal set of
changed fields to send as a PATCH-style update.
"""

__version__ = "0.1.0"

from recordpatch.domain.entities import (
    ChangeSet,
    EntityReference,
    Money,
    OptionSetValue,
    Record,
    RecordIdentity,
    UpdateRequest,
)
from recordpatch.domain.services import ChangeTracker, ValueCategory, ValueCloner

__all__ = [
    "ChangeSet",
    "ChangeTracker",
    "EntityReference",
    "Money",
    "OptionSetValue",
    "Record",
    "RecordIdentity",
    "UpdateRequest",
    "ValueCategory",
    "ValueCloner",
    "__version__",
]
