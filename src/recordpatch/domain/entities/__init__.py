"""Domain entities for RecordPatch.

Entities are plain Python classes that represent records, their attribute
values and the change sets derived from them. They have no dependencies on
infrastructure or external frameworks.
"""

from recordpatch.domain.entities.attribute_values import (
    EntityReference,
    Money,
    OptionSetValue,
)
from recordpatch.domain.entities.change_set import ChangeSet, UpdateRequest
from recordpatch.domain.entities.record import Record, RecordIdentity

__all__ = [
    "ChangeSet",
    "EntityReference",
    "Money",
    "OptionSetValue",
    "Record",
    "RecordIdentity",
    "UpdateRequest",
]
