"""Domain services for RecordPatch.

Services contain the change-tracking logic. They have no dependencies on
infrastructure or external frameworks.
"""

from recordpatch.domain.services.change_tracker import ChangeTracker
from recordpatch.domain.services.value_cloner import (
    ValueCategory,
    ValueCloner,
    register_boxed_type,
    register_composite_type,
)

__all__ = [
    "ChangeTracker",
    "ValueCategory",
    "ValueCloner",
    "register_boxed_type",
    "register_composite_type",
]
