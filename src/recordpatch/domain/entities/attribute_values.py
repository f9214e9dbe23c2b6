"""Reference-typed attribute values.

Boxed values wrap a single primitive payload; composite references wrap
a compound identity. Both are mutable so callers can change their payload
in place, which is why the change tracker compares and clones them by
value.
"""

from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID


@dataclass
class Money:
    """A currency amount."""

    value: Decimal


@dataclass
class OptionSetValue:
    """The numeric code of an enumerated option."""

    value: int


@dataclass
class EntityReference:
    """A typed reference to another record.

    Attributes:
        logical_name: Type tag of the referenced record.
        id: Identifier of the referenced record.
        name: Optional display name of the referenced record.
    """

    logical_name: str
    id: UUID
    name: str | None = None
