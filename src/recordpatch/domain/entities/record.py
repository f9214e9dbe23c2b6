"""Record entity tracked by the change tracker.

A record is a mutable mapping of attribute names to attribute values,
plus an identity (logical name and id) that never changes.
"""

from collections.abc import Iterator, Mapping, MutableMapping
from dataclasses import dataclass
from typing import Any
from uuid import UUID


@dataclass(frozen=True)
class RecordIdentity:
    """Identity of a record.

    Attributes:
        logical_name: Type tag of the record (e.g. "contact").
        id: Unique identifier, or None for a record not yet persisted.
    """

    logical_name: str
    id: UUID | None = None


class Record(MutableMapping[str, Any]):
    """A mutable key-value record with an immutable identity.

    Example:
        contact = Record("contact", uuid.uuid4(), {"lastname": "Baggins"})
        contact["firstname"] = "Frodo"
    """

    def __init__(
        self,
        logical_name: str,
        id: UUID | None = None,
        attributes: Mapping[str, Any] | None = None,
    ) -> None:
        if not logical_name:
            raise ValueError("Logical name is required")
        self._identity = RecordIdentity(logical_name=logical_name, id=id)
        self._attributes: dict[str, Any] = dict(attributes or {})

    @property
    def logical_name(self) -> str:
        return self._identity.logical_name

    @property
    def id(self) -> UUID | None:
        return self._identity.id

    @property
    def identity(self) -> RecordIdentity:
        return self._identity

    def get_attribute_value(self, name: str, default: Any = None) -> Any:
        """Return the value of an attribute, or ``default`` if it is not set."""
        return self._attributes.get(name, default)

    def __getitem__(self, name: str) -> Any:
        return self._attributes[name]

    def __setitem__(self, name: str, value: Any) -> None:
        self._attributes[name] = value

    def __delitem__(self, name: str) -> None:
        del self._attributes[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._attributes)

    def __len__(self) -> int:
        return len(self._attributes)

    def __repr__(self) -> str:
        return (
            f"Record(logical_name={self.logical_name!r}, id={self.id!r}, "
            f"attributes={self._attributes!r})"
        )
