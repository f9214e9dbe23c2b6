"""Change set and update request produced by the change tracker."""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any
from uuid import UUID

from recordpatch.domain.entities.record import RecordIdentity


class ChangeSet(Mapping[str, Any]):
    """Attributes that differ from a baseline, plus the record identity.

    A change set is read-only. The values it holds are owned by the change
    set and are not shared with the live record.
    """

    def __init__(self, identity: RecordIdentity, attributes: Mapping[str, Any]) -> None:
        self._identity = identity
        self._attributes = MappingProxyType(dict(attributes))

    @property
    def identity(self) -> RecordIdentity:
        return self._identity

    @property
    def logical_name(self) -> str:
        return self._identity.logical_name

    @property
    def id(self) -> UUID | None:
        return self._identity.id

    def get_attribute_value(self, name: str, default: Any = None) -> Any:
        """Return the changed value of an attribute, or ``default``."""
        return self._attributes.get(name, default)

    def __getitem__(self, name: str) -> Any:
        return self._attributes[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._attributes)

    def __len__(self) -> int:
        return len(self._attributes)

    def __repr__(self) -> str:
        return (
            f"ChangeSet(logical_name={self.logical_name!r}, id={self.id!r}, "
            f"attributes={dict(self._attributes)!r})"
        )


@dataclass(frozen=True)
class UpdateRequest:
    """A partial update of a single record.

    Attributes:
        target: The change set to apply to the remote record.
    """

    target: ChangeSet

    @property
    def logical_name(self) -> str:
        return self.target.logical_name

    @property
    def id(self) -> UUID | None:
        return self.target.id

    @property
    def attributes(self) -> Mapping[str, Any]:
        return self.target
