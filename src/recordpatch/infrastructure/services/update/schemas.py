"""Pydantic schemas for update payloads sent over the wire."""

from decimal import Decimal
from typing import Any, Literal
from uuid import UUID

from pydantic import BaseModel, Field

from recordpatch.domain.entities.attribute_values import (
    EntityReference,
    Money,
    OptionSetValue,
)
from recordpatch.domain.entities.change_set import UpdateRequest
from recordpatch.domain.services.value_cloner import ValueCategory, ValueCloner


class MoneyPayload(BaseModel):
    """Wire format of a Money value."""

    type: Literal["money"] = "money"
    value: Decimal = Field(..., description="Currency amount")


class OptionSetValuePayload(BaseModel):
    """Wire format of an OptionSetValue."""

    type: Literal["option_set"] = "option_set"
    value: int = Field(..., description="Numeric option code")


class EntityReferencePayload(BaseModel):
    """Wire format of an EntityReference."""

    type: Literal["entity_reference"] = "entity_reference"
    logical_name: str = Field(..., description="Type tag of the referenced record")
    id: UUID = Field(..., description="ID of the referenced record")
    name: str | None = Field(None, description="Display name of the referenced record")


def to_payload_value(value: Any) -> Any:
    """Convert an attribute value to its wire representation.

    Primitives are returned unchanged and serialized by pydantic. Built-in
    wrappers become their payload models; other registered wrappers become
    a dict tagged with their class name.
    """
    if isinstance(value, Money):
        return MoneyPayload(value=value.value)
    if isinstance(value, OptionSetValue):
        return OptionSetValuePayload(value=value.value)
    if isinstance(value, EntityReference):
        return EntityReferencePayload(
            logical_name=value.logical_name,
            id=value.id,
            name=value.name,
        )
    if ValueCloner.classify(value) is ValueCategory.PRIMITIVE:
        return value
    return {"type": type(value).__name__, **ValueCloner.payload_of(value)}


class UpdatePayload(BaseModel):
    """Body of a partial update request."""

    logical_name: str = Field(..., description="Type tag of the record")
    id: UUID = Field(..., description="ID of the record to update")
    attributes: dict[str, Any] = Field(
        ..., description="Changed attributes only; null clears a field"
    )

    @classmethod
    def from_request(cls, request: UpdateRequest) -> "UpdatePayload":
        """Create an UpdatePayload from an update request.

        Args:
            request: The update request. Its id must be set.

        Returns:
            UpdatePayload instance.
        """
        return cls(
            logical_name=request.logical_name,
            id=request.id,
            attributes={
                name: to_payload_value(value)
                for name, value in request.attributes.items()
            },
        )
