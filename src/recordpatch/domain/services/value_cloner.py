"""Classification, cloning and comparison of attribute values.

Every attribute value belongs to exactly one category:

- PRIMITIVE: immutable values compared with ``==`` and cloned by reference.
- BOXED: a registered wrapper around a single primitive payload.
- COMPOSITE: a registered wrapper around several primitive fields.
- UNRECOGNIZED: anything else. Such values cannot be cloned.

Wrappers are compared and cloned by their payload, never by identity, so an
in-place change to a wrapper's payload is seen as a change and a clone never
shares state with the original.
"""

import math
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from enum import Enum
from typing import Any
from uuid import UUID

from recordpatch.core.exceptions import UnclonableValueError
from recordpatch.domain.entities.attribute_values import (
    EntityReference,
    Money,
    OptionSetValue,
)


class ValueCategory(str, Enum):
    """Categories of attribute values."""

    PRIMITIVE = "primitive"
    BOXED = "boxed"
    COMPOSITE = "composite"
    UNRECOGNIZED = "unrecognized"


PRIMITIVE_TYPES: tuple[type, ...] = (
    type(None),
    bool,
    int,
    float,
    str,
    bytes,
    Decimal,
    datetime,
    date,
    time,
    timedelta,
    UUID,
    Enum,
)


@dataclass(frozen=True)
class WrapperType:
    """Registration of a reference-typed wrapper.

    Attributes:
        category: BOXED or COMPOSITE.
        fields: Names of the payload fields, passed back as keyword
            arguments when cloning.
    """

    category: ValueCategory
    fields: tuple[str, ...]


_WRAPPER_TYPES: dict[type, WrapperType] = {
    Money: WrapperType(ValueCategory.BOXED, ("value",)),
    OptionSetValue: WrapperType(ValueCategory.BOXED, ("value",)),
    EntityReference: WrapperType(ValueCategory.COMPOSITE, ("logical_name", "id", "name")),
}


def register_boxed_type(cls: type, payload_field: str = "value") -> None:
    """Register a wrapper type holding a single primitive payload.

    Args:
        cls: The wrapper class. It must accept ``payload_field`` as a
            keyword argument.
        payload_field: Name of the attribute holding the payload.
    """
    _WRAPPER_TYPES[cls] = WrapperType(ValueCategory.BOXED, (payload_field,))


def register_composite_type(cls: type, fields: tuple[str, ...] | list[str]) -> None:
    """Register a wrapper type holding several primitive fields.

    Args:
        cls: The wrapper class. It must accept every field as a keyword
            argument.
        fields: Names of the attributes making up the compound identity.
    """
    if not fields:
        raise ValueError("Composite types need at least one field")
    _WRAPPER_TYPES[cls] = WrapperType(ValueCategory.COMPOSITE, tuple(fields))


def _is_nan(value: Any) -> bool:
    if isinstance(value, float):
        return math.isnan(value)
    if isinstance(value, Decimal):
        return value.is_nan()
    return False


def _lookup_wrapper(value: Any) -> WrapperType | None:
    for klass in type(value).__mro__:
        wrapper = _WRAPPER_TYPES.get(klass)
        if wrapper is not None:
            return wrapper
    return None


class ValueCloner:
    """Classifies, clones and compares attribute values."""

    @classmethod
    def classify(cls, value: Any) -> ValueCategory:
        """Return the category of ``value``."""
        wrapper = _lookup_wrapper(value)
        if wrapper is not None:
            return wrapper.category
        if isinstance(value, PRIMITIVE_TYPES):
            return ValueCategory.PRIMITIVE
        return ValueCategory.UNRECOGNIZED

    @classmethod
    def payload_of(cls, value: Any) -> dict[str, Any]:
        """Return the payload fields of a wrapper value.

        Raises:
            UnclonableValueError: If ``value`` is not a registered wrapper.
        """
        wrapper = _lookup_wrapper(value)
        if wrapper is None:
            raise UnclonableValueError(type(value))
        return {name: getattr(value, name) for name in wrapper.fields}

    @classmethod
    def clone(cls, value: Any, attribute_name: str | None = None) -> Any:
        """Return an independent copy of ``value``.

        Primitives are immutable and returned as-is. Wrappers are rebuilt
        from their payload fields.

        Args:
            value: The value to clone.
            attribute_name: Attribute the value belongs to, for error messages.

        Raises:
            UnclonableValueError: If the value, or one of a wrapper's payload
                fields, is not recognized.
        """
        category = cls.classify(value)
        if category is ValueCategory.PRIMITIVE:
            return value
        if category is ValueCategory.UNRECOGNIZED:
            raise UnclonableValueError(type(value), attribute_name)

        payload = cls.payload_of(value)
        for field_value in payload.values():
            if cls.classify(field_value) is not ValueCategory.PRIMITIVE:
                raise UnclonableValueError(type(field_value), attribute_name)
        return type(value)(**payload)

    @classmethod
    def equals(cls, a: Any, b: Any) -> bool:
        """Return whether two values are equal by value.

        Values of different categories, or wrappers of different types, are
        never equal. Unrecognized values are never equal to anything.
        """
        category = cls.classify(a)
        if category is not cls.classify(b):
            return False
        if category is ValueCategory.PRIMITIVE:
            return cls._primitive_equals(a, b)
        if category is ValueCategory.UNRECOGNIZED:
            return False
        if type(a) is not type(b):
            return False

        payload_a = cls.payload_of(a)
        payload_b = cls.payload_of(b)
        return all(
            cls._primitive_equals(payload_a[name], payload_b[name])
            for name in payload_a
        )

    @staticmethod
    def _primitive_equals(a: Any, b: Any) -> bool:
        # True == 1 in Python, but a flag flipped to a number is a change
        if isinstance(a, bool) or isinstance(b, bool):
            return type(a) is type(b) and a == b
        # NaN never equals itself and a signaling NaN raises on ==
        a_nan = _is_nan(a)
        b_nan = _is_nan(b)
        if a_nan or b_nan:
            return a_nan and b_nan
        return a == b
