"""SQL update service implementation.

Applies partial updates to a table named after the record's logical name,
using SQLAlchemy Core since tracked tables are not mapped to ORM models.
"""

from datetime import date, datetime, time, timedelta
from decimal import Decimal
from enum import Enum
from typing import Any
from uuid import UUID

from sqlalchemy import Engine, column, table, update

from recordpatch.core.exceptions import UpdateServiceError
from recordpatch.core.logging import get_logger
from recordpatch.domain.entities.attribute_values import EntityReference
from recordpatch.domain.entities.change_set import UpdateRequest
from recordpatch.domain.services.value_cloner import ValueCategory, ValueCloner
from recordpatch.infrastructure.services.update.update_service import UpdateService

logger = get_logger(__name__)


class SqlUpdateService(UpdateService):
    """Update service issuing one UPDATE statement per request."""

    def __init__(self, engine: Engine, id_column: str = "id") -> None:
        """Initialize the SQL update service.

        Args:
            engine: SQLAlchemy engine.
            id_column: Name of the primary key column in every table.
        """
        self.engine = engine
        self.id_column = id_column

    def update(self, request: UpdateRequest) -> None:
        """Apply a partial update.

        Args:
            request: The update request.

        Raises:
            UpdateServiceError: If the request has no record id, a value has
                no column representation, or no row matched.
        """
        if request.id is None:
            raise UpdateServiceError(
                f"Cannot update {request.logical_name}: record has no id"
            )

        values = {
            name: self._to_column_value(name, value)
            for name, value in request.attributes.items()
        }
        target = table(
            request.logical_name,
            column(self.id_column),
            *(column(name) for name in values if name != self.id_column),
        )
        stmt = (
            update(target)
            .where(target.c[self.id_column] == str(request.id))
            .values(**values)
        )

        logger.debug(
            "Updating record",
            table_name=request.logical_name,
            record_id=str(request.id),
            columns=sorted(values),
        )

        with self.engine.begin() as conn:
            matched = conn.execute(stmt).rowcount

        if matched == 0:
            logger.error(
                "No row matched update",
                table_name=request.logical_name,
                record_id=str(request.id),
            )
            raise UpdateServiceError(
                f"Record {request.id} not found in {request.logical_name}"
            )

        logger.info(
            "Record updated successfully",
            table_name=request.logical_name,
            record_id=str(request.id),
        )

    @classmethod
    def _to_column_value(cls, name: str, value: Any) -> Any:
        """Flatten an attribute value to something a column can hold."""
        if isinstance(value, EntityReference):
            return str(value.id)

        category = ValueCloner.classify(value)
        if category is ValueCategory.BOXED:
            (payload,) = ValueCloner.payload_of(value).values()
            return cls._to_column_value(name, payload)
        if category is not ValueCategory.PRIMITIVE:
            raise UpdateServiceError(
                f"Attribute '{name}' of type {type(value).__name__} has no column representation"
            )

        if isinstance(value, Enum):
            return cls._to_column_value(name, value.value)
        if isinstance(value, bool):
            return 1 if value else 0
        if isinstance(value, timedelta):
            return value.total_seconds()
        if isinstance(value, (UUID, Decimal)):
            return str(value)
        if isinstance(value, (datetime, date, time)):
            return value.isoformat()
        return value
