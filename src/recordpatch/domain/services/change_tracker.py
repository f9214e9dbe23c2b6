"""Change tracker computing partial updates for a record.

The tracker captures a baseline clone of a record's attributes when it is
opened. Later it compares the live record against that baseline and
returns only the attributes that changed, ready to be sent as a PATCH-style
update.
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Optional

from recordpatch.core.exceptions import MissingRecordError, TrackerClosedError
from recordpatch.core.logging import LoggingContext, get_logger
from recordpatch.domain.entities.change_set import ChangeSet, UpdateRequest
from recordpatch.domain.entities.record import Record
from recordpatch.domain.services.value_cloner import ValueCloner

if TYPE_CHECKING:
    from recordpatch.infrastructure.services.update.update_service import UpdateService

logger = get_logger(__name__)


class ChangeTracker:
    """Tracks changes made to a record since the tracker was opened.

    The baseline is captured once and never replaced, so every call to
    :meth:`diff` reports the cumulative change relative to the moment the
    tracker was opened.

    Example:
        with ChangeTracker(contact) as tracker:
            contact["firstname"] = "Frodo"
            tracker.submit(service)
    """

    def __init__(self, record: Optional[Record]) -> None:
        """Open a tracker over ``record``.

        Args:
            record: The live record. The tracker keeps a reference to it but
                never modifies it.

        Raises:
            MissingRecordError: If ``record`` is None.
            UnclonableValueError: If any attribute value cannot be cloned.
        """
        if record is None:
            raise MissingRecordError("Cannot track changes without a record")

        self._record = record
        self._identity = record.identity
        self._baseline: Mapping[str, Any] = MappingProxyType(
            {name: ValueCloner.clone(value, name) for name, value in record.items()}
        )
        self._closed = False

        logger.debug(
            "Change tracker opened",
            logical_name=self._identity.logical_name,
            record_id=str(self._identity.id),
            attribute_count=len(self._baseline),
        )

    @classmethod
    def open(cls, record: Optional[Record]) -> "ChangeTracker":
        """Open a tracker over ``record``. Same as calling the constructor."""
        return cls(record)

    @property
    def baseline(self) -> Mapping[str, Any]:
        """Read-only view of the attribute values captured at open time."""
        self._ensure_open()
        return self._baseline

    @property
    def closed(self) -> bool:
        return self._closed

    def diff(self) -> ChangeSet | None:
        """Compute the attributes that changed since the tracker was opened.

        New attributes and attributes whose value differs from the baseline
        are included with a clone of their current value. Attributes that
        were removed from the record are not reported.

        Returns:
            The change set, or None if nothing changed.

        Raises:
            UnclonableValueError: If a changed attribute now holds a value
                that cannot be cloned.
        """
        self._ensure_open()

        changes: dict[str, Any] = {}
        for name, value in self._record.items():
            current = ValueCloner.clone(value, name)
            if name not in self._baseline or not ValueCloner.equals(
                self._baseline[name], current
            ):
                changes[name] = current

        removed = [name for name in self._baseline if name not in self._record]
        if removed:
            logger.debug(
                "Removed attributes are not reported",
                logical_name=self._identity.logical_name,
                attributes=sorted(removed),
            )

        if not changes:
            return None

        logger.debug(
            "Computed change set",
            logical_name=self._identity.logical_name,
            record_id=str(self._identity.id),
            attributes=sorted(changes),
        )
        return ChangeSet(self._identity, changes)

    def build_update_request(self) -> UpdateRequest | None:
        """Wrap the current change set in an update request.

        Returns:
            The update request, or None if nothing changed.
        """
        change_set = self.diff()
        if change_set is None:
            return None
        return UpdateRequest(target=change_set)

    def submit(self, service: "UpdateService") -> bool:
        """Send the current change set to ``service``.

        No call is made when nothing changed. Errors raised by the service
        propagate unchanged.

        Args:
            service: The update service performing the remote update.

        Returns:
            True if an update was dispatched, False if there was nothing to send.
        """
        request = self.build_update_request()
        if request is None:
            logger.debug(
                "No changes to submit",
                logical_name=self._identity.logical_name,
                record_id=str(self._identity.id),
            )
            return False

        with LoggingContext(
            logical_name=request.logical_name,
            record_id=str(request.id),
        ):
            logger.info("Dispatching update", attributes=sorted(request.attributes))
            service.update(request)
        return True

    def close(self) -> None:
        """Release the tracker. Closing twice is a no-op."""
        if self._closed:
            return
        self._closed = True
        self._baseline = MappingProxyType({})
        logger.debug(
            "Change tracker closed",
            logical_name=self._identity.logical_name,
            record_id=str(self._identity.id),
        )

    def __enter__(self) -> "ChangeTracker":
        self._ensure_open()
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def _ensure_open(self) -> None:
        if self._closed:
            raise TrackerClosedError("Change tracker has been closed")
