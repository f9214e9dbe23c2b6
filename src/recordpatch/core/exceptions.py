"""Exceptions raised by the change-tracking engine and its update adapters."""


class RecordPatchError(Exception):
    """Base class for all RecordPatch errors."""
    pass


class MissingRecordError(RecordPatchError):
    """Raised when a change tracker is opened without a record."""
    pass


class UnclonableValueError(RecordPatchError, ValueError):
    """Raised when an attribute value cannot be classified and cloned."""

    def __init__(self, value_type: type, attribute_name: str | None = None):
        self.value_type = value_type
        self.attribute_name = attribute_name
        type_name = getattr(value_type, "__qualname__", repr(value_type))
        if attribute_name is not None:
            message = f"Cannot clone value of type {type_name} in attribute '{attribute_name}'"
        else:
            message = f"Cannot clone value of type {type_name}"
        super().__init__(message)


class TrackerClosedError(RecordPatchError):
    """Raised when a change tracker is used after it was closed."""
    pass


class UpdateServiceError(RecordPatchError):
    """Raised when an update service rejects or fails an update."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)
