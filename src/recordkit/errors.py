"""Exception taxonomy for record mutation.

Build-time errors (FieldNotFoundError, TypeMismatchError) are raised while a
change set is assembled, before any record is copied. FieldNotWritableError and
NullArgumentError are raised when a mutator is constructed. ConstraintViolationError
is the base class applications raise from their own validators.
"""

from __future__ import annotations


class RecordKitError(Exception):
    """Base class for all recordkit errors."""


class FieldNotFoundError(RecordKitError, AttributeError):
    """Raised when a field name does not exist on the record type."""

    def __init__(self, record_type: type, field_name: str) -> None:
        super().__init__(f"{record_type.__qualname__} has no field named {field_name!r}")
        self.record_type = record_type
        self.field_name = field_name


class FieldNotWritableError(RecordKitError, AttributeError):
    """Raised when a field has no setter and no recognized backing slot."""

    def __init__(self, record_type: type, field_name: str) -> None:
        super().__init__(
            f"The {field_name!r} field of {record_type.__qualname__} does not have a setter "
            f"and is not a recognized read-only field"
        )
        self.record_type = record_type
        self.field_name = field_name


class TypeMismatchError(RecordKitError, TypeError):
    """Raised when a value type cannot be stored in a field's declared type."""


class NullArgumentError(RecordKitError, ValueError):
    """Raised when a mutator is built without a descriptor or computation."""

    def __init__(self, argument: str) -> None:
        super().__init__(f"{argument} must not be None")
        self.argument = argument


class ConstraintViolationError(RecordKitError, ValueError):
    """Base class for errors raised by record validators.

    Validators may raise any exception; subclassing this one lets callers catch
    invariant failures separately from programming errors.
    """


class ReadOnlyFieldWriteWarning(UserWarning):
    """Emitted when a read-only field is written through its backing slot."""


class ChangeOverwriteWarning(UserWarning):
    """Emitted when a change set replaces an earlier mutation of the same field."""
