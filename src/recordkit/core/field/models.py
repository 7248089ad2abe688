"""Field models: resolved descriptors and storage accessors.

A FieldDescriptor captures everything needed to write one field of one record
type. Exactly one write path is present: either the field is externally writable
(plain ``setattr``) or it carries an alternate storage accessor.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class StorageAccessor(Protocol):
    """Writes a value into a record's underlying storage slot."""

    def write(self, target: Any, value: Any) -> None: ...


@dataclass(frozen=True, slots=True)
class BackingSlotAccessor:
    """Escape hatch for fields that expose no public writer.

    Writes with ``object.__setattr__``, which skips frozen ``__setattr__`` guards
    and property descriptors without a setter. This deliberately breaks the
    read-only contract of the field, and is only ever used on a fresh copy that
    has not been handed out yet. Records that must never be written this way
    should expose a setter or no backing slot at all.
    """

    slot_name: str

    def write(self, target: Any, value: Any) -> None:
        object.__setattr__(target, self.slot_name, value)


@dataclass(frozen=True, slots=True)
class PydanticFieldAccessor:
    """Escape hatch for fields of frozen Pydantic models.

    Writes the model's ``__dict__`` entry and marks the field as explicitly set,
    so ``model_fields_set`` and ``model_dump(exclude_unset=True)`` see the change.
    Like BackingSlotAccessor, the write skips model validation and coercion.
    """

    field_name: str

    def write(self, target: Any, value: Any) -> None:
        target.__dict__[self.field_name] = value
        target.__pydantic_fields_set__.add(self.field_name)


@dataclass(frozen=True, slots=True)
class FieldDescriptor:
    """Resolved field of a record type."""

    record_type: type
    name: str
    declared_type: Any
    externally_writable: bool
    alternate_storage: StorageAccessor | None = None

    def has_consistent_access(self) -> bool:
        """Check that exactly one write path is available.

        Returns:
            True if the field is writable or has an alternate accessor, but not both.
        """
        return self.externally_writable != (self.alternate_storage is not None)

    @property
    def uses_backing_slot(self) -> bool:
        """Whether writes go through the alternate storage accessor."""
        return not self.externally_writable and self.alternate_storage is not None
