"""Change sets: pending field mutations keyed by field name.

Usage:
    changes = (
        ChangeSet(Counter)
        .assign("count", 1)
        .assign("count", 2)            # replaces the first assignment
        .transform(fields(Counter).label, lambda c: c.label.upper())
    )
    updated = changes.to_new_record(counter)

A change set only holds mutators; applying it never modifies it, so one change
set can be applied to any number of records.
"""

from __future__ import annotations

import warnings
from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Any, Self

from recordkit.config import get_settings
from recordkit.core.field import FieldDescriptor, FieldResolver, get_resolver
from recordkit.core.mutator import FieldMutator
from recordkit.errors import ChangeOverwriteWarning, NullArgumentError, TypeMismatchError

if TYPE_CHECKING:
    from recordkit.core.types import Copy

FieldRef = FieldDescriptor | str
"""A field identifier: a resolved descriptor or a field name looked up on the record type."""


class ChangeSet[T]:
    """Ordered mapping of field name to FieldMutator for record type T.

    Registering a second mutator for a field replaces the first, whatever the
    kind of either (last write wins). Not safe for concurrent building; safe to
    apply concurrently once built.
    """

    __slots__ = ("_record_type", "_mutators", "_resolver")

    def __init__(self, record_type: type[T], resolver: FieldResolver | None = None) -> None:
        """Initialize an empty change set for ``record_type``.

        Args:
            record_type: Record class the mutations target.
            resolver: Field resolver for name lookups (default: global resolver).
        """
        self._record_type = record_type
        self._mutators: dict[str, FieldMutator[T]] = {}
        self._resolver = resolver or get_resolver()

    @property
    def record_type(self) -> type[T]:
        return self._record_type

    @property
    def mutators(self) -> tuple[FieldMutator[T], ...]:
        """Read-only snapshot of the registered mutators, one per field."""
        return tuple(self._mutators.values())

    def __len__(self) -> int:
        return len(self._mutators)

    def __iter__(self) -> Iterator[FieldMutator[T]]:
        return iter(self.mutators)

    def __contains__(self, field_name: object) -> bool:
        return field_name in self._mutators

    def __repr__(self) -> str:
        return f"ChangeSet({self._record_type.__qualname__}, fields={list(self._mutators)})"

    def is_empty(self) -> bool:
        """Check if this change set contains no mutators."""
        return not self._mutators

    def mutate(self, mutator: FieldMutator[T]) -> Self:
        """Add a mutator, replacing any earlier one for the same field.

        Args:
            mutator: Mutator targeting a field of this change set's record type.

        Returns:
            This change set, for chaining.

        Raises:
            NullArgumentError: If mutator is None.
            TypeMismatchError: If the mutator targets an unrelated record type.
        """
        if mutator is None:
            raise NullArgumentError("mutator")
        owner = mutator.descriptor.record_type
        if not issubclass(self._record_type, owner):
            raise TypeMismatchError(
                f"Mutator for {owner.__qualname__}.{mutator.property_name} cannot be added "
                f"to a change set for {self._record_type.__qualname__}"
            )

        name = mutator.property_name
        if name in self._mutators and get_settings().warn_on_overwrite:
            warnings.warn(
                f"ChangeSet for {self._record_type.__qualname__} already mutates {name!r}. "
                f"Only the last mutation will be kept.",
                ChangeOverwriteWarning,
                stacklevel=2,
            )
        self._mutators[name] = mutator
        return self

    def assign(self, field: FieldRef, value: Any) -> Self:
        """Set a field to a constant value.

        Raises:
            FieldNotFoundError: If a field name does not exist on the record type.
            FieldNotWritableError: If the field cannot be written.
            TypeMismatchError: If value's type cannot be stored in the field.
        """
        if isinstance(field, str):
            mutator = FieldMutator.assign_by_name(self._record_type, field, value, self._resolver)
        else:
            mutator = FieldMutator.from_assignment(field, value)
        return self.mutate(mutator)

    def transform(self, field: FieldRef, fn: Callable[[T], Any], value_type: Any = None) -> Self:
        """Set a field to ``fn(original)``, evaluated each time the change set is applied.

        Args:
            field: Descriptor or field name.
            fn: Computes the new value from the original record.
            value_type: Result type of fn when it carries no return annotation.

        Raises:
            FieldNotFoundError: If a field name does not exist on the record type.
            FieldNotWritableError: If the field cannot be written.
            TypeMismatchError: If the result type cannot be stored in the field.
        """
        if isinstance(field, str):
            mutator = FieldMutator.transform_by_name(
                self._record_type, field, fn, value_type, self._resolver
            )
        else:
            mutator = FieldMutator.from_transform(field, fn, value_type)
        return self.mutate(mutator)

    def to_new_record(self, original: T) -> Copy[T]:
        """Apply this change set to ``original``. See ``apply_changes``."""
        # Late import to avoid circular dependency
        from recordkit.orchestration import apply_changes

        return apply_changes(original, self)
