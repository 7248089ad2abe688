"""Field mutators: one resolved field plus the computation of its new value.

Usage:
    bump = FieldMutator.transform_by_name(Counter, "count", lambda c: c.count + 1)
    reset = FieldMutator.from_assignment(fields(Counter).count, 0)

    bump.apply(original, copy)   # copy.count = original.count + 1
"""

from __future__ import annotations

import warnings
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from recordkit.config import get_settings
from recordkit.core.field import FieldDescriptor, FieldResolver, check_assignable, get_resolver
from recordkit.core.field.operations import return_type
from recordkit.core.mutator.models import Assignment, Mutation, Transform
from recordkit.errors import FieldNotWritableError, NullArgumentError, ReadOnlyFieldWriteWarning


@dataclass(frozen=True, slots=True)
class FieldMutator[T]:
    """Mutation of a single field of record type T.

    Raises:
        NullArgumentError: If descriptor or mutation is None.
        FieldNotWritableError: If the descriptor has no usable write path.
    """

    descriptor: FieldDescriptor
    mutation: Mutation

    def __post_init__(self) -> None:
        if self.descriptor is None:
            raise NullArgumentError("descriptor")
        if self.mutation is None:
            raise NullArgumentError("mutation")
        if not self.descriptor.has_consistent_access():
            raise FieldNotWritableError(self.descriptor.record_type, self.descriptor.name)

    @property
    def property_name(self) -> str:
        """Name of the target field, used as the change set key."""
        return self.descriptor.name

    @property
    def is_transform(self) -> bool:
        return isinstance(self.mutation, Transform)

    @classmethod
    def from_assignment(cls, descriptor: FieldDescriptor, value: Any) -> FieldMutator[T]:
        """Build a mutator that stores ``value``.

        Raises:
            TypeMismatchError: If value's type cannot be stored in the field.
        """
        if descriptor is not None:
            check_assignable(descriptor, type(value))
        return cls(descriptor, Assignment(value))

    @classmethod
    def from_transform(
        cls,
        descriptor: FieldDescriptor,
        fn: Callable[[T], Any],
        value_type: Any = None,
    ) -> FieldMutator[T]:
        """Build a mutator that stores ``fn(original)``.

        Args:
            descriptor: Target field.
            fn: Computes the new value from the original record.
            value_type: Result type of fn. Defaults to fn's return annotation;
                unannotated transforms are not type-checked.

        Raises:
            NullArgumentError: If fn is None.
            TypeMismatchError: If the result type cannot be stored in the field.
        """
        if fn is None:
            raise NullArgumentError("fn")
        if descriptor is not None:
            check_assignable(descriptor, value_type if value_type is not None else return_type(fn))
        return cls(descriptor, Transform(fn))

    @classmethod
    def assign_by_name(
        cls,
        record_type: type[T],
        field_name: str,
        value: Any,
        resolver: FieldResolver | None = None,
    ) -> FieldMutator[T]:
        """Look up a field by name and build an assignment mutator for it.

        Raises:
            FieldNotFoundError: If the record type declares no such field.
            FieldNotWritableError: If the field cannot be written.
            TypeMismatchError: If value's type cannot be stored in the field.
        """
        resolver = resolver or get_resolver()
        descriptor = resolver.resolve_for_value(record_type, field_name, type(value))
        return cls(descriptor, Assignment(value))

    @classmethod
    def transform_by_name(
        cls,
        record_type: type[T],
        field_name: str,
        fn: Callable[[T], Any],
        value_type: Any = None,
        resolver: FieldResolver | None = None,
    ) -> FieldMutator[T]:
        """Look up a field by name and build a transform mutator for it.

        Raises:
            FieldNotFoundError: If the record type declares no such field.
            FieldNotWritableError: If the field cannot be written.
            TypeMismatchError: If the transform's result type cannot be stored in the field.
            NullArgumentError: If fn is None.
        """
        if fn is None:
            raise NullArgumentError("fn")
        resolver = resolver or get_resolver()
        result_type = value_type if value_type is not None else return_type(fn)
        descriptor = resolver.resolve_for_value(record_type, field_name, result_type)
        return cls(descriptor, Transform(fn))

    def apply(self, original: T, copy: T) -> None:
        """Compute the new value from ``original`` and write it into ``copy``."""
        value = self.mutation.compute(original)
        descriptor = self.descriptor
        if descriptor.externally_writable:
            setattr(copy, descriptor.name, value)
            return

        if get_settings().warn_on_readonly_write:
            warnings.warn(
                f"Writing read-only field {descriptor.record_type.__qualname__}.{descriptor.name} "
                f"through its backing slot.",
                ReadOnlyFieldWriteWarning,
                stacklevel=3,
            )
        descriptor.alternate_storage.write(copy, value)  # type: ignore[union-attr]
