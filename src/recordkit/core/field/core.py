"""Field resolution: locate a named field, its type and its write path.

Usage:
    @dataclass(frozen=True)
    class Counter:
        count: int
        label: str

    descriptor = resolve(Counter, "count")
    descriptor.externally_writable   # False, frozen dataclass
    descriptor.alternate_storage     # BackingSlotAccessor("count")

    fields(Counter).label            # same as resolve(Counter, "label")

Read-only properties are supported when their value lives in a backing slot
named ``_<field>``:

    class Account(RecordBase):
        __slots__ = ("_balance",)

        @property
        def balance(self) -> int:
            return self._balance
"""

from __future__ import annotations

import inspect
import threading
from collections.abc import Iterator
from typing import Any

from recordkit.config import get_settings
from recordkit.core.field.models import (
    BackingSlotAccessor,
    FieldDescriptor,
    PydanticFieldAccessor,
    StorageAccessor,
)
from recordkit.core.field.operations import (
    declared_field_names,
    is_assignable,
    is_frozen,
    is_pydantic,
    return_type,
    slot_names,
    type_hints,
)
from recordkit.errors import FieldNotFoundError, FieldNotWritableError, TypeMismatchError

_MISSING = object()


def backing_slot_name(field_name: str) -> str:
    """Storage slot behind a read-only property, by naming convention."""
    return f"_{field_name}"


def _has_backing_slot(record_type: type, slot: str) -> bool:
    return slot in slot_names(record_type) or slot in type_hints(record_type)


def _describe_property(record_type: type, field_name: str, prop: property) -> FieldDescriptor:
    declared_type = return_type(prop.fget)
    if prop.fset is not None:
        return FieldDescriptor(record_type, field_name, declared_type, externally_writable=True)

    slot = backing_slot_name(field_name)
    if not _has_backing_slot(record_type, slot):
        raise FieldNotWritableError(record_type, field_name)
    return FieldDescriptor(
        record_type,
        field_name,
        declared_type,
        externally_writable=False,
        alternate_storage=BackingSlotAccessor(slot),
    )


def _describe(record_type: type, field_name: str) -> FieldDescriptor:
    """Resolve a field without consulting any cache.

    Raises:
        FieldNotFoundError: If the record type declares no such field.
        FieldNotWritableError: If the field has neither a writer nor a backing slot.
    """
    if not isinstance(record_type, type):
        raise TypeError(f"Expected a record class, got {record_type!r}")
    attr = inspect.getattr_static(record_type, field_name, _MISSING)
    if isinstance(attr, property):
        return _describe_property(record_type, field_name, attr)

    if field_name not in declared_field_names(record_type):
        raise FieldNotFoundError(record_type, field_name)

    if is_pydantic(record_type):
        declared_type = record_type.model_fields[field_name].annotation  # type: ignore[attr-defined]
    else:
        declared_type = type_hints(record_type).get(field_name, Any)

    if not is_frozen(record_type):
        return FieldDescriptor(record_type, field_name, declared_type, externally_writable=True)
    # Frozen types guard __setattr__; the field's own storage is still writable underneath
    accessor: StorageAccessor = (
        PydanticFieldAccessor(field_name)
        if is_pydantic(record_type)
        else BackingSlotAccessor(field_name)
    )
    return FieldDescriptor(
        record_type,
        field_name,
        declared_type,
        externally_writable=False,
        alternate_storage=accessor,
    )


class FieldResolver:
    """Process-local table of resolved field descriptors.

    Descriptors are cached per (record type, field name). The first resolution
    of a key wins; concurrent resolutions of the same key agree on one instance.
    """

    def __init__(self) -> None:
        """Initialize empty resolver table."""
        self._descriptors: dict[tuple[type, str], FieldDescriptor] = {}
        self._lock = threading.Lock()

    def resolve(self, record_type: type, field_name: str) -> FieldDescriptor:
        """Resolve a field of a record type.

        Args:
            record_type: Record class to inspect.
            field_name: Name of the field.

        Returns:
            The field's descriptor.

        Raises:
            FieldNotFoundError: If the record type declares no such field.
            FieldNotWritableError: If the field has neither a writer nor a backing slot.
        """
        key = (record_type, field_name)
        cached = self._descriptors.get(key)
        if cached is not None:
            return cached

        descriptor = _describe(record_type, field_name)
        if get_settings().cache_descriptors:
            with self._lock:
                descriptor = self._descriptors.setdefault(key, descriptor)
        return descriptor

    def resolve_for_value(self, record_type: type, field_name: str, value_type: Any) -> FieldDescriptor:
        """Resolve a field and check that values of ``value_type`` fit into it.

        Args:
            record_type: Record class to inspect.
            field_name: Name of the field.
            value_type: Type of the value (or transform result) to be stored.

        Returns:
            The field's descriptor.

        Raises:
            FieldNotFoundError: If the record type declares no such field.
            FieldNotWritableError: If the field has neither a writer nor a backing slot.
            TypeMismatchError: If value_type cannot be stored in the field.
        """
        descriptor = self.resolve(record_type, field_name)
        check_assignable(descriptor, value_type)
        return descriptor

    def field_names(self, record_type: type) -> tuple[str, ...]:
        """Names of all mutable fields of a record type.

        Includes data fields and properties that have a setter or a backing slot.
        Derived properties with neither are left out.
        """
        names = list(declared_field_names(record_type))
        for base in reversed(record_type.__mro__):
            if base.__module__.startswith(("builtins", "pydantic")):
                continue
            for name, attr in vars(base).items():
                if not isinstance(attr, property) or name in names:
                    continue
                if attr.fset is not None or _has_backing_slot(record_type, backing_slot_name(name)):
                    names.append(name)
        return tuple(names)

    def prime(self, record_type: type) -> tuple[FieldDescriptor, ...]:
        """Resolve every mutable field of a record type up front.

        Returns:
            Descriptors for all names reported by ``field_names``.
        """
        return tuple(self.resolve(record_type, name) for name in self.field_names(record_type))

    def is_cached(self, record_type: type, field_name: str) -> bool:
        """Check if a descriptor for this field is already in the table."""
        return (record_type, field_name) in self._descriptors

    def clear(self) -> None:
        """Drop all cached descriptors."""
        with self._lock:
            self._descriptors.clear()


# Module-level resolver instance
_resolver = FieldResolver()


def get_resolver() -> FieldResolver:
    """Access the global field resolver.

    Returns:
        The process-local FieldResolver instance.
    """
    return _resolver


def resolve(record_type: type, field_name: str) -> FieldDescriptor:
    """Resolve a field using the global resolver."""
    return _resolver.resolve(record_type, field_name)


def resolve_for_value(record_type: type, field_name: str, value_type: Any) -> FieldDescriptor:
    """Resolve a field using the global resolver and type-check ``value_type``."""
    return _resolver.resolve_for_value(record_type, field_name, value_type)


def check_assignable(descriptor: FieldDescriptor, value_type: Any) -> None:
    """Raise if values of ``value_type`` cannot be stored in the described field.

    Raises:
        TypeMismatchError: If the types are incompatible.
    """
    if not is_assignable(descriptor.declared_type, value_type):
        raise TypeMismatchError(
            f"Cannot store {_type_name(value_type)} in "
            f"{descriptor.record_type.__qualname__}.{descriptor.name} "
            f"of type {_type_name(descriptor.declared_type)}"
        )


def _type_name(tp: Any) -> str:
    return tp.__qualname__ if isinstance(tp, type) else repr(tp)


class FieldSet:
    """Attribute-style access to the descriptors of one record type.

    Usage:
        f = fields(Counter)
        changes.assign(f.count, 3)
    """

    __slots__ = ("_record_type", "_resolver")

    def __init__(self, record_type: type, resolver: FieldResolver | None = None) -> None:
        self._record_type = record_type
        self._resolver = resolver or _resolver

    def __getattr__(self, name: str) -> FieldDescriptor:
        if name.startswith("__"):
            raise AttributeError(name)
        return self._resolver.resolve(self._record_type, name)

    def __getitem__(self, name: str) -> FieldDescriptor:
        return self._resolver.resolve(self._record_type, name)

    def __iter__(self) -> Iterator[FieldDescriptor]:
        return iter(self._resolver.prime(self._record_type))

    def __repr__(self) -> str:
        return f"FieldSet({self._record_type.__qualname__})"


def fields(record_type: type, resolver: FieldResolver | None = None) -> FieldSet:
    """Descriptor accessor for a record type; ``fields(T).x`` resolves field ``x``."""
    return FieldSet(record_type, resolver)
