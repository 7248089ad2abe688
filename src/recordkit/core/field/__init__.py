"""Field functionality: descriptors, storage accessors, and resolution."""

from recordkit.core.field.core import (
    FieldResolver,
    FieldSet,
    backing_slot_name,
    check_assignable,
    fields,
    get_resolver,
    resolve,
    resolve_for_value,
)
from recordkit.core.field.models import (
    BackingSlotAccessor,
    FieldDescriptor,
    PydanticFieldAccessor,
    StorageAccessor,
)
from recordkit.core.field.operations import is_assignable

__all__ = [
    # Models
    "FieldDescriptor",
    "StorageAccessor",
    "BackingSlotAccessor",
    "PydanticFieldAccessor",
    # Core
    "FieldResolver",
    "FieldSet",
    "fields",
    "get_resolver",
    "resolve",
    "resolve_for_value",
    "check_assignable",
    "backing_slot_name",
    "is_assignable",
]
