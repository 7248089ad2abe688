"""Core functionalities: field resolution, mutators, and the record contract.

Architecture Note:
    core/ contains the building blocks with no orchestration logic. The only
    process-wide state is the field resolver's descriptor table.
    For change sets and applying them, see changeset/ and orchestration/.
"""

from recordkit.core.field import (
    BackingSlotAccessor,
    PydanticFieldAccessor,
    FieldDescriptor,
    FieldResolver,
    FieldSet,
    StorageAccessor,
    fields,
    get_resolver,
    is_assignable,
    resolve,
    resolve_for_value,
)
from recordkit.core.mutator import Assignment, FieldMutator, Mutation, Transform
from recordkit.core.record import Record, RecordBase, record
from recordkit.core.types import Copy

__all__ = [
    # Types
    "Copy",
    # Field
    "FieldDescriptor",
    "StorageAccessor",
    "BackingSlotAccessor",
    "PydanticFieldAccessor",
    "FieldResolver",
    "FieldSet",
    "fields",
    "get_resolver",
    "resolve",
    "resolve_for_value",
    "is_assignable",
    # Mutator
    "Assignment",
    "Transform",
    "Mutation",
    "FieldMutator",
    # Record
    "Record",
    "RecordBase",
    "record",
]
