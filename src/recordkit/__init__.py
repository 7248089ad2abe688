"""recordkit: modified copies of immutable records.

Usage:
    from dataclasses import dataclass
    from recordkit import ChangeSet, record, with_changes

    @record
    @dataclass(frozen=True)
    class Counter:
        count: int
        label: str

    counter = Counter(0, "x")
    bumped = with_changes(counter, lambda c: c.transform("count", lambda r: r.count + 1))

    reusable = ChangeSet(Counter).assign("label", "y")
    relabelled = reusable.to_new_record(bumped)
"""

__version__ = "0.1.0"

# Changes
from recordkit.changeset import ChangeSet, FieldRef

# Core primitives
from recordkit.core import (
    Assignment,
    BackingSlotAccessor,
    PydanticFieldAccessor,
    Copy,
    FieldDescriptor,
    FieldMutator,
    FieldResolver,
    Record,
    RecordBase,
    StorageAccessor,
    Transform,
    fields,
    get_resolver,
    record,
    resolve,
    resolve_for_value,
)

# Errors
from recordkit.errors import (
    ChangeOverwriteWarning,
    ConstraintViolationError,
    FieldNotFoundError,
    FieldNotWritableError,
    NullArgumentError,
    ReadOnlyFieldWriteWarning,
    RecordKitError,
    TypeMismatchError,
)

# Orchestration
from recordkit.orchestration import (
    apply_changes,
    copy_and_apply,
    start_change_set,
    with_changes,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "Copy",
    "Record",
    "RecordBase",
    "record",
    "FieldDescriptor",
    "StorageAccessor",
    "BackingSlotAccessor",
    "PydanticFieldAccessor",
    "FieldResolver",
    "fields",
    "get_resolver",
    "resolve",
    "resolve_for_value",
    "Assignment",
    "Transform",
    "FieldMutator",
    # Changes
    "ChangeSet",
    "FieldRef",
    # Orchestration
    "apply_changes",
    "copy_and_apply",
    "start_change_set",
    "with_changes",
    # Errors
    "RecordKitError",
    "FieldNotFoundError",
    "FieldNotWritableError",
    "TypeMismatchError",
    "NullArgumentError",
    "ConstraintViolationError",
    "ReadOnlyFieldWriteWarning",
    "ChangeOverwriteWarning",
]
