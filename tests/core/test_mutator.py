"""Tests for field mutators."""

import warnings
from dataclasses import dataclass

import pytest

from recordkit import (
    Assignment,
    BackingSlotAccessor,
    FieldDescriptor,
    FieldMutator,
    FieldNotFoundError,
    FieldNotWritableError,
    NullArgumentError,
    ReadOnlyFieldWriteWarning,
    Transform,
    TypeMismatchError,
    fields,
)


@dataclass
class Box:
    size: int = 1
    label: str = "box"


def test_assignment_ignores_original():
    mutator = FieldMutator.from_assignment(fields(Box).size, 7)
    original, copy = Box(size=1), Box(size=1)

    mutator.apply(original, copy)

    assert copy.size == 7
    assert original.size == 1
    assert isinstance(mutator.mutation, Assignment)
    assert not mutator.is_transform


def test_transform_reads_original_and_writes_copy():
    mutator = FieldMutator.from_transform(fields(Box).size, lambda b: b.size * 10)
    original, copy = Box(size=3), Box(size=0)

    mutator.apply(original, copy)

    assert copy.size == 30
    assert original.size == 3
    assert isinstance(mutator.mutation, Transform)


def test_property_name_is_descriptor_name():
    mutator = FieldMutator.from_assignment(fields(Box).label, "crate")

    assert mutator.property_name == "label"


def test_write_through_backing_slot(counter_cls):
    mutator = FieldMutator.from_assignment(fields(counter_cls).count, 5)
    original = counter_cls()
    copy = original.shallow_copy()

    mutator.apply(original, copy)

    assert copy.count == 5
    assert original.count == 0


def test_write_through_readonly_property_slot(account_cls):
    mutator = FieldMutator.transform_by_name(account_cls, "balance", lambda a: a.balance - 50)
    original = account_cls(balance=20, owner="ana")
    copy = original.shallow_copy()

    mutator.apply(original, copy)

    assert copy.balance == -30
    assert copy.is_overdrawn
    assert original.balance == 20


def test_null_descriptor_rejected():
    with pytest.raises(NullArgumentError, match="descriptor"):
        FieldMutator(None, Assignment(1))  # type: ignore[arg-type]


def test_null_mutation_rejected():
    with pytest.raises(NullArgumentError, match="mutation"):
        FieldMutator(fields(Box).size, None)  # type: ignore[arg-type]


def test_null_transform_function_rejected():
    with pytest.raises(NullArgumentError, match="fn"):
        FieldMutator.from_transform(fields(Box).size, None)  # type: ignore[arg-type]


def test_transform_without_function_rejected_before_apply():
    with pytest.raises(NullArgumentError, match="fn"):
        FieldMutator(fields(Box).size, Transform(None))  # type: ignore[arg-type]


def test_descriptor_without_write_path_rejected():
    descriptor = FieldDescriptor(Box, "size", int, externally_writable=False)

    with pytest.raises(FieldNotWritableError):
        FieldMutator(descriptor, Assignment(1))


def test_descriptor_with_two_write_paths_rejected():
    descriptor = FieldDescriptor(Box, "size", int, True, BackingSlotAccessor("size"))

    with pytest.raises(FieldNotWritableError):
        FieldMutator(descriptor, Assignment(1))


def test_mutator_is_immutable():
    mutator = FieldMutator.from_assignment(fields(Box).size, 2)

    with pytest.raises(AttributeError):
        mutator.mutation = Assignment(3)  # type: ignore[misc]


def test_assign_by_name_type_checks_value():
    with pytest.raises(TypeMismatchError, match="Box.size"):
        FieldMutator.assign_by_name(Box, "size", "large")


def test_assign_by_name_unknown_field():
    with pytest.raises(FieldNotFoundError):
        FieldMutator.assign_by_name(Box, "weight", 1)


def test_transform_by_name_uses_return_annotation():
    def describe(box: Box) -> str:
        return f"{box.size}"

    with pytest.raises(TypeMismatchError):
        FieldMutator.transform_by_name(Box, "size", describe)


def test_transform_by_name_uses_explicit_value_type():
    with pytest.raises(TypeMismatchError):
        FieldMutator.transform_by_name(Box, "label", lambda b: b.size, value_type=int)


def test_unannotated_transform_is_not_type_checked():
    mutator = FieldMutator.transform_by_name(Box, "label", lambda b: b.label.upper())

    assert mutator.property_name == "label"


def test_identifier_path_type_checks_constants():
    with pytest.raises(TypeMismatchError):
        FieldMutator.from_assignment(fields(Box).label, 3)


def test_readonly_write_warning_when_enabled(counter_cls, configure_settings):
    configure_settings(warn_on_readonly_write=True)
    mutator = FieldMutator.from_assignment(fields(counter_cls).label, "y")
    original = counter_cls()

    with pytest.warns(ReadOnlyFieldWriteWarning, match="label"):
        mutator.apply(original, original.shallow_copy())


def test_no_readonly_write_warning_by_default(counter_cls, configure_settings):
    configure_settings()
    mutator = FieldMutator.from_assignment(fields(counter_cls).label, "y")
    original = counter_cls()

    with warnings.catch_warnings():
        warnings.simplefilter("error")
        mutator.apply(original, original.shallow_copy())
