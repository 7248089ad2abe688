"""Applying change sets to records.

Per call: empty change set → original returned as is. Otherwise the original is
shallow-copied, every mutator writes into the copy, the original's validator
inspects the copy, and the copy is returned. A validation error propagates and
the copy is dropped; the original is never written to.

Usage:
    updated = with_changes(counter, lambda c: c.assign("count", 2))

    changes = start_change_set(counter).transform("count", lambda c: c.count + 1)
    a = apply_changes(counter, changes)
    b = copy_and_apply(a, changes)
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from recordkit.changeset import ChangeSet
from recordkit.core.record import Record
from recordkit.core.types import Copy
from recordkit.errors import TypeMismatchError


def apply_changes[T: Record](original: T, changeset: ChangeSet[T]) -> Copy[T]:
    """Produce a modified copy of ``original``.

    Args:
        original: Record to copy. Never modified.
        changeset: Mutations to apply. Never modified.

    Returns:
        ``original`` itself if the change set is empty, else a validated copy.

    Raises:
        TypeMismatchError: If original is not an instance of the change set's record type.
        Exception: Whatever ``original.validate`` raises for the candidate copy.
    """
    mutators = changeset.mutators
    if not mutators:
        return original

    if not isinstance(original, changeset.record_type):
        raise TypeMismatchError(
            f"ChangeSet for {changeset.record_type.__qualname__} cannot be applied to "
            f"{type(original).__qualname__}"
        )

    copy = original.shallow_copy()
    for mutator in mutators:
        mutator.apply(original, copy)
    original.validate(copy)
    return copy


def copy_and_apply[T: Record](original: T, changeset: ChangeSet[T]) -> Copy[T]:
    """Same as ``apply_changes``, argument order reading record-first."""
    return apply_changes(original, changeset)


def start_change_set[T: Record](original: T) -> ChangeSet[T]:
    """Start an empty change set for the type of ``original``."""
    return ChangeSet(type(original))


def with_changes[T: Record](original: T, build: Callable[[ChangeSet[T]], Any]) -> Copy[T]:
    """Build a change set with ``build`` and apply it to ``original``.

    Args:
        original: Record to copy.
        build: Populates the change set; its return value is ignored.

    Returns:
        See ``apply_changes``.
    """
    changeset = start_change_set(original)
    build(changeset)
    return apply_changes(original, changeset)
