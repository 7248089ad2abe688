"""Orchestration: copy, mutate, validate, return."""

from recordkit.orchestration.apply import (
    apply_changes,
    copy_and_apply,
    start_change_set,
    with_changes,
)

__all__ = [
    "apply_changes",
    "copy_and_apply",
    "start_change_set",
    "with_changes",
]
