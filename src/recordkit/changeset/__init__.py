"""Change sets: mergeable, reusable collections of field mutations."""

from recordkit.changeset.changeset import ChangeSet, FieldRef

__all__ = [
    "ChangeSet",
    "FieldRef",
]
