"""Mutator functionality: mutation kinds and per-field mutators."""

from recordkit.core.mutator.core import FieldMutator
from recordkit.core.mutator.models import Assignment, Mutation, Transform

__all__ = [
    "Assignment",
    "Transform",
    "Mutation",
    "FieldMutator",
]
