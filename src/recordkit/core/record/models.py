"""Record protocol: the capability the orchestrator needs from an entity."""

from __future__ import annotations

from typing import Protocol, Self, runtime_checkable


@runtime_checkable
class Record(Protocol):
    """Entity that can duplicate itself and validate a candidate copy.

    ``shallow_copy`` must return a new instance holding the same field values.
    Returning the receiver itself breaks the contract; it is not checked.
    ``validate`` raises when the candidate violates the type's invariants and
    returns None otherwise.
    """

    def shallow_copy(self) -> Self: ...

    def validate(self, candidate: Self) -> None: ...
