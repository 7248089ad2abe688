"""Mutation models: how a field's new value is computed.

An Assignment ignores the original record; a Transform derives the new value
from it. Both are immutable and may be shared between change sets.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from recordkit.errors import NullArgumentError


@dataclass(frozen=True, slots=True)
class Assignment:
    """Replace the field with a constant value."""

    value: Any

    def compute(self, original: Any) -> Any:
        return self.value


@dataclass(frozen=True, slots=True)
class Transform:
    """Replace the field with ``fn(original)``, evaluated at apply time.

    Raises:
        NullArgumentError: If fn is None.
    """

    fn: Callable[[Any], Any]

    def __post_init__(self) -> None:
        if self.fn is None:
            raise NullArgumentError("fn")

    def compute(self, original: Any) -> Any:
        return self.fn(original)


Mutation = Assignment | Transform
