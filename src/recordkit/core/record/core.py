"""Record base class and decorator.

Usage:
    @record
    @dataclass(frozen=True, slots=True)
    class Reading:
        value: float
        recorded_at: datetime = datetime.min

        def validate(self, candidate: "Reading") -> None:
            if candidate.recorded_at > datetime.min:
                raise ConstraintViolationError("recorded_at is managed by the store")

    # Or as a mixin:
    class Account(RecordBase):
        __slots__ = ("_balance",)

        def __init__(self, balance: int) -> None:
            self._balance = balance

        @property
        def balance(self) -> int:
            return self._balance
"""

from __future__ import annotations

import copy as cp
from collections.abc import Callable
from dataclasses import is_dataclass
from typing import Any, Self, TypeVar, overload

from recordkit.core.field import get_resolver
from recordkit.core.field.operations import is_pydantic

T = TypeVar("T")


class RecordBase:
    """Mixin implementing the Record protocol with a shallow copy.

    Subclasses override ``validate`` to enforce cross-field invariants.
    """

    __slots__ = ()

    def shallow_copy(self) -> Self:
        """Field-wise duplicate sharing referenced sub-objects with self."""
        return cp.copy(self)

    def validate(self, candidate: Self) -> None:
        """Raise if candidate violates this type's invariants. Accepts everything by default."""
        return None


def _shallow_copy(self: Any) -> Any:
    return cp.copy(self)


def _user_defined(cls: type, name: str) -> bool:
    """Check if ``name`` is defined by the class hierarchy, ignoring object and pydantic bases."""
    for base in cls.__mro__:
        if name in base.__dict__:
            return base is not object and not base.__module__.startswith("pydantic")
    return False


def _make_validate(validator: Callable[[Any], None] | None) -> Callable[[Any, Any], None]:
    def validate(self: Any, candidate: Any) -> None:
        if validator is not None:
            validator(candidate)

    return validate


@overload
def record(cls: type[T]) -> type[T]: ...


@overload
def record(
    cls: None = None, *, validator: Callable[[Any], None] | None = None
) -> Callable[[type[T]], type[T]]: ...


def record(
    cls: type[T] | None = None, *, validator: Callable[[Any], None] | None = None
) -> type[T] | Callable[[type[T]], type[T]]:
    """Turn a dataclass or Pydantic model into a Record and build its field table.

    Supports three forms:
        @record                            # bare decorator
        @record()                          # parenthesized, no args
        @record(validator=check_reading)   # factory with args

    Missing ``shallow_copy`` and ``validate`` methods are added; an explicit
    validator callable receives the candidate copy.

    Args:
        cls: The class to register, or None if called with arguments.
        validator: Optional invariant check for candidate copies.

    Returns:
        Decorated class or decorator function.

    Raises:
        TypeError: If class is not a dataclass, Pydantic model or Record, or
            defines validate() while a validator is also given.

    Note:
        Apply @record AFTER @dataclass:

        >>> @record
        ... @dataclass(frozen=True)
        ... class Point:
        ...     x: int
    """

    def decorator(c: type[T]) -> type[T]:
        has_protocol = _user_defined(c, "shallow_copy") and _user_defined(c, "validate")
        if not (is_dataclass(c) or is_pydantic(c) or has_protocol):
            raise TypeError(
                f"Record {c.__name__} must be a dataclass, a Pydantic model, or implement "
                f"shallow_copy() and validate(). Did you forget @dataclass decorator?"
            )
        if validator is not None and _user_defined(c, "validate"):
            raise TypeError(f"Record {c.__name__} defines validate(); do not also pass validator=")

        if not _user_defined(c, "shallow_copy"):
            c.shallow_copy = _shallow_copy  # type: ignore[attr-defined]
        if not _user_defined(c, "validate"):
            c.validate = _make_validate(validator)  # type: ignore[attr-defined]

        get_resolver().prime(c)
        return c

    if cls is None:
        # Called with args: @record() or @record(validator=...)
        return decorator
    else:
        # Called bare: @record
        return decorator(cls)
