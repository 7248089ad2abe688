"""Pure functions for type introspection and assignability checks.

These back the fail-fast type check performed when a mutation is registered by
field name: "can a value of this type be stored in that field".
"""

from __future__ import annotations

import types
import typing
from collections.abc import Callable
from dataclasses import fields as dataclass_fields
from dataclasses import is_dataclass
from typing import Any, ClassVar, Final, ForwardRef, Literal, NewType, TypeAliasType, TypeVar, Union

NoneType = type(None)

# Implicit promotions accepted by type checkers (PEP 484 numeric tower)
_NUMERIC_PROMOTIONS: dict[type, tuple[type, ...]] = {
    float: (int,),
    complex: (int, float),
}

_UNION_ORIGINS = (Union, types.UnionType)


def is_pydantic(cls: type) -> bool:
    """Check if class is a Pydantic model without importing pydantic.

    Args:
        cls: Class to check.

    Returns:
        True if class inherits from pydantic.BaseModel, False otherwise.
    """
    for base in getattr(cls, "__mro__", ()):
        if base.__module__.startswith("pydantic") and base.__name__ == "BaseModel":
            return True
    return False


def type_hints(cls: type) -> dict[str, Any]:
    """Resolve annotations of a class and its bases.

    Falls back to raw (possibly string) annotations when a forward reference
    cannot be resolved, e.g. for classes defined inside a function.
    """
    try:
        return typing.get_type_hints(cls, include_extras=True)
    except NameError:
        hints: dict[str, Any] = {}
        for base in reversed(cls.__mro__):
            hints.update(getattr(base, "__annotations__", {}))
        return hints


def return_type(fn: Callable[..., Any] | None) -> Any:
    """Declared return type of a callable, or Any when it is not annotated."""
    if fn is None:
        return Any
    try:
        hints = typing.get_type_hints(fn)
    except (NameError, TypeError):
        hints = getattr(fn, "__annotations__", {})
    return hints.get("return", Any)


def is_class_var(hint: Any) -> bool:
    """Check whether an annotation declares a class variable."""
    if hint is ClassVar or typing.get_origin(hint) is ClassVar:
        return True
    return isinstance(hint, str) and hint.startswith(("ClassVar", "typing.ClassVar"))


def declared_field_names(cls: type) -> tuple[str, ...]:
    """Names of the data fields a record type declares, in declaration order.

    Properties are not included; see ``FieldResolver.field_names``.
    """
    if is_dataclass(cls):
        return tuple(f.name for f in dataclass_fields(cls))
    if is_pydantic(cls):
        return tuple(cls.model_fields)  # type: ignore[attr-defined]
    return tuple(name for name, hint in type_hints(cls).items() if not is_class_var(hint))


def is_frozen(cls: type) -> bool:
    """Check whether instances reject attribute assignment after construction."""
    if is_dataclass(cls):
        return bool(cls.__dataclass_params__.frozen)  # type: ignore[attr-defined]
    if is_pydantic(cls):
        return bool(cls.model_config.get("frozen", False))  # type: ignore[attr-defined]
    return False


def slot_names(cls: type) -> frozenset[str]:
    """All ``__slots__`` entries declared anywhere in the MRO."""
    names: set[str] = set()
    for base in cls.__mro__:
        slots = base.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        names.update(slots)
    return frozenset(names)


def _unwrap(tp: Any) -> Any:
    """Strip qualifiers and aliases that do not change what a field can hold."""
    while True:
        origin = typing.get_origin(tp)
        if origin is typing.Annotated:
            tp = typing.get_args(tp)[0]
        elif origin in (ClassVar, Final):
            args = typing.get_args(tp)
            tp = args[0] if args else Any
        elif tp is ClassVar or tp is Final:
            return Any
        elif isinstance(tp, NewType):
            tp = tp.__supertype__
        elif isinstance(tp, TypeAliasType):
            tp = tp.__value__
        elif isinstance(tp, TypeVar):
            if tp.__bound__ is not None:
                tp = tp.__bound__
            elif tp.__constraints__:
                tp = Union[tp.__constraints__]  # noqa: UP007
            else:
                return Any
        elif tp is None:
            return NoneType
        else:
            return tp


def is_assignable(declared: Any, value_type: Any) -> bool:
    """Check whether a value of ``value_type`` can be stored in a ``declared`` field.

    Args:
        declared: Field annotation (may be a generic alias, union, Literal, ...).
        value_type: Type of the supplied value, or Any when unknown.

    Returns:
        False only when the types are provably incompatible.
    """
    declared = _unwrap(declared)
    value_type = _unwrap(value_type)

    if declared is Any or declared is object or value_type is Any:
        return True
    # Unresolved forward references cannot be checked
    if isinstance(declared, (str, ForwardRef)) or isinstance(value_type, (str, ForwardRef)):
        return True

    if typing.get_origin(value_type) in _UNION_ORIGINS:
        return all(is_assignable(declared, arm) for arm in typing.get_args(value_type))
    origin = typing.get_origin(declared)
    if origin in _UNION_ORIGINS:
        return any(is_assignable(arm, value_type) for arm in typing.get_args(declared))
    if origin is Literal:
        return any(
            isinstance(value_type, type) and issubclass(value_type, type(arg))
            for arg in typing.get_args(declared)
        )
    if origin is not None:
        declared = origin
    value_origin = typing.get_origin(value_type)
    if value_origin is not None:
        value_type = value_origin

    if not isinstance(declared, type) or not isinstance(value_type, type):
        return True
    try:
        if issubclass(value_type, declared):
            return True
    except TypeError:
        # Non-runtime protocols and similar cannot be checked with issubclass
        return True
    return any(issubclass(value_type, promoted) for promoted in _NUMERIC_PROMOTIONS.get(declared, ()))
