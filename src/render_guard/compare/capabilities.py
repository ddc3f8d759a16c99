"""Opt-in equality capabilities for value objects.

A value type takes part in the custom comparison tiers by implementing one or
both protocols below, either structurally or by subclassing them explicitly.
"""

from __future__ import annotations

from typing import Any, Final, Protocol, TypeAlias, TypeGuard, runtime_checkable


@runtime_checkable
class HasValueEquality(Protocol):
    """Coerces itself to a primitive that is compared with ``==``."""

    def value_of(self) -> Any: ...


@runtime_checkable
class HasStructuralEquality(Protocol):
    """Compares itself against another instance of a compatible type."""

    def equals(self, other: Any) -> bool: ...


class Inconclusive:
    """Comparator outcome meaning no custom rule applied."""

    _instance: Inconclusive | None = None

    def __new__(cls) -> Inconclusive:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "INCONCLUSIVE"

    def __reduce__(self) -> tuple[type[Inconclusive], tuple[()]]:
        return (Inconclusive, ())


INCONCLUSIVE: Final = Inconclusive()

Verdict: TypeAlias = bool | Inconclusive

PRIMITIVE_TYPES: Final = (type(None), bool, int, float, complex, str, bytes)


def has_value_of(value: Any) -> TypeGuard[HasValueEquality]:
    return value is not None and isinstance(value, HasValueEquality)


def has_equals(value: Any) -> TypeGuard[HasStructuralEquality]:
    return value is not None and isinstance(value, HasStructuralEquality)


def is_primitive(value: Any) -> bool:
    return type(value) in PRIMITIVE_TYPES
