from __future__ import annotations

from typing import Any, Callable, TypeAlias

from render_guard.compare.capabilities import (
    INCONCLUSIVE,
    Verdict,
    has_equals,
    has_value_of,
    is_primitive,
)

Comparator: TypeAlias = Callable[[Any, Any], Verdict]


def compare(current: Any, next: Any) -> Verdict:
    """Three-way equality check for a single pair of values.

    Args:
        current: The value from the current snapshot
        next: The value from the proposed snapshot

    Returns:
        True or False when a custom rule decides, otherwise INCONCLUSIVE so the
        caller falls back to structural comparison.
    """
    if current is next:
        return True
    if is_primitive(current) and type(current) is type(next) and current == next:
        return True

    # value_of is only a fast path: a mismatch is left to the structural walk
    if has_value_of(current) and has_value_of(next):
        if current.value_of() == next.value_of():
            return True

    current_has_equals = has_equals(current)
    next_has_equals = has_equals(next)

    if current_has_equals and next_has_equals:
        return bool(current.equals(next))
    if current_has_equals or next_has_equals:
        return False
    return INCONCLUSIVE
