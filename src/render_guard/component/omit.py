"""Strip the reserved key from a props snapshot before comparison."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import fields, is_dataclass
from typing import Any

from render_guard.component.Props import CHILDREN


def omit_reserved_key(props: Any, reserved: str = CHILDREN) -> dict[str, Any]:
    """Return a shallow copy of ``props`` without the ``reserved`` key.

    Args:
        props: A mapping, a props dataclass instance, or None
        reserved: The key to leave out

    Returns:
        A new dict; the input is never mutated. Field values are not copied.

    Raises:
        TypeError: If props is neither a mapping nor a dataclass instance
    """
    if props is None:
        return {}
    if isinstance(props, Mapping):
        return {key: value for key, value in props.items() if key != reserved}
    if is_dataclass(props) and not isinstance(props, type):
        return {
            f.name: getattr(props, f.name) for f in fields(props) if f.name != reserved
        }
    raise TypeError(
        f"Cannot filter props of type {type(props).__name__}: "
        "expected a mapping or a props dataclass instance"
    )


def omit_children(props: Any) -> dict[str, Any]:
    return omit_reserved_key(props, CHILDREN)
