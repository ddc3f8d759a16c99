from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol


class ComponentLike(Protocol):
    """What the update predicate reads from the component it is deciding for."""

    @property
    def props(self) -> Any: ...

    @property
    def state(self) -> Any: ...

    @property
    def display_name(self) -> str | None: ...

    @property
    def key(self) -> str | int | None: ...


@dataclass
class ComponentHandle:
    """Live snapshot of a component: current props and state plus identity.

    The host keeps ``props`` and ``state`` pointing at the values it last
    rendered with; ``display_name`` and ``key`` only feed debug output.
    """

    props: Any = None
    state: Any = None
    display_name: str | None = None
    key: str | int | None = None


def component_tag(component: ComponentLike) -> str:
    """Tag used to label and filter debug output, e.g. ``Counter key=3``."""
    name = getattr(component, "display_name", None)
    key = getattr(component, "key", None)
    key_part = f"key={key}" if key is not None and key != "" else ""

    if not name and not key_part:
        return "Unknown"
    if not name:
        return key_part
    if not key_part:
        return name
    return f"{name} {key_part}"
