from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypeVar, dataclass_transform

T = TypeVar("T")

CHILDREN = "children"
"""The reserved props key holding nested render content."""


@dataclass_transform(frozen_default=True, kw_only_default=True)
def propsclass(cls: type[T]) -> type[T]:
    return dataclass(frozen=True, kw_only=True)(cls)


@propsclass
class Props:
    """Base class for props.

    Subclasses add their own fields. ``children`` is never compared when
    deciding on an update.
    """

    children: Any = None
