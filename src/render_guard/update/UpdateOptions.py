from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from typing import Any, Callable, TypeAlias

EqualityPredicate: TypeAlias = Callable[[Any, Any], bool]


@dataclass(frozen=True)
class UpdateOptions:
    """Overrides for the update predicate. Unset fields use the built-in defaults."""

    is_equal_state: EqualityPredicate | None = None
    is_equal_props: EqualityPredicate | None = None

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if value is not None and not callable(value):
                raise TypeError(
                    f"{f.name} must be callable, got {type(value).__name__}"
                )

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> UpdateOptions:
        """Build options from a plain mapping.

        Raises:
            ValueError: If the mapping has keys other than the two overrides
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(options) - known)
        if unknown:
            raise ValueError(
                f"Unknown update options: {', '.join(unknown)}. "
                f"Expected any of: {', '.join(sorted(known))}"
            )
        return cls(**options)

    @classmethod
    def coerce(cls, options: UpdateOptions | Mapping[str, Any] | None) -> UpdateOptions:
        if options is None:
            return cls()
        if isinstance(options, UpdateOptions):
            return options
        if isinstance(options, Mapping):
            return cls.from_mapping(options)
        raise TypeError(
            f"options must be UpdateOptions or a mapping, got {type(options).__name__}"
        )

    def merged(self, **overrides: EqualityPredicate | None) -> UpdateOptions:
        """Copy with the given overrides applied, ignoring ones passed as None."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})
