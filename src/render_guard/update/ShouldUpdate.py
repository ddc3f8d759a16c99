"""Decide whether a component needs to re-render.

Usage::

    from render_guard.update.ShouldUpdate import should_component_update

    if should_component_update(component, next_props, next_state):
        ...

Use ``create`` for an instance with overridden equality checks.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Mapping
from typing import Any

from render_guard.compare.deep_equal import is_equal
from render_guard.component.ComponentHandle import ComponentLike
from render_guard.component.omit import omit_children
from render_guard.debug.DebugTap import DebugFn, DebugTap, LogFn
from render_guard.update.UpdateOptions import EqualityPredicate, UpdateOptions

_logger = logging.getLogger(__name__)

MESSAGE_PREFIX = "should_component_update =>"


def is_equal_props(value: Any, other: Any) -> bool:
    """Default props check.

    Looks through the tree for values with equality capabilities (cursors,
    immutable structures, value objects) and compares those by capability
    instead of walking them.
    """
    return is_equal(value, other)


def is_equal_state(value: Any, other: Any) -> bool:
    """Default state check, same rules as ``is_equal_props``."""
    return is_equal_props(value, other)


class ShouldUpdate:
    """Configured update predicate.

    Call it with the component (current props/state plus identity) and the
    proposed props and state. Returns True when a re-render is needed.
    """

    is_equal_state: EqualityPredicate
    is_equal_props: EqualityPredicate
    _debug: DebugTap

    def __init__(self, options: UpdateOptions | None = None):
        options = options or UpdateOptions()
        self.is_equal_state = options.is_equal_state or is_equal_state
        self.is_equal_props = options.is_equal_props or is_equal_props
        self._debug = DebugTap()

    def __call__(
        self, component: ComponentLike, next_props: Any, next_state: Any
    ) -> bool:
        if next_props is component.props and next_state is component.state:
            self._trace(component, False, "equal input")
            return False

        if not self.is_equal_state(component.state, next_state):
            self._trace(component, True, "state has changed")
            return True

        current_props = omit_children(component.props)
        if not self.is_equal_props(current_props, omit_children(next_props)):
            self._trace(component, True, "props have changed")
            return True

        self._trace(component, False)
        return False

    def _trace(self, component: ComponentLike, result: bool, reason: str | None = None) -> None:
        if not self._debug.active:
            return
        message = f"{MESSAGE_PREFIX} {str(result).lower()}"
        if reason:
            message = f"{message} ({reason})"
        self._debug(component, message)

    def debug(
        self,
        pattern: str | re.Pattern[str] | LogFn | None = None,
        log_fn: LogFn | None = None,
    ) -> DebugFn:
        """Log every decision for components whose tag matches ``pattern``.

        Tags are the component's display name plus ``key=<key>`` when it has
        one. Lines go to ``log_fn`` or the ``render_guard.debug`` logger.
        """
        return self._debug.install(pattern, log_fn)

    def bind(self, component: ComponentLike) -> Callable[[Any, Any], bool]:
        """Two-argument form bound to one component."""

        def should_update(next_props: Any, next_state: Any) -> bool:
            return self(component, next_props, next_state)

        return should_update


def create(
    options: UpdateOptions | Mapping[str, Any] | None = None,
    *,
    is_equal_state: EqualityPredicate | None = None,
    is_equal_props: EqualityPredicate | None = None,
) -> ShouldUpdate:
    """Create an update predicate with overridden defaults.

    Args:
        options: UpdateOptions or a mapping with ``is_equal_state`` and/or
            ``is_equal_props``
        is_equal_state: State check replacing the default, takes precedence
            over ``options``
        is_equal_props: Props check replacing the default, takes precedence
            over ``options``

    Returns:
        A new ShouldUpdate with its own debug state

    Raises:
        ValueError: If a mapping carries unknown keys
        TypeError: If options has the wrong type or an override is not callable
    """
    resolved = UpdateOptions.coerce(options).merged(
        is_equal_state=is_equal_state, is_equal_props=is_equal_props
    )
    _logger.debug(
        "Creating update predicate (state override: %s, props override: %s)",
        resolved.is_equal_state is not None,
        resolved.is_equal_props is not None,
    )
    return ShouldUpdate(resolved)


with_defaults = create

should_component_update = ShouldUpdate()
