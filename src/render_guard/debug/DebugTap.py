"""Diagnostic side channel for update decisions."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from typing import TypeAlias

from render_guard.component.ComponentHandle import ComponentLike, component_tag

DEBUG_LOGGER_NAME = "render_guard.debug"

LogFn: TypeAlias = Callable[[str], object]

# Receives the component being decided for and a fixed message
DebugFn: TypeAlias = Callable[[ComponentLike, str], None]


def default_log_fn() -> LogFn:
    return logging.getLogger(DEBUG_LOGGER_NAME).debug


class DebugTap:
    """Holds at most one active debug function for a predicate instance.

    Nothing is emitted until ``install`` is called. Installing again replaces
    the previous function and pattern; there is no uninstall.
    """

    _debug: DebugFn | None

    def __init__(self) -> None:
        self._debug = None

    @property
    def active(self) -> bool:
        return self._debug is not None

    def install(
        self,
        pattern: str | re.Pattern[str] | LogFn | None = None,
        log_fn: LogFn | None = None,
    ) -> DebugFn:
        """Install a debug function filtered by a component tag pattern.

        Args:
            pattern: Regex searched against the component tag (default matches
                everything). A callable here is taken as ``log_fn``.
            log_fn: Sink for formatted lines, defaults to the
                ``render_guard.debug`` logger at DEBUG level

        Returns:
            The installed debug function

        Raises:
            ValueError: If the pattern is not a valid regular expression
        """
        if callable(pattern):
            log_fn = pattern
            pattern = None

        logger = log_fn if log_fn is not None else default_log_fn()
        regex = _compile(pattern)

        def debug(component: ComponentLike, message: str) -> None:
            tag = component_tag(component)
            if regex.search(tag):
                logger(f"<{tag}>: {message}")

        self._debug = debug
        return debug

    def __call__(self, component: ComponentLike, message: str) -> None:
        if self._debug is not None:
            self._debug(component, message)


def _compile(pattern: str | re.Pattern[str] | None) -> re.Pattern[str]:
    if pattern is None:
        return re.compile(".*")
    if isinstance(pattern, re.Pattern):
        return pattern
    try:
        return re.compile(pattern)
    except re.error as e:
        raise ValueError(f"Invalid debug pattern {pattern!r}: {e}") from e
