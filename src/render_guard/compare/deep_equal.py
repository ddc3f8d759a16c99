"""Structural deep equality with a per-node comparator hook.

The walk itself is DeepDiff's. A custom operator matches every level and asks
the comparator for a verdict before DeepDiff descends, so values the comparator
recognises (cursors, immutable containers, value objects) are decided by
handle or capability and never walked.
"""

from __future__ import annotations

from typing import Any

from deepdiff import DeepDiff
from deepdiff.model import DiffLevel
from deepdiff.operator import BaseOperator

from render_guard.compare.capabilities import Inconclusive
from render_guard.compare.compare import Comparator, compare

COMPARATOR_UNEQUAL = "comparator_unequal"
"""DeepDiff report key for nodes the comparator judged unequal."""


class ComparatorOperator(BaseOperator):
    """DeepDiff operator that lets a comparator short-circuit any node."""

    def __init__(self, comparator: Comparator):
        super().__init__()
        self.comparator = comparator

    def match(self, level: DiffLevel) -> bool:
        return True

    def give_up_diffing(self, level: DiffLevel, diff_instance: DeepDiff) -> bool:
        verdict = self.comparator(level.t1, level.t2)
        if isinstance(verdict, Inconclusive):
            return False
        if not verdict:
            diff_instance.custom_report_result(
                COMPARATOR_UNEQUAL, level, {"t1": level.t1, "t2": level.t2}
            )
        return True


def deep_diff(value: Any, other: Any, customizer: Comparator = compare) -> DeepDiff:
    """Run the hooked DeepDiff walk and return the raw diff."""
    return DeepDiff(
        value,
        other,
        custom_operators=[ComparatorOperator(customizer)],
        ignore_nan_inequality=True,
        zip_ordered_iterables=True,
    )


def deep_equal(value: Any, other: Any, customizer: Comparator = compare) -> bool:
    """Deep structural equality, consulting ``customizer`` at every node.

    Args:
        value: The current value (any nesting of mappings, sequences, objects)
        other: The value to compare against
        customizer: Per-node override returning True, False or INCONCLUSIVE

    Returns:
        True if no difference was found
    """
    return not deep_diff(value, other, customizer)


def is_equal(value: Any, other: Any, customizer: Comparator = compare) -> bool:
    """Default equality check for props and state snapshots.

    The root pair goes through the same operator as every other node, so the
    customizer runs once per pair and a root verdict ends the walk.
    """
    return deep_equal(value, other, customizer)
