"""Tests for compare() and the equality capability protocols."""

from dataclasses import dataclass
from typing import Any

from render_guard.compare.capabilities import (
    INCONCLUSIVE,
    HasStructuralEquality,
    HasValueEquality,
    Inconclusive,
)
from render_guard.compare.compare import compare


class Money:
    def __init__(self, amount: int):
        self.amount = amount

    def equals(self, other: Any) -> bool:
        return isinstance(other, Money) and other.amount == self.amount


class Celsius:
    def __init__(self, degrees: float, label: str = ""):
        self.degrees = degrees
        self.label = label

    def value_of(self) -> float:
        return self.degrees


class Version(HasValueEquality, HasStructuralEquality):
    """Explicitly opts into both capabilities."""

    def __init__(self, number: int, equals_result: bool):
        self.number = number
        self.equals_result = equals_result
        self.equals_calls: list[Any] = []

    def value_of(self) -> int:
        return self.number

    def equals(self, other: Any) -> bool:
        self.equals_calls.append(other)
        return self.equals_result


@dataclass
class Point:
    x: int
    y: int


class TestReferenceAndPrimitives:
    def test_same_reference_is_equal(self) -> None:
        """compare(v, v) is True for any value."""
        for value in [Point(1, 2), [1, 2], {"a": 1}, Money(5), Celsius(3.0), object()]:
            assert compare(value, value) is True

    def test_equal_primitives_are_equal(self) -> None:
        """Primitives of the same type compare by value."""
        assert compare(10**20, 10**20) is True
        assert compare("abc", "".join(["a", "b", "c"])) is True
        assert compare(None, None) is True

    def test_different_primitives_are_inconclusive(self) -> None:
        """Unequal primitives are left to the structural walk."""
        assert compare(1, 2) is INCONCLUSIVE
        assert compare("a", "b") is INCONCLUSIVE

    def test_bool_and_int_are_not_primitively_equal(self) -> None:
        """True and 1 have different types, so step one does not apply."""
        assert compare(True, 1) is INCONCLUSIVE

    def test_plain_containers_are_inconclusive(self) -> None:
        """Distinct containers without capabilities defer to deep equality."""
        assert compare({"a": 1}, {"a": 1}) is INCONCLUSIVE
        assert compare([1], [1]) is INCONCLUSIVE
        assert compare(Point(1, 2), Point(1, 2)) is INCONCLUSIVE


class TestValueOf:
    def test_equal_coerced_values_are_equal(self) -> None:
        """Distinct value_of objects with the same primitive compare equal."""
        assert compare(Celsius(21.5, "kitchen"), Celsius(21.5, "hall")) is True

    def test_mismatch_falls_through(self) -> None:
        """A value_of mismatch does not decide inequality."""
        assert compare(Celsius(20.0), Celsius(25.0)) is INCONCLUSIVE

    def test_only_one_side_has_value_of(self) -> None:
        """value_of on one side only is inconclusive."""
        assert compare(Celsius(1.0), 1.0) is INCONCLUSIVE

    def test_value_of_mismatch_then_equals_decides(self) -> None:
        """After a value_of mismatch the equals capability gets its turn."""
        left = Version(1, equals_result=True)
        right = Version(2, equals_result=False)

        assert compare(left, right) is True
        assert left.equals_calls == [right]
        assert right.equals_calls == []

    def test_value_of_match_skips_equals(self) -> None:
        """A value_of match returns before equals is invoked."""
        left = Version(3, equals_result=False)

        assert compare(left, Version(3, equals_result=False)) is True
        assert left.equals_calls == []


class TestEquals:
    def test_equals_reports_equality(self) -> None:
        """Both sides have equals: its result is the verdict."""
        assert compare(Money(100), Money(100)) is True
        assert compare(Money(100), Money(200)) is False

    def test_only_left_equals_is_called(self) -> None:
        """equals is asymmetric: only the current side's method runs."""
        left = Version(1, equals_result=False)
        right = Version(2, equals_result=True)

        assert compare(left, right) is False
        assert right.equals_calls == []

    def test_one_sided_equals_is_unequal(self) -> None:
        """Capability mismatch is inequality even if the fields match."""
        assert compare(Money(100), Point(100, 0)) is False
        assert compare({"amount": 100}, Money(100)) is False

    def test_none_never_has_capabilities(self) -> None:
        """None against a value object with equals is unequal, not an error."""
        assert compare(None, Money(1)) is False


class TestInconclusive:
    def test_singleton_and_falsy(self) -> None:
        """INCONCLUSIVE is a falsy singleton."""
        assert Inconclusive() is INCONCLUSIVE
        assert not INCONCLUSIVE
        assert repr(INCONCLUSIVE) == "INCONCLUSIVE"
