"""Comparison kinds and the pure comparator used by assertions."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable


class Comparison(str, Enum):
    EQ = "eq"
    NE = "ne"
    GT = "gt"
    LT = "lt"
    GTE = "gte"
    LTE = "lte"

    @property
    def symbol(self) -> str:
        return _OPERATORS[self][1]

    @property
    def words(self) -> str:
        return _OPERATORS[self][2]


@dataclass(frozen=True)
class ComparisonOutcome:
    """Outcome of comparing an actual value against an expected value.

    Attributes:
        passed: Whether the relation holds.
        symbol: Mathematical symbol for the relation (e.g. "===").
        words: Short English phrase that fits in a sentence like
            "<actual> <words> <expected>".
    """

    passed: bool
    symbol: str
    words: str


def strictly_equal(actual: Any, expected: Any) -> bool:
    """Equality without coercion: operands must share a type and compare equal.

    Lists and tuples are compared item by item and dicts value by value with
    the same rule, so ``[1]`` does not equal ``[True]``. Dict keys and set
    members use plain ``==``.
    """
    if type(actual) is not type(expected):
        return False
    if isinstance(actual, (list, tuple)):
        return len(actual) == len(expected) and all(
            strictly_equal(a, e) for a, e in zip(actual, expected)
        )
    if isinstance(actual, dict):
        return actual.keys() == expected.keys() and all(
            strictly_equal(value, expected[key]) for key, value in actual.items()
        )
    return actual == expected


def strictly_differ(actual: Any, expected: Any) -> bool:
    return not strictly_equal(actual, expected)


_OPERATORS: dict[Comparison, tuple[Callable[[Any, Any], Any], str, str]] = {
    Comparison.EQ: (strictly_equal, "===", "equal"),
    Comparison.NE: (strictly_differ, "!==", "not equal"),
    Comparison.GT: (operator.gt, ">", "greater than"),
    Comparison.LT: (operator.lt, "<", "less than"),
    Comparison.GTE: (operator.ge, ">=", "greater than or equal to"),
    Comparison.LTE: (operator.le, "<=", "less than or equal to"),
}


def compare(kind: Comparison | str, actual: Any, expected: Any) -> ComparisonOutcome:
    """Compare ``actual`` to ``expected`` using ``kind``.

    Raises ValueError for an unknown kind code. Operand pairs Python cannot
    order (e.g. ``5 < "a"``) evaluate to a failed comparison.
    """
    kind = Comparison(kind)
    fn, symbol, words = _OPERATORS[kind]

    try:
        passed = bool(fn(actual, expected))
    except TypeError:
        passed = False

    return ComparisonOutcome(passed=passed, symbol=symbol, words=words)
