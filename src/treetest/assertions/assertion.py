"""A single named check built up by a running test body."""

from __future__ import annotations

from typing import Any

from treetest.assertions.base import AssertionResult
from treetest.comparison import Comparison, compare


class Assertion:
    """Records an actual value, an expected value and how to compare them.

    Setters return the assertion so calls can be chained::

        T.assert_("Greater than").actual(6).gt(2)

    Without any comparison setter the assertion checks that the actual value
    equals ``None``.
    """

    def __init__(self, subject: str):
        self.subject = subject
        self.actual_value: Any = None
        self.expected_value: Any = None
        self.comparison = Comparison.EQ

    def __repr__(self) -> str:
        return (
            f"Assertion({self.subject!r}, actual={self.actual_value!r}, "
            f"{self.comparison.value}={self.expected_value!r})"
        )

    def actual(self, value: Any) -> Assertion:
        self.actual_value = value
        return self

    def _expect(self, comparison: Comparison, value: Any) -> Assertion:
        self.expected_value = value
        self.comparison = comparison
        return self

    def eq(self, value: Any) -> Assertion:
        """Expect the actual value to be exactly equal to ``value``."""
        return self._expect(Comparison.EQ, value)

    def ne(self, value: Any) -> Assertion:
        """Expect the actual value to be anything but ``value``."""
        return self._expect(Comparison.NE, value)

    def gt(self, value: Any) -> Assertion:
        return self._expect(Comparison.GT, value)

    def lt(self, value: Any) -> Assertion:
        return self._expect(Comparison.LT, value)

    def gte(self, value: Any) -> Assertion:
        return self._expect(Comparison.GTE, value)

    def lte(self, value: Any) -> Assertion:
        return self._expect(Comparison.LTE, value)

    def resolve(self) -> AssertionResult:
        """Run the comparison. Does not modify the assertion."""
        outcome = compare(self.comparison, self.actual_value, self.expected_value)
        return AssertionResult(
            subject=self.subject,
            actual=self.actual_value,
            expected=self.expected_value,
            comparison=self.comparison.value,
            comparison_symbol=outcome.symbol,
            comparison_words=outcome.words,
            result=outcome.passed,
        )
