"""Base data structures for the assertion system."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class AssertionResult:
    """Result of resolving a single assertion.

    Attributes:
        subject: Description of what was asserted.
        actual: The value the test produced.
        expected: The value the test expected.
        comparison: Code of the comparison kind (e.g. "eq").
        comparison_symbol: Symbol for the comparison (e.g. "===").
        comparison_words: English phrase for the comparison (e.g. "equal").
        result: True if the assertion passed, False otherwise.
    """

    subject: str
    actual: Any
    expected: Any
    comparison: str
    comparison_symbol: str
    comparison_words: str
    result: bool

    def detail(self) -> str:
        """Human-readable description of the expectation and actual value."""
        return (
            f'{self.subject} (Expected {self.comparison_words}: "{self.expected}", '
            f'Actual: "{self.actual}")'
        )
