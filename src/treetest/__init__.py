"""Nested test definitions with typed assertions and indented reports."""

from treetest.assertions import Assertion, AssertionResult
from treetest.comparison import Comparison, compare
from treetest.errors import DuplicateAssertionError, TesterClosedError, TreeTestError
from treetest.result import TestResult
from treetest.runner import Runner, execute
from treetest.tester import RuntimeTester, Tester, TestState

__all__ = [
    "Assertion",
    "AssertionResult",
    "Comparison",
    "DuplicateAssertionError",
    "RuntimeTester",
    "Runner",
    "TestResult",
    "TestState",
    "Tester",
    "TesterClosedError",
    "TreeTestError",
    "compare",
    "execute",
]
