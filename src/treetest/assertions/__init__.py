"""Assertion system for checking values produced by test bodies."""

from treetest.assertions.assertion import Assertion
from treetest.assertions.base import AssertionResult

__all__ = ["Assertion", "AssertionResult"]
