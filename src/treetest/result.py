"""Resolved test tree nodes."""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import Iterator

from treetest.assertions.base import AssertionResult
from treetest.style import DEFAULT_STYLE, Style

INDENT = "  "


@dataclass(frozen=True)
class TestResult:
    """Result of running a test: its resolved assertions and child results.

    Both sequences keep the order in which the test body registered them.
    """

    __test__ = False  # not a pytest test class

    subject: str
    assertions: tuple[AssertionResult, ...] = ()
    children: tuple[TestResult, ...] = ()

    @cached_property
    def passed(self) -> bool:
        # Computed once per node; children reuse their own cached value
        if any(not a.result for a in self.assertions):
            return False
        return all(child.passed for child in self.children)

    def check(self) -> bool:
        """True if every assertion in this node and all descendants passed."""
        return self.passed

    def failed_assertions(self) -> list[AssertionResult]:
        return [a for a in self.assertions if not a.result]

    def walk(self, depth: int = 0) -> Iterator[tuple[int, TestResult]]:
        """Yield ``(depth, node)`` pairs in pre-order."""
        yield depth, self
        for child in self.children:
            yield from child.walk(depth + 1)

    def to_lines(self, depth: int = 0, style: Style = DEFAULT_STYLE) -> list[str]:
        """Render the result as report lines.

        One line for this node, one line per failing assertion (passing
        assertions are omitted), then every child's lines one level deeper.
        Returning a list lets a parent indent its children's output by
        rendering them at ``depth + 1``.
        """
        indent = INDENT * depth
        out = [f"{indent}{style.mark(self.passed)} {self.subject}"]

        for a in self.failed_assertions():
            out.append(f"{indent}{INDENT}{style.mark(False)} {a.detail()}")

        for child in self.children:
            out.extend(child.to_lines(depth + 1, style))

        return out

    def __str__(self) -> str:
        return "\n".join(self.to_lines())
