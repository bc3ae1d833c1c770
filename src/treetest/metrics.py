from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any

from treetest.result import TestResult


@dataclass
class ResultSummary:
    """Counts over a whole result tree."""

    tests_total: int
    tests_failed: int
    assertions_total: int
    assertions_passed: int
    assertions_failed: int
    assertion_pass_rate: float

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    def describe(self) -> str:
        return (
            f"{self.assertions_passed}/{self.assertions_total} assertions passed "
            f"across {self.tests_total} test(s)"
        )


def collect_metrics(result: TestResult) -> ResultSummary:
    """Count tests and assertions in ``result`` and all of its descendants."""
    tests_total = 0
    tests_failed = 0
    passed = 0
    failed = 0

    for _, node in result.walk():
        tests_total += 1
        if not node.check():
            tests_failed += 1
        passed += sum(1 for a in node.assertions if a.result)
        failed += sum(1 for a in node.assertions if not a.result)

    total = passed + failed
    pass_rate = (passed / total * 100) if total > 0 else 100.0

    return ResultSummary(
        tests_total=tests_total,
        tests_failed=tests_failed,
        assertions_total=total,
        assertions_passed=passed,
        assertions_failed=failed,
        assertion_pass_rate=round(pass_rate, 2),
    )
