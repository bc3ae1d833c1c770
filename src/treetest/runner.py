from __future__ import annotations

import asyncio
import logging
import sys
from pathlib import Path
from typing import Callable

from treetest.config import RunConfig
from treetest.metrics import collect_metrics
from treetest.result import TestResult
from treetest.tester import Tester
from treetest.verbose import setup_logger

LineWriter = Callable[[str], object]
Terminator = Callable[[int], object]


class Runner:
    """Runs a root tester and reports its result."""

    def __init__(
        self,
        config: RunConfig | None = None,
        write: LineWriter = print,
        logger: logging.Logger | None = None,
    ):
        self.config = config or RunConfig()
        self.write = write
        if logger is None:
            if self.config.debug_log or self.config.verbose:
                debug_file = Path(self.config.debug_log) if self.config.debug_log else None
                logger = setup_logger(debug_file, verbose=self.config.verbose)
            else:
                # Leave handlers configured by an embedding program alone
                logger = logging.getLogger("treetest")
        self.logger = logger

    def run(self, tester: Tester) -> TestResult:
        """Run ``tester`` and all of its sub-tests to completion.

        Starts its own event loop, so it cannot be called from a coroutine;
        use :meth:`arun` there instead.
        """
        return asyncio.run(self.arun(tester))

    async def arun(self, tester: Tester) -> TestResult:
        """Run ``tester`` on the current event loop."""
        self.logger.debug(f"Starting run of '{tester.subject}'")
        semaphore = None
        if self.config.max_concurrency is not None:
            semaphore = asyncio.Semaphore(self.config.max_concurrency)
        return await tester.run(semaphore=semaphore, logger=self.logger)

    def report(self, result: TestResult) -> int:
        """Write the report lines and status line. Returns the exit code."""
        report_config = self.config.report

        for line in result.to_lines(style=report_config.style()):
            self.write(line)

        summary = collect_metrics(result)
        self.logger.debug(f"Run complete: {summary.describe()}")
        if report_config.summary:
            self.write(summary.describe())

        if report_config.junit or report_config.html:
            self._write_reports(result)

        if result.check():
            self.write(report_config.success_message)
            return 0

        self.write(report_config.failure_message)
        return 1

    def _write_reports(self, result: TestResult) -> None:
        from treetest.reporting.junit import generate_report, write_junit

        report_config = self.config.report
        if report_config.junit:
            junit_path = write_junit(result, Path(report_config.junit))
        else:
            junit_path = write_junit(result, Path(report_config.html).with_suffix(".xml"))
        self.logger.debug(f"Wrote JUnit report: {junit_path}")

        if report_config.html:
            report_path = generate_report(junit_path, Path(report_config.html))
            self.logger.debug(f"Wrote HTML report: {report_path}")


def execute(
    tester: Tester,
    *,
    config: RunConfig | None = None,
    write: LineWriter = print,
    terminate: Terminator = sys.exit,
    logger: logging.Logger | None = None,
) -> None:
    """Run ``tester``, write its report and terminate with the exit code.

    Exit code is 0 if every test passed and 1 otherwise. ``write`` receives
    each report line in order; ``terminate`` receives the exit code.
    Like :meth:`Runner.run` it starts its own event loop; async callers
    should use :meth:`Runner.arun` and :meth:`Runner.report` instead.
    """
    runner = Runner(config=config, write=write, logger=logger)
    result = runner.run(tester)
    exit_code = runner.report(result)
    terminate(exit_code)
