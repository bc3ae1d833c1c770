"""Test definitions and their execution."""

from __future__ import annotations

import asyncio
import inspect
import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Union

from treetest.assertions.assertion import Assertion
from treetest.errors import DuplicateAssertionError, TesterClosedError
from treetest.result import TestResult

if TYPE_CHECKING:
    from treetest.config import RunConfig

TestBody = Callable[["RuntimeTester"], Union[None, Awaitable[None]]]


class TestState(str, Enum):
    __test__ = False

    DEFINED = "defined"
    RUNNING = "running"
    RESOLVED = "resolved"


class RuntimeTester:
    """Handle passed to a running test body.

    Lets the body define assertions and sub-tests. It never runs anything
    itself; the owning :class:`Tester` resolves what was registered once the
    body has completed.
    """

    def __init__(self) -> None:
        self.assertions: dict[str, Assertion] = {}
        self.children: list[Tester] = []
        self.closed = False

    def test(self, subject: str, body: TestBody) -> RuntimeTester:
        """Define a sub-test. Returns this handle so definitions can be chained."""
        if self.closed:
            raise TesterClosedError(subject, "sub-test")
        self.children.append(Tester(subject, body))
        return self

    def assert_(self, subject: str) -> Assertion:
        """Define an assertion. ``subject`` must be unique within this test."""
        if self.closed:
            raise TesterClosedError(subject, "assertion")
        if subject in self.assertions:
            raise DuplicateAssertionError(subject)

        assertion = Assertion(subject)
        self.assertions[subject] = assertion
        return assertion

    def close(self) -> None:
        self.closed = True


@dataclass(frozen=True)
class Tester:
    """A named test: a subject plus the body which defines its contents.

    Every call to :meth:`run` invokes the body again with a fresh
    :class:`RuntimeTester`, so a tester can be run any number of times.
    """

    __test__ = False

    subject: str
    body: TestBody

    async def run(
        self,
        *,
        semaphore: asyncio.Semaphore | None = None,
        logger: logging.Logger | None = None,
    ) -> TestResult:
        """Run the body, then resolve its assertions and sub-tests.

        Args:
            semaphore: Optional limit on how many bodies execute at once. A
                permit is only held while a body runs, never while waiting
                on sub-tests.
            logger: Logger for state transitions. Defaults to "treetest".

        Exceptions raised by the body propagate to the caller.
        """
        log = logger or logging.getLogger("treetest")
        runtime_tester = RuntimeTester()

        log.debug("[%s] %s", TestState.RUNNING.value, self.subject)
        if semaphore is not None:
            async with semaphore:
                await self._invoke_body(runtime_tester)
        else:
            await self._invoke_body(runtime_tester)

        assertion_results = tuple(
            a.resolve() for a in runtime_tester.assertions.values()
        )
        for child in runtime_tester.children:
            log.debug("[%s] %s > %s", TestState.DEFINED.value, self.subject, child.subject)
        child_results = await asyncio.gather(
            *(
                child.run(semaphore=semaphore, logger=log)
                for child in runtime_tester.children
            )
        )

        result = TestResult(
            subject=self.subject,
            assertions=assertion_results,
            children=tuple(child_results),
        )
        log.debug(
            "[%s] %s: %d/%d assertions passed, %d sub-test(s)",
            TestState.RESOLVED.value,
            self.subject,
            sum(1 for a in assertion_results if a.result),
            len(assertion_results),
            len(child_results),
        )
        return result

    async def _invoke_body(self, runtime_tester: RuntimeTester) -> None:
        try:
            outcome: Any = self.body(runtime_tester)
            if inspect.isawaitable(outcome):
                await outcome
        finally:
            runtime_tester.close()

    def execute(self, config: RunConfig | None = None, **kwargs: Any) -> None:
        """Run the tests, print the report and exit the process.

        Exits with 0 if every test passed, 1 otherwise. See
        :func:`treetest.runner.execute` for the accepted keyword arguments.
        """
        from treetest.runner import execute

        execute(self, config=config, **kwargs)
