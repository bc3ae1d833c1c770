"""Tests for Tester execution."""

import asyncio
import logging

import pytest

from treetest.errors import DuplicateAssertionError, TesterClosedError
from treetest.result import TestResult
from treetest.tester import Tester


def test_run_returns_result_tree(run_tree):
    def body(T):
        T.assert_("root passes").actual(1).eq(1)
        T.test("child", lambda T: T.assert_("child fails").actual(6).gt(10))

    result = run_tree(Tester("root", body))

    assert isinstance(result, TestResult)
    assert result.subject == "root"
    assert [a.subject for a in result.assertions] == ["root passes"]
    assert len(result.children) == 1
    assert result.children[0].subject == "child"
    assert result.children[0].assertions[0].result is False


def test_empty_body_resolves_to_empty_result(run_tree):
    result = run_tree(Tester("nothing", lambda T: None))
    assert result == TestResult("nothing", (), ())


def test_body_runs_once_per_run_with_fresh_handle(run_tree):
    handles = []

    def body(T):
        handles.append(T)
        T.assert_("x").actual(len(handles)).eq(1)

    tester = Tester("rerun", body)
    first = run_tree(tester)
    second = run_tree(tester)

    assert len(handles) == 2
    assert handles[0] is not handles[1]
    assert first is not second
    assert first.check() is True
    assert second.check() is False


def test_tester_is_immutable():
    tester = Tester("fixed", lambda T: None)
    with pytest.raises(AttributeError):
        tester.subject = "changed"


def test_async_body_is_awaited_before_resolution(run_tree):
    async def body(T):
        await asyncio.sleep(0.01)
        T.assert_("after io").actual("ready").eq("ready")
        T.test("late child", lambda T: T.assert_("ok").actual(1).lte(1))

    result = run_tree(Tester("async", body))

    assert [a.subject for a in result.assertions] == ["after io"]
    assert [c.subject for c in result.children] == ["late child"]
    assert result.check() is True


def test_children_results_keep_registration_order(run_tree):
    finished = []

    def make_child(name, delay):
        async def body(T):
            await asyncio.sleep(delay)
            finished.append(name)
            T.assert_(name).actual(delay).gte(0)

        return body

    def body(T):
        T.test("slow", make_child("slow", 0.05))
        T.test("medium", make_child("medium", 0.02))
        T.test("fast", make_child("fast", 0.0))

    result = run_tree(Tester("ordering", body))

    assert finished == ["fast", "medium", "slow"]
    assert [c.subject for c in result.children] == ["slow", "medium", "fast"]


def test_assertions_keep_registration_order(run_tree):
    def body(T):
        T.assert_("b").actual(1).eq(1)
        T.assert_("a").actual(1).eq(2)
        T.assert_("c").actual(1).ne(2)

    result = run_tree(Tester("order", body))
    assert [a.subject for a in result.assertions] == ["b", "a", "c"]


def test_nested_children_resolve_before_parent(run_tree):
    def leaf(T):
        T.assert_("leaf").actual(3).lt(4)

    def middle(T):
        T.test("leaf", leaf)

    def root(T):
        T.test("middle", middle)

    result = run_tree(Tester("root", root))
    assert result.children[0].children[0].assertions[0].result is True


def test_duplicate_subject_aborts_before_children_run(run_tree):
    child_ran = []

    def body(T):
        T.test("child", lambda T: child_ran.append(True))
        T.assert_("x").actual(1).eq(1)
        T.assert_("x").actual(2).eq(2)

    with pytest.raises(DuplicateAssertionError):
        run_tree(Tester("dupe", body))
    assert child_ran == []


def test_body_exception_propagates(run_tree):
    def body(T):
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError, match="boom"):
        run_tree(Tester("explodes", body))


def test_child_body_exception_propagates_to_root(run_tree):
    def bad_child(T):
        raise KeyError("missing")

    def body(T):
        T.test("bad", bad_child)

    with pytest.raises(KeyError):
        run_tree(Tester("root", body))


def test_async_body_exception_propagates(run_tree):
    async def body(T):
        await asyncio.sleep(0)
        raise ValueError("async boom")

    with pytest.raises(ValueError, match="async boom"):
        run_tree(Tester("async explodes", body))


def test_registering_after_body_completed_raises(run_tree):
    leaked = []

    def body(T):
        leaked.append(T)

    run_tree(Tester("leaks handle", body))

    with pytest.raises(TesterClosedError):
        leaked[0].assert_("too late")


def test_semaphore_bounds_concurrent_bodies(run_tree):
    running = 0
    peak = 0

    def make_child(i):
        async def body(T):
            nonlocal running, peak
            running += 1
            peak = max(peak, running)
            await asyncio.sleep(0.01)
            running -= 1
            T.assert_(f"child {i}").actual(i).gte(0)

        return body

    def root(T):
        for i in range(6):
            T.test(f"child {i}", make_child(i))

    async def main():
        return await Tester("bounded", root).run(semaphore=asyncio.Semaphore(2))

    result = asyncio.run(main())

    assert peak == 2
    assert len(result.children) == 6
    assert result.check() is True


def test_semaphore_of_one_does_not_deadlock_nested_trees():
    def leaf(T):
        T.assert_("leaf").actual(1).eq(1)

    def middle(T):
        T.test("leaf a", leaf).test("leaf b", leaf)

    def root(T):
        T.test("middle a", middle).test("middle b", middle)

    async def main():
        return await Tester("nested", root).run(semaphore=asyncio.Semaphore(1))

    result = asyncio.run(asyncio.wait_for(main(), timeout=5))
    assert result.check() is True


def test_run_logs_state_transitions(run_tree, caplog):
    logger = logging.getLogger("treetest.test_run_logs")
    with caplog.at_level(logging.DEBUG, logger="treetest.test_run_logs"):
        run_tree(
            Tester("logged", lambda T: T.assert_("x").actual(1).eq(1)), logger=logger
        )

    messages = [r.getMessage() for r in caplog.records]
    assert "[running] logged" in messages
    assert "[resolved] logged: 1/1 assertions passed, 0 sub-test(s)" in messages


def test_run_logs_defined_sub_tests(run_tree, caplog):
    logger = logging.getLogger("treetest.test_defined_logs")

    def body(T):
        T.test("first", lambda T: None).test("second", lambda T: None)

    with caplog.at_level(logging.DEBUG, logger="treetest.test_defined_logs"):
        run_tree(Tester("parent", body), logger=logger)

    messages = [r.getMessage() for r in caplog.records]
    assert messages.index("[defined] parent > first") < messages.index("[running] first")
    assert "[defined] parent > second" in messages
