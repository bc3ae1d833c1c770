"""Pytest configuration and fixtures."""

import asyncio
import logging
from pathlib import Path

import pytest

from treetest.style import PLAIN_STYLE

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Clean up treetest loggers after each test to prevent handler leaks."""
    yield

    loggers_to_remove = [
        name
        for name in logging.Logger.manager.loggerDict.keys()
        if name.startswith("treetest")
    ]

    for name in loggers_to_remove:
        logger = logging.getLogger(name)
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()
        del logging.Logger.manager.loggerDict[name]


@pytest.fixture
def run_tree():
    """Run a Tester to its TestResult on a fresh event loop."""

    def _run(tester, **kwargs):
        return asyncio.run(tester.run(**kwargs))

    return _run


@pytest.fixture
def plain():
    """Uncolored PASS/FAIL style so rendered lines are easy to compare."""
    return PLAIN_STYLE


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR
