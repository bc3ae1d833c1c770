"""Exceptions raised for malformed test definitions."""

from __future__ import annotations


class TreeTestError(Exception):
    """Base class for treetest errors."""


class DuplicateAssertionError(TreeTestError, ValueError):
    """An assertion subject was registered twice inside one test body."""

    def __init__(self, subject: str):
        self.subject = subject
        super().__init__(
            f'Assertion with subject "{subject}" already exists and cannot be replaced'
        )


class TesterClosedError(TreeTestError, RuntimeError):
    """Registration was attempted after the owning test body completed."""

    def __init__(self, subject: str, kind: str):
        self.subject = subject
        self.kind = kind
        super().__init__(
            f"Cannot register {kind} '{subject}': the test body has already completed"
        )
