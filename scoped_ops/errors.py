# Copyright (c) 2025 Arne Deutsch, itemis AG, MIT License
"""Exception and warning types raised by scoped operations."""

from __future__ import annotations


class ScopedOpsError(Exception):
    """Base class for all scoped operation errors."""


class IndexOutOfRange(ScopedOpsError, IndexError):
    """Index precondition failed; the operation was never applied."""

    def __init__(self, index: int, length: int) -> None:
        super().__init__(f"index {index} out of range for sequence of length {length}")
        self.index = index
        self.length = length


class InvariantViolation(ScopedOpsError, AssertionError):
    """The backing sequence changed shape behind a live handle."""


class BorrowError(ScopedOpsError, RuntimeError):
    """A target was accessed while another handle holds exclusive access."""


class ReleasedHandleError(BorrowError):
    """A handle was used after its change was undone."""


class UnscopedHandleWarning(UserWarning):
    """A handle was released without being bound to a scope."""


__all__ = [
    "ScopedOpsError",
    "IndexOutOfRange",
    "InvariantViolation",
    "BorrowError",
    "ReleasedHandleError",
    "UnscopedHandleWarning",
]
