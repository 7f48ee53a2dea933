# Copyright (c) 2025 Arne Deutsch, itemis AG, MIT License
"""Scoped replacement of a single element."""

from __future__ import annotations

import operator
from typing import Callable, List, TypeVar, Union

from ..capability import ScopedSequence
from ..errors import IndexOutOfRange
from .base import ScopedOp

T = TypeVar("T")


class Assign(ScopedOp[T]):
    """Replace ``items[index]`` with ``value`` for the lifetime of the handle.

    Parameters
    ----------
    target : ScopedSequence or list
        Sequence to modify.
    index : int
        Zero-based position; must satisfy ``0 <= index < len``. Negative
        indices are rejected rather than counted from the end.
    value
        Replacement element.

    Raises
    ------
    IndexOutOfRange
        If ``index`` is outside the sequence. Nothing is modified and no
        handle is returned.

    Contracts
    ---------
    The element count must not change while the handle is live; otherwise
    undo raises :class:`~scoped_ops.errors.InvariantViolation` instead of
    restoring into the wrong slot.
    """

    kind = "assign"

    def __init__(
        self, target: Union[ScopedSequence[T], List[T]], index: int, value: T
    ) -> None:
        self.index = operator.index(index)
        self.value = value
        super().__init__(target)

    def _replacement(self, previous: T) -> T:
        return self.value

    def _apply(self, items: List[T]) -> None:
        if not 0 <= self.index < len(items):
            raise IndexOutOfRange(self.index, len(items))
        previous = items[self.index]
        self.value = self._replacement(previous)
        items[self.index] = self.value
        self.previous = previous

    def _undo(self, items: List[T]) -> None:
        items[self.index] = self.previous

    def _describe(self) -> str:
        return f"index={self.index}, value={self.value!r}"


class Update(Assign[T]):
    """Replace ``items[index]`` with ``func(items[index])``."""

    kind = "update"

    def __init__(
        self,
        target: Union[ScopedSequence[T], List[T]],
        index: int,
        func: Callable[[T], T],
    ) -> None:
        self.func = func
        super().__init__(target, index, None)  # type: ignore[arg-type]

    def _replacement(self, previous: T) -> T:
        return self.func(previous)


__all__ = ["Assign", "Update"]
