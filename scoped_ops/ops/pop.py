# Copyright (c) 2025 Arne Deutsch, itemis AG, MIT License
"""Scoped removal of the last element."""

from __future__ import annotations

from typing import List, TypeVar, Union

from ..capability import ScopedSequence
from .base import ScopedOp

T = TypeVar("T")

_NOTHING = object()


class Pop(ScopedOp[T]):
    """Remove the last element, if any, for the lifetime of the handle.

    Popping an empty sequence is legal and changes nothing; its undo is a
    no-op as well.
    """

    kind = "pop"

    def __init__(self, target: Union[ScopedSequence[T], List[T]]) -> None:
        self._value: object = _NOTHING
        super().__init__(target)

    def _apply(self, items: List[T]) -> None:
        if items:
            self._value = items.pop()

    def _undo(self, items: List[T]) -> None:
        if self._value is not _NOTHING:
            items.append(self._value)  # type: ignore[arg-type]

    @property
    def was_empty(self) -> bool:
        """True when there was nothing to pop."""
        return self._value is _NOTHING

    @property
    def value(self) -> T:
        """The element removed at construction."""
        if self._value is _NOTHING:
            raise LookupError("the sequence was empty; nothing was popped")
        return self._value  # type: ignore[return-value]

    def _describe(self) -> str:
        return "empty" if self.was_empty else f"value={self._value!r}"


__all__ = ["Pop"]
