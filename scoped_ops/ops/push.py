# Copyright (c) 2025 Arne Deutsch, itemis AG, MIT License
"""Scoped append."""

from __future__ import annotations

from typing import List, TypeVar, Union

from ..capability import ScopedSequence
from .base import ScopedOp

T = TypeVar("T")


class Push(ScopedOp[T]):
    """Append ``value`` for the lifetime of the handle.

    Undo removes the last element. The shared length check in
    :class:`~scoped_ops.ops.base.ScopedOp` catches an element that was popped
    behind the handle's back before anything is removed.
    """

    kind = "push"

    def __init__(self, target: Union[ScopedSequence[T], List[T]], value: T) -> None:
        self.value = value
        super().__init__(target)

    def _apply(self, items: List[T]) -> None:
        items.append(self.value)

    def _undo(self, items: List[T]) -> None:
        items.pop()

    def _describe(self) -> str:
        return f"value={self.value!r}"


__all__ = ["Push"]
