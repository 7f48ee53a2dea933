# Copyright (c) 2025 Arne Deutsch, itemis AG, MIT License
"""Identity handle."""

from __future__ import annotations

from typing import List, TypeVar

from .base import ScopedOp

T = TypeVar("T")


class Noop(ScopedOp[T]):
    """Borrow a sequence without changing it.

    Lets code written against handles accept an unmodified sequence, e.g.
    ``with Noop(items) as seq: consume(seq)``.
    """

    kind = "noop"

    def _apply(self, items: List[T]) -> None:
        pass

    def _undo(self, items: List[T]) -> None:
        pass


__all__ = ["Noop"]
