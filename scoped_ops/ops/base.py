# Copyright (c) 2025 Arne Deutsch, itemis AG, MIT License
"""Shared lifecycle for scoped operation handles.

Summary
-------
A handle borrows its target, applies its change eagerly in ``__init__`` and
reverses it exactly once on release. Release happens at the end of a ``with``
block, through :meth:`ScopedOp.finish`, or, for a handle that was never bound
to a scope, when it is garbage collected.

Failure modes & diagnostics
---------------------------
Undo first checks that the backing list still has the length it had right
after apply. A mismatch means something mutated the list behind the handle
and raises :class:`~scoped_ops.errors.InvariantViolation` without touching the
list. These checks always run; ``verify_snapshots`` adds a full element-wise
comparison on top.
"""

from __future__ import annotations

import logging
import warnings
from typing import List, Optional, TypeVar, Union

from ..capability import _ACCESS, ScopedSequence, ScopedVec, as_scoped
from ..errors import InvariantViolation, ReleasedHandleError, UnscopedHandleWarning

T = TypeVar("T")

logger = logging.getLogger(__name__)


class ScopedOp(ScopedSequence[T]):
    """Base class for handles; subclasses implement ``_apply`` and ``_undo``."""

    kind = "op"

    def __init__(self, target: Union[ScopedSequence[T], List[T]]) -> None:
        super().__init__()
        self._released = True
        target = as_scoped(target)
        items = target._vec_mut(_ACCESS)
        target._borrow(self)
        self._target = target
        self._root: ScopedVec[T] = target.root
        self._depth = target.depth + 1
        self._items = items
        config = self._root.config
        self._snapshot: Optional[List[T]] = list(items) if config.verify_snapshots else None
        try:
            self._apply(items)
        except BaseException:
            target._unborrow(self)
            raise
        self._len_applied = len(items)
        self._released = False
        self._root.events.record("apply", self.kind, self._depth)
        logger.debug("applied %r at depth %d", self, self._depth)

    # ------------------------------------------------------------------
    # Hooks
    def _apply(self, items: List[T]) -> None:
        raise NotImplementedError

    def _undo(self, items: List[T]) -> None:
        raise NotImplementedError

    # ------------------------------------------------------------------
    # Capability
    def _ensure_live(self) -> None:
        if self._released:
            raise ReleasedHandleError(f"{self!r} has already been released")

    @property
    def root(self) -> ScopedVec[T]:
        return self._root

    @property
    def depth(self) -> int:
        return self._depth

    @property
    def released(self) -> bool:
        return self._released

    # ------------------------------------------------------------------
    # Scope
    def __enter__(self) -> "ScopedOp[T]":
        self._ensure_live()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if not self._released:
            self._release()
        return False

    def finish(self) -> ScopedSequence[T]:
        """Undo the change now and hand back the original target."""

        self._ensure_live()
        self._release()
        return self._target

    def __del__(self) -> None:
        if getattr(self, "_released", True):
            return
        self._release()
        if self._root.config.warn_unscoped:
            # raised from the finalizer, so the reported location is not the caller's line
            warnings.warn(
                f"{self!r} was dropped without a scope; its change was undone immediately",
                UnscopedHandleWarning,
            )

    def _release_nested(self) -> None:
        chain = []
        node = self._current_borrower()
        while node is not None:
            chain.append(node)
            node = node._current_borrower()
        error: Optional[InvariantViolation] = None
        for child in reversed(chain):
            try:
                child._release()
            except InvariantViolation as exc:
                error = error or exc
        if chain and self._root.config.warn_unscoped:
            warnings.warn(
                f"{len(chain)} handle(s) outlived {self!r}; released them first",
                UnscopedHandleWarning,
                stacklevel=4,
            )
        if error is not None:
            raise error

    def _release(self) -> None:
        try:
            self._release_nested()
        except InvariantViolation:
            self._release_own()
            raise
        self._release_own()

    def _release_own(self) -> None:
        items = self._items
        self._released = True
        self._target._unborrow(self)
        if len(items) != self._len_applied:
            self._violation(
                f"expected length {self._len_applied}, found {len(items)}; "
                "the sequence was mutated outside its scoped handles"
            )
        self._undo(items)
        if self._snapshot is not None and items != self._snapshot:
            self._violation(f"undo produced {items!r}, expected {self._snapshot!r}")
        self._root.events.record("undo", self.kind, self._depth)
        logger.debug("undid %r at depth %d", self, self._depth)

    def _violation(self, detail: str) -> None:
        self._root.events.record("violation", self.kind, self._depth)
        logger.error("%s undo failed: %s", self.kind, detail)
        raise InvariantViolation(f"{type(self).__name__} undo failed: {detail}")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._describe()})"

    def _describe(self) -> str:
        return ""


__all__ = ["ScopedOp"]
