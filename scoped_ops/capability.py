# Copyright (c) 2025 Arne Deutsch, itemis AG, MIT License
"""Sequence capability shared by raw sequences and scoped handles.

Summary
-------
:class:`ScopedSequence` is the one interface every scoped operation targets.
It is implemented by :class:`ScopedVec`, which wraps a plain ``list``, and by
every handle in :mod:`scoped_ops.ops`, which is what allows handles to nest.

Mutable access to the backing list goes through ``_vec_mut`` and requires
``_ACCESS``, a token held only by modules of this package. The hierarchy is
sealed: subclasses defined outside ``scoped_ops`` are rejected.

Exclusive access
----------------
Each capability records the single handle currently borrowing it. A borrowed
capability cannot be read or borrowed again until that handle is released.
The record is a weak reference: a handle is owned by its caller, never by its
target, so a handle dropped without a scope is freed and undone at once.

Contracts
---------
The list passed to :class:`ScopedVec` must not be mutated directly while it is
wrapped; doing so is detected at undo time as an
:class:`~scoped_ops.errors.InvariantViolation`.
"""

from __future__ import annotations

import logging
import weakref
from typing import TYPE_CHECKING, Any, Callable, Generic, List, Optional, TypeVar, Union

from .config import ScopedOpsConfig, default_config
from .errors import BorrowError
from .event_logger import EventLogger
from .view import SequenceView

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .ops import Assign, Noop, Pop, Push, ScopedOp, Update

T = TypeVar("T")

logger = logging.getLogger(__name__)

_ACCESS = object()
_SEALED_PREFIX = __name__.rsplit(".", 1)[0] + "."

# id(list) -> live wrapper; the wrapper keeps the list alive so ids are stable
_WRAPPERS: "weakref.WeakValueDictionary[int, ScopedVec[Any]]" = weakref.WeakValueDictionary()


def _check_token(token: object) -> None:
    if token is not _ACCESS:
        raise BorrowError("mutable access is reserved for scoped operations")


class ScopedSequence(Generic[T]):
    """Something scoped operations can be applied to."""

    _items: List[T]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if not cls.__module__.startswith(_SEALED_PREFIX):
            raise TypeError(
                f"{cls.__qualname__}: ScopedSequence cannot be implemented outside scoped_ops"
            )

    def __init__(self) -> None:
        self._borrower: Optional["weakref.ReferenceType[ScopedOp[T]]"] = None

    # ------------------------------------------------------------------
    # Capability
    def _vec_mut(self, token: object) -> List[T]:
        _check_token(token)
        self._ensure_live()
        return self._items

    def _ensure_live(self) -> None:
        """Raise if this capability can no longer be used."""

    def _current_borrower(self) -> Optional["ScopedOp[T]"]:
        if self._borrower is None:
            return None
        return self._borrower()

    def _ensure_readable(self) -> None:
        self._ensure_live()
        borrower = self._current_borrower()
        if borrower is not None:
            raise BorrowError(f"{self!r} is borrowed by {borrower!r}; read through that handle")

    def _borrow(self, handle: "ScopedOp[T]") -> None:
        self._ensure_live()
        borrower = self._current_borrower()
        if borrower is not None:
            raise BorrowError(f"{self!r} is already borrowed by {borrower!r}")
        self._borrower = weakref.ref(handle)

    def _unborrow(self, handle: "ScopedOp[T]") -> None:
        borrower = self._current_borrower()
        if borrower is handle or borrower is None:
            self._borrower = None

    # ------------------------------------------------------------------
    # Read access
    @property
    def root(self) -> "ScopedVec[T]":
        raise NotImplementedError

    @property
    def depth(self) -> int:
        """Number of handles between this capability and the raw sequence."""
        raise NotImplementedError

    @property
    def config(self) -> ScopedOpsConfig:
        return self.root._config

    def as_slice(self) -> SequenceView[T]:
        """Return a read-only live view of the current sequence."""
        self._ensure_readable()
        return SequenceView(self)

    def to_list(self) -> List[T]:
        """Return a copy of the current sequence."""
        return list(self.as_slice())

    # ------------------------------------------------------------------
    # Scoped operations
    def pushed(self, value: T) -> "Push[T]":
        from .ops.push import Push

        return Push(self, value)

    def popped(self) -> "Pop[T]":
        from .ops.pop import Pop

        return Pop(self)

    def assigned(self, index: int, value: T) -> "Assign[T]":
        from .ops.assign import Assign

        return Assign(self, index, value)

    def updated(self, index: int, func: Callable[[T], T]) -> "Update[T]":
        from .ops.assign import Update

        return Update(self, index, func)

    def noop(self) -> "Noop[T]":
        from .ops.noop import Noop

        return Noop(self)


class ScopedVec(ScopedSequence[T]):
    """A plain ``list`` exposed as the root of a chain of scoped operations.

    Parameters
    ----------
    items : list, optional
        Backing list, wrapped without copying. A fresh list is used when
        omitted.
    config : ScopedOpsConfig, optional
        Settings inherited by every handle on this sequence.
    events : EventLogger, optional
        Telemetry sink; built from ``config`` when omitted.

    Examples
    --------
    >>> a = ScopedVec([1])
    >>> with a.pushed(2) as b:
    ...     b.to_list()
    [1, 2]
    >>> a.to_list()
    [1]
    """

    def __init__(
        self,
        items: Optional[List[T]] = None,
        *,
        config: Optional[ScopedOpsConfig] = None,
        events: Optional[EventLogger] = None,
    ) -> None:
        super().__init__()
        if items is None:
            items = []
        if not isinstance(items, list):
            raise TypeError(f"ScopedVec wraps a list, got {type(items).__name__}")
        if id(items) in _WRAPPERS:
            raise BorrowError("list is already wrapped; use as_scoped() to reach its wrapper")
        self._items = items
        self._config = config or default_config()
        self.events = events or EventLogger(
            self._config.event_log, max_events=self._config.max_events
        )
        _WRAPPERS[id(items)] = self

    @property
    def root(self) -> "ScopedVec[T]":
        return self

    @property
    def depth(self) -> int:
        return 0

    def log_status(self) -> dict:
        """Return a copy of apply/undo counters."""
        return self.events.status()

    def __repr__(self) -> str:
        return f"ScopedVec({self._items!r})"


def as_scoped(target: Union[ScopedSequence[T], List[T]]) -> ScopedSequence[T]:
    """Return ``target`` as a capability, reusing any live wrapper of a list."""

    if isinstance(target, ScopedSequence):
        return target
    if isinstance(target, list):
        existing = _WRAPPERS.get(id(target))
        if existing is not None and existing._items is target:
            return existing
        logger.debug("wrapping list of length %d", len(target))
        return ScopedVec(target)
    raise TypeError(f"expected a list or ScopedSequence, got {type(target).__name__}")


__all__ = ["ScopedSequence", "ScopedVec", "as_scoped"]
