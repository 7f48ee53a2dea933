# Copyright (c) 2025 Arne Deutsch, itemis AG, MIT License
"""Read-only live view over a scoped sequence."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Generic, Iterator, List, TypeVar, Union, overload

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .capability import ScopedSequence

T = TypeVar("T")


class SequenceView(Sequence, Generic[T]):
    """Borrowed view of the current state seen through ``owner``.

    No copy is taken: the view reflects the backing list as it is at read
    time. Every read re-checks that ``owner`` is still readable, so a view
    taken from a handle fails loudly once that handle is released or a new
    handle is nested on it.
    """

    __slots__ = ("_owner",)

    def __init__(self, owner: "ScopedSequence[T]") -> None:
        self._owner = owner

    def _items(self) -> List[T]:
        self._owner._ensure_readable()
        return self._owner._items

    def __len__(self) -> int:
        return len(self._items())

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> List[T]: ...

    def __getitem__(self, index: Union[int, slice]) -> Union[T, List[T]]:
        return self._items()[index]

    def __iter__(self) -> Iterator[T]:
        return iter(self._items())

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, SequenceView):
            return self._items() == other._items()
        if isinstance(other, Sequence) and not isinstance(other, (str, bytes)):
            return self._items() == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"SequenceView({self._items()!r})"


__all__ = ["SequenceView"]
