# Copyright (c) 2025 Arne Deutsch, itemis AG, MIT License
"""Exclusive-access rules for targets and handles."""

import pytest

from scoped_ops import (
    BorrowError,
    InvariantViolation,
    Push,
    ReleasedHandleError,
    ScopedSequence,
    ScopedVec,
    UnscopedHandleWarning,
    as_scoped,
)


def test_sibling_handles_are_rejected() -> None:
    a = ScopedVec([1])
    with a.pushed(2) as b:
        with pytest.raises(BorrowError):
            a.pushed(3)
        with pytest.raises(BorrowError):
            a.as_slice()
        assert b.as_slice() == [1, 2]
    assert a.to_list() == [1]


def test_view_follows_owner_lifetime() -> None:
    a = ScopedVec([1])
    with a.pushed(2) as b:
        view = b.as_slice()
        with b.pushed(3):
            with pytest.raises(BorrowError):
                len(view)
        assert view == [1, 2]
        assert view[-1] == 2
        assert view[:1] == [1]
    with pytest.raises(ReleasedHandleError):
        list(view)


def test_released_handle_cannot_be_reused() -> None:
    a = ScopedVec([1])
    with a.pushed(2) as b:
        pass
    with pytest.raises(ReleasedHandleError):
        b.pushed(3)
    with pytest.raises(ReleasedHandleError):
        b.finish()
    with pytest.raises(ReleasedHandleError):
        with b:
            pass


def test_outer_release_unwinds_live_inner_handles() -> None:
    a = ScopedVec([1])
    with pytest.warns(UnscopedHandleWarning):
        with a.pushed(2) as b:
            inner = b.pushed(3)
            innermost = inner.popped()
            assert innermost.as_slice() == [1, 2]
    assert inner.released and innermost.released
    assert a.to_list() == [1]
    assert a.log_status()["live"] == 0


def test_list_is_wrapped_once() -> None:
    items = [1]
    a = ScopedVec(items)
    assert as_scoped(items) is a
    with pytest.raises(BorrowError):
        ScopedVec(items)
    with Push(items, 2):
        with pytest.raises(BorrowError):
            Push(items, 3)
    assert items == [1]


def test_as_scoped_rejects_other_containers() -> None:
    with pytest.raises(TypeError):
        as_scoped((1, 2))
    with pytest.raises(TypeError):
        ScopedVec((1, 2))


def test_mutable_access_requires_token() -> None:
    a = ScopedVec([1])
    with pytest.raises(BorrowError):
        a._vec_mut(object())


def test_capability_is_sealed() -> None:
    with pytest.raises(TypeError, match="outside scoped_ops"):

        class Rogue(ScopedSequence):
            pass

    with pytest.raises(TypeError):

        class RoguePush(Push):
            pass


def test_depth_and_root() -> None:
    a = ScopedVec([])
    with a.pushed(1) as b, b.noop() as c:
        assert (a.depth, b.depth, c.depth) == (0, 1, 2)
        assert c.root is a


def test_nested_violation_still_releases_outer() -> None:
    """A failing inner undo does not leave the outer handle holding the root."""

    items = [1]
    a = ScopedVec(items)
    with pytest.warns(UnscopedHandleWarning):
        with pytest.raises(InvariantViolation):
            with a.pushed(2) as b:
                inner = b.pushed(3)
                items.pop()
    assert b.released and inner.released
    assert items == [1]
    assert a.to_list() == [1]
    status = a.log_status()
    assert status["violations"] == 1
    assert status["undone"] == 1
    assert status["live"] == 0
