# Copyright (c) 2025 Arne Deutsch, itemis AG, MIT License
from __future__ import annotations

import json

import pytest

from scoped_ops import EventLogger, InvariantViolation, ScopedOpsConfig, ScopedVec


def test_log_event_writes_jsonl(tmp_path) -> None:
    """Apply and undo events are written as JSON lines."""

    log_file = tmp_path / "events.jsonl"
    seq = ScopedVec([1], config=ScopedOpsConfig(event_log=str(log_file)))
    with seq.pushed(2) as b:
        with b.assigned(0, 5):
            pass

    lines = log_file.read_text(encoding="utf-8").splitlines()
    events = [json.loads(line) for line in lines]
    assert [(e["op"], e["kind"], e["depth"]) for e in events] == [
        ("apply", "push", 1),
        ("apply", "assign", 2),
        ("undo", "assign", 2),
        ("undo", "push", 1),
    ]


def test_status_counts_apply_and_undo() -> None:
    seq = ScopedVec([1])
    with seq.pushed(2) as b:
        with b.popped():
            assert seq.log_status()["live"] == 2
    status = seq.log_status()
    assert status["applied"] == 2
    assert status["undone"] == 2
    assert status["push.apply"] == 1
    assert status["pop.undo"] == 1
    assert status["live"] == 0


def test_event_ring_is_bounded() -> None:
    logger = EventLogger(max_events=2)
    for i in range(5):
        logger.log_event("apply", {"i": i})
    assert [e["i"] for e in logger.events()] == [3, 4]
    assert EventLogger(max_events=0).events() == []


def test_violation_ends_a_live_handle() -> None:
    items = [1]
    seq = ScopedVec(items)
    handle = seq.pushed(2)
    items.clear()
    with pytest.raises(InvariantViolation):
        handle.finish()
    status = seq.log_status()
    assert status["violations"] == 1
    assert status["undone"] == 0
    assert status["live"] == 0
