# Copyright (c) 2025 Arne Deutsch, itemis AG, MIT License
from __future__ import annotations

import json
import time
from collections import deque
from typing import Any, Deque, Dict, List, Optional

_COUNTER_FOR = {"apply": "applied", "undo": "undone", "violation": "violations"}


class EventLogger:
    """Track apply/undo events and usage counters."""

    def __init__(self, log_file: Optional[str] = None, max_events: int = 256) -> None:
        self.counters: Dict[str, int] = {
            "applied": 0,
            "undone": 0,
            "violations": 0,
        }
        self._events: Deque[dict[str, Any]] = deque(maxlen=max_events)
        self._log_file = log_file

    def increment(self, key: str, value: int = 1) -> None:
        self.counters[key] = self.counters.get(key, 0) + value

    def log_event(self, op: str, info: dict[str, Any]) -> None:
        event = {"ts": time.time(), "op": op, **info}
        self._events.append(event)
        if self._log_file:
            with open(self._log_file, "a", encoding="utf-8") as fh:
                json.dump(event, fh)
                fh.write("\n")
                fh.flush()

    def record(self, op: str, kind: str, depth: int) -> None:
        """Count ``op`` for handle ``kind`` and log it."""
        self.increment(_COUNTER_FOR.get(op, op))
        self.increment(f"{kind}.{op}")
        self.log_event(op, {"kind": kind, "depth": depth})

    def events(self) -> List[dict[str, Any]]:
        return list(self._events)

    def status(self) -> dict[str, Any]:
        log = dict(self.counters)
        # a handle ends either undone or with a violation
        log["live"] = log["applied"] - log["undone"] - log["violations"]
        return log


__all__ = ["EventLogger"]
