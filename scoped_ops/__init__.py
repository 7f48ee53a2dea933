# Copyright (c) 2025 Arne Deutsch, itemis AG, MIT License
"""Scoped, reversible mutation of lists."""

from .capability import ScopedSequence, ScopedVec, as_scoped
from .config import ScopedOpsConfig, load_config
from .errors import (
    BorrowError,
    IndexOutOfRange,
    InvariantViolation,
    ReleasedHandleError,
    ScopedOpsError,
    UnscopedHandleWarning,
)
from .event_logger import EventLogger
from .ops import Assign, Noop, Pop, Push, ScopedOp, Update
from .view import SequenceView

__all__ = [
    "__version__",
    "ScopedSequence",
    "ScopedVec",
    "as_scoped",
    "ScopedOp",
    "Push",
    "Pop",
    "Assign",
    "Update",
    "Noop",
    "SequenceView",
    "ScopedOpsConfig",
    "load_config",
    "EventLogger",
    "ScopedOpsError",
    "IndexOutOfRange",
    "InvariantViolation",
    "BorrowError",
    "ReleasedHandleError",
    "UnscopedHandleWarning",
]
__version__ = "0.1.0"
