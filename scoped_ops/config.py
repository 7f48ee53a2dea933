# Copyright (c) 2025 Arne Deutsch, itemis AG, MIT License
"""Configuration for scoped sequences.

Settings live on the root :class:`~scoped_ops.capability.ScopedVec` and are
shared by every handle nested on it. Overrides use the same ``key=value``
syntax as Hydra command lines, e.g. ``["verify_snapshots=true"]``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import List, Optional

from omegaconf import OmegaConf


def _debug() -> bool:
    """Return True when exhaustive undo verification should run."""
    return os.environ.get("SCOPED_OPS_DEBUG", "").lower() in {"1", "true", "yes"}


@dataclass
class ScopedOpsConfig:
    """Runtime switches for the undo engine.

    Attributes
    ----------
    verify_snapshots : bool
        Copy the sequence before each apply and compare it element-wise after
        undo. ``O(n)`` per handle; length checks run regardless.
    warn_unscoped : bool
        Emit :class:`~scoped_ops.errors.UnscopedHandleWarning` when a handle is
        released without a ``with`` block or ``finish()``.
    event_log : str, optional
        JSONL file receiving apply/undo events.
    max_events : int
        Size of the in-memory event ring; ``0`` keeps no events.
    """

    verify_snapshots: bool = False
    warn_unscoped: bool = True
    event_log: Optional[str] = None
    max_events: int = 256

    def __post_init__(self) -> None:
        if self.max_events < 0:
            raise ValueError("max_events must be non-negative")


def default_config() -> ScopedOpsConfig:
    """Return defaults, honouring ``SCOPED_OPS_DEBUG``."""
    return ScopedOpsConfig(verify_snapshots=_debug())


def load_config(overrides: Optional[List[str]] = None) -> ScopedOpsConfig:
    """Parse ``key=value`` overrides into a :class:`ScopedOpsConfig`."""

    cfg = OmegaConf.structured(default_config())
    cli_cfg = OmegaConf.from_cli(overrides or [])
    merged = OmegaConf.merge(cfg, cli_cfg)
    return OmegaConf.to_object(merged)


__all__ = ["ScopedOpsConfig", "default_config", "load_config"]
