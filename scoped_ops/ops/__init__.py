# Copyright (c) 2025 Arne Deutsch, itemis AG, MIT License
"""Scoped operation handles."""

from .assign import Assign, Update
from .base import ScopedOp
from .noop import Noop
from .pop import Pop
from .push import Push

__all__ = ["ScopedOp", "Push", "Pop", "Assign", "Update", "Noop"]
