"""Domain port definitions for adapters."""

from __future__ import annotations

from .provider import DeleteOutcome, SubnetProvider
from .state import StateStore

__all__ = ["DeleteOutcome", "StateStore", "SubnetProvider"]
