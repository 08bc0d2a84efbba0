"""Reconciliation core for a single subnet.

Layered flow:
1) ``decide`` compares the desired spec with the last-applied state (pure)
2) ``deploy`` / ``remove`` execute the decision against the provider port
3) every successful mutation is committed through ``DeployContext.save_state``
"""

from __future__ import annotations

from .apply import DeployResult, deploy, remove
from .context import DeployContext, LogSink, SaveState
from .plan import ReconcileDecision, decide, decide_removal

__all__ = [
    "DeployContext",
    "DeployResult",
    "LogSink",
    "ReconcileDecision",
    "SaveState",
    "decide",
    "decide_removal",
    "deploy",
    "remove",
]
