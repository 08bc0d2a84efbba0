"""Reconciliation decisions.

The decision functions are pure: they only compare the desired spec with the
last-applied state and never touch the provider or the state store.
"""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from subnetctl.domain.subnet import SubnetSpec, SubnetState


class ReconcileDecision(StrEnum):
    """Action required to converge the live subnet onto the desired spec."""

    NOOP = "noop"
    CREATE = "create"
    REPLACE = "replace"
    DELETE = "delete"


def decide(desired: SubnetSpec, prior: SubnetState) -> ReconcileDecision:
    """Return the action that moves ``prior`` to ``desired``.

    Subnet placement cannot be updated in place, so a mismatch in any
    identifying field forces a replacement.
    """

    if not prior.is_provisioned:
        return ReconcileDecision.CREATE
    if prior.matches(desired):
        return ReconcileDecision.NOOP
    return ReconcileDecision.REPLACE


def decide_removal(prior: SubnetState) -> ReconcileDecision:
    if not prior.is_provisioned:
        return ReconcileDecision.NOOP
    return ReconcileDecision.DELETE
