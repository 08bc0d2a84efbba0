"""Port for persisting subnet state between invocations."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from subnetctl.domain.subnet import SubnetState


@runtime_checkable
class StateStore(Protocol):
    """Keyed store of last-applied subnet state.

    ``save`` must be durable when it returns; reconciliation relies on each
    commit surviving a crash of the following step.
    """

    def load(self, name: str) -> SubnetState: ...

    def save(self, name: str, state: SubnetState) -> None: ...
