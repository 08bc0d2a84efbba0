"""Execution context handed to a reconciliation run."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from logging import getLogger

from subnetctl.domain.subnet import SubnetState

SaveState = Callable[[SubnetState], None]
LogSink = Callable[[str], None]

logger = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DeployContext:
    """Capabilities supplied by the caller for one invocation.

    ``state`` is a snapshot taken before the run starts. ``save_state`` is
    called once after every successful mutation; ``log`` is advisory.
    """

    state: SubnetState
    save_state: SaveState
    log: LogSink = field(default=logger.info)
