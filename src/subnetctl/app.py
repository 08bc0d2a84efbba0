"""Application orchestration entry points."""

from __future__ import annotations

from collections.abc import Callable
from logging import getLogger
from typing import TYPE_CHECKING

from subnetctl.adapters.ec2 import Ec2SubnetProvider
from subnetctl.adapters.sqlalchemy.unit_of_work import SqlAlchemyStateStore, is_started, startup
from subnetctl.domain.ports.state import StateStore
from subnetctl.domain.reconciliation import (
    DeployContext,
    DeployResult,
    ReconcileDecision,
    decide,
    decide_removal,
    deploy,
    remove,
)

if TYPE_CHECKING:
    from subnetctl.domain.ports.provider import SubnetProvider
    from subnetctl.domain.subnet import SubnetSpec, SubnetState

StateStoreFactory = Callable[[], StateStore]

DEFAULT_STATE_NAME = "default"

log = getLogger(__name__)


def _default_state_store() -> StateStore:
    if not is_started():
        startup()
    return SqlAlchemyStateStore()


def _build_context(store: StateStore, name: str) -> DeployContext:
    state = store.load(name)

    def save_state(new_state: SubnetState) -> None:
        store.save(name, new_state)

    return DeployContext(state=state, save_state=save_state, log=log.info)


def deploy_subnet(
    spec: SubnetSpec,
    *,
    name: str = DEFAULT_STATE_NAME,
    provider: SubnetProvider | None = None,
    store_factory: StateStoreFactory | None = None,
) -> DeployResult:
    """Converge the subnet recorded under ``name`` onto ``spec``."""

    store = (store_factory or _default_state_store)()
    effective_provider = provider or Ec2SubnetProvider()
    log.info(
        "Deploying subnet %s: vpc=%s, az=%s, cidr=%s",
        name,
        spec.vpc_id,
        spec.availability_zone,
        spec.cidr_block,
    )

    result = deploy(spec, _build_context(store, name), provider=effective_provider)

    log.info(f"Finished deploy of {name}: subnet_id={result.subnet_id}, action={result.decision}")
    return result


def remove_subnet(
    *,
    name: str = DEFAULT_STATE_NAME,
    provider: SubnetProvider | None = None,
    store_factory: StateStoreFactory | None = None,
) -> ReconcileDecision:
    """Delete the subnet recorded under ``name`` and clear its state."""

    store = (store_factory or _default_state_store)()
    effective_provider = provider or Ec2SubnetProvider()
    log.info("Removing subnet %s", name)

    decision = remove(None, _build_context(store, name), provider=effective_provider)

    log.info(f"Finished removal of {name}: action={decision}")
    return decision


def plan_subnet(
    spec: SubnetSpec | None,
    *,
    name: str = DEFAULT_STATE_NAME,
    store_factory: StateStoreFactory | None = None,
) -> ReconcileDecision:
    """Return the action a deploy (or, without ``spec``, a removal) would take."""

    store = (store_factory or _default_state_store)()
    prior = store.load(name)
    if spec is None:
        return decide_removal(prior)
    return decide(spec, prior)
