"""Apply reconciliation decisions against the subnet provider.

Responsibilities of this stage:
- run at most one delete and one create per invocation, strictly in order
- commit state through the context after each successful mutation
- let provider failures propagate untouched, without committing state

There is no retry and no compensating rollback. A failed create after a
successful delete leaves the state reading "deleted, not yet recreated".
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from subnetctl.domain.ports.provider import DeleteOutcome
from subnetctl.domain.subnet import SubnetState

from .plan import ReconcileDecision, decide, decide_removal

if TYPE_CHECKING:
    from subnetctl.domain.ports.provider import SubnetProvider
    from subnetctl.domain.subnet import SubnetSpec

    from .context import DeployContext


@dataclass(frozen=True, slots=True)
class DeployResult:
    """Identifier of the converged subnet and how it was reached."""

    subnet_id: str
    decision: ReconcileDecision

    def as_outputs(self) -> dict[str, str]:
        return {"subnetId": self.subnet_id}


def deploy(
    inputs: SubnetSpec,
    context: DeployContext,
    *,
    provider: SubnetProvider,
) -> DeployResult:
    """Converge the subnet described by ``context.state`` onto ``inputs``."""

    prior = context.state
    decision = decide(inputs, prior)

    # only CREATE is decided without a recorded subnet
    if prior.subnet_id is not None:
        if decision is ReconcileDecision.NOOP:
            context.log(f"Subnet {prior.subnet_id} is up to date")
            return DeployResult(subnet_id=prior.subnet_id, decision=decision)

        context.log(
            f"Subnet {prior.subnet_id} placement changed "
            f"({_describe(prior.identity)} -> {_describe(inputs.identity)}), replacing"
        )
        _delete(prior.subnet_id, context, provider=provider)
        context.save_state(prior.without_subnet())

    subnet_id = _create(inputs, context, provider=provider)
    context.save_state(SubnetState.from_spec(subnet_id, inputs))
    return DeployResult(subnet_id=subnet_id, decision=decision)


def remove(
    inputs: SubnetSpec | None,
    context: DeployContext,
    *,
    provider: SubnetProvider,
) -> ReconcileDecision:
    """Delete the subnet recorded in ``context.state``, if there is one.

    ``inputs`` is not consulted; removal is driven by the recorded state only.
    """

    _ = inputs
    prior = context.state
    decision = decide_removal(prior)
    if prior.subnet_id is None:
        context.log("No subnet recorded, nothing to remove")
        return decision

    _delete(prior.subnet_id, context, provider=provider)
    context.save_state(SubnetState())
    return decision


def _create(inputs: SubnetSpec, context: DeployContext, *, provider: SubnetProvider) -> str:
    context.log(f"Creating subnet {_describe(inputs.identity)}")
    subnet_id = provider.create_subnet(
        vpc_id=inputs.vpc_id,
        availability_zone=inputs.availability_zone,
        cidr_block=inputs.cidr_block,
    )
    context.log(f"Subnet {subnet_id} created")
    return subnet_id


def _delete(subnet_id: str, context: DeployContext, *, provider: SubnetProvider) -> None:
    context.log(f"Deleting subnet {subnet_id}")
    outcome = provider.delete_subnet(subnet_id)
    if outcome is DeleteOutcome.NOT_FOUND:
        context.log(f"Subnet {subnet_id} was already absent")
    else:
        context.log(f"Subnet {subnet_id} deleted")


def _describe(identity: tuple[str | None, ...]) -> str:
    return "/".join(value for value in identity if value)
