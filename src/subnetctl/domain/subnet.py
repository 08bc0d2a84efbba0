"""Desired configuration and last-applied state for a VPC subnet.

``SubnetSpec`` is what the caller asks for on every invocation.
``SubnetState`` is what the state store remembers between invocations: the
identifier of the live subnet plus the configuration it was created with.
Both are immutable; a new state value is built for every commit.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Final

_SUBNET_ID_KEY: Final[str] = "subnetId"
_VPC_ID_KEY: Final[str] = "vpcId"
_AVAILABILITY_ZONE_KEY: Final[str] = "availabilityZone"
_CIDR_BLOCK_KEY: Final[str] = "cidrBlock"


@dataclass(frozen=True, slots=True, kw_only=True)
class SubnetSpec:
    """Desired subnet placement.

    Every field is immutable on the provider side, so any change to one of
    them means the subnet has to be replaced.
    """

    vpc_id: str
    availability_zone: str
    cidr_block: str | None = None

    @property
    def identity(self) -> tuple[str | None, str | None, str | None]:
        return (self.vpc_id, self.availability_zone, self.cidr_block)


@dataclass(frozen=True, slots=True, kw_only=True)
class SubnetState:
    """Persisted record of the last successfully applied subnet."""

    subnet_id: str | None = None
    vpc_id: str | None = None
    availability_zone: str | None = None
    cidr_block: str | None = None

    @classmethod
    def from_spec(cls, subnet_id: str, spec: SubnetSpec) -> SubnetState:
        return cls(
            subnet_id=subnet_id,
            vpc_id=spec.vpc_id,
            availability_zone=spec.availability_zone,
            cidr_block=spec.cidr_block,
        )

    @property
    def is_provisioned(self) -> bool:
        return self.subnet_id is not None

    @property
    def is_empty(self) -> bool:
        return self == SubnetState()

    @property
    def identity(self) -> tuple[str | None, str | None, str | None]:
        return (self.vpc_id, self.availability_zone, self.cidr_block)

    def matches(self, spec: SubnetSpec) -> bool:
        """Return whether the live subnet was created with exactly ``spec``."""

        return self.identity == spec.identity

    def without_subnet(self) -> SubnetState:
        return replace(self, subnet_id=None)

    def to_mapping(self) -> dict[str, str]:
        values = {
            _SUBNET_ID_KEY: self.subnet_id,
            _VPC_ID_KEY: self.vpc_id,
            _AVAILABILITY_ZONE_KEY: self.availability_zone,
            _CIDR_BLOCK_KEY: self.cidr_block,
        }
        return {key: value for key, value in values.items() if value is not None}
