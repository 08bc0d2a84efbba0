"""Port for the subnet resource-lifecycle provider."""

from __future__ import annotations

from enum import StrEnum
from typing import Protocol, runtime_checkable


class DeleteOutcome(StrEnum):
    """Successful results of a delete call.

    ``NOT_FOUND`` is reported as an outcome rather than raised so the caller
    decides explicitly whether an already-absent subnet is acceptable. Every
    other failure is raised as ``ProviderError``.
    """

    DELETED = "deleted"
    NOT_FOUND = "not_found"


@runtime_checkable
class SubnetProvider(Protocol):
    """Create and delete subnets on the provider side."""

    def create_subnet(
        self,
        *,
        vpc_id: str,
        availability_zone: str,
        cidr_block: str | None = None,
    ) -> str:
        """Create a subnet and return its provider-assigned identifier."""
        ...

    def delete_subnet(self, subnet_id: str) -> DeleteOutcome: ...
