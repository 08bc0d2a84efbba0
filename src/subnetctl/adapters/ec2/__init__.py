"""Public interface for the EC2 subnet adapter."""

from __future__ import annotations

from .client import NOT_FOUND_ERROR_CODE, Ec2SubnetProvider, build_ec2_client
from .schema import CreateSubnetResponse, SubnetPayload

__all__ = [
    "NOT_FOUND_ERROR_CODE",
    "CreateSubnetResponse",
    "Ec2SubnetProvider",
    "SubnetPayload",
    "build_ec2_client",
]
