"""boto3-backed subnet provider for Amazon EC2."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING, Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from pydantic import ValidationError

from subnetctl.config.aws import AwsConfig, get_aws_config
from subnetctl.domain.errors import ProviderError
from subnetctl.domain.ports.provider import DeleteOutcome, SubnetProvider

from .schema import CreateSubnetResponse

if TYPE_CHECKING:
    from collections.abc import Callable

log = getLogger(__name__)

NOT_FOUND_ERROR_CODE = "InvalidSubnetID.NotFound"
MALFORMED_RESPONSE_CODE = "MalformedResponse"


def build_ec2_client(config: AwsConfig) -> Any:
    """Return an EC2 client for ``config`` using the default credential chain."""

    session = boto3.Session(profile_name=config.profile, region_name=config.region)
    return session.client("ec2", region_name=config.region, endpoint_url=config.endpoint_url)


def _error_code(exc: ClientError) -> str | None:
    return exc.response.get("Error", {}).get("Code") or None


def _error_message(exc: ClientError) -> str:
    return exc.response.get("Error", {}).get("Message") or str(exc)


def _provider_error(exc: ClientError | BotoCoreError, *, operation: str) -> ProviderError:
    if isinstance(exc, ClientError):
        return ProviderError(_error_message(exc), code=_error_code(exc), operation=operation)
    return ProviderError(str(exc), operation=operation)


@dataclass(slots=True)
class Ec2SubnetProvider:
    """Create and delete VPC subnets through the EC2 API.

    The client is built lazily so constructing the provider never touches the
    network or the credential chain.
    """

    config: AwsConfig = field(default_factory=get_aws_config)
    client_factory: Callable[[AwsConfig], Any] = field(default=build_ec2_client)
    _client: Any = field(default=None, init=False, repr=False)

    @property
    def client(self) -> Any:
        if self._client is None:
            self._client = self.client_factory(self.config)
        return self._client

    def create_subnet(
        self,
        *,
        vpc_id: str,
        availability_zone: str,
        cidr_block: str | None = None,
    ) -> str:
        params: dict[str, str] = {"VpcId": vpc_id, "AvailabilityZone": availability_zone}
        if cidr_block is not None:
            params["CidrBlock"] = cidr_block

        try:
            payload = self.client.create_subnet(**params)
        except (ClientError, BotoCoreError) as exc:
            log.error(f"CreateSubnet failed for {vpc_id} in {availability_zone}: {exc}")
            raise _provider_error(exc, operation="CreateSubnet") from exc

        try:
            response = CreateSubnetResponse.model_validate(payload)
        except ValidationError as exc:
            raise ProviderError(
                "Unexpected CreateSubnet response payload",
                code=MALFORMED_RESPONSE_CODE,
                operation="CreateSubnet",
            ) from exc

        log.debug(
            "CreateSubnet returned %s (state=%s)",
            response.subnet.subnet_id,
            response.subnet.state,
        )
        return response.subnet.subnet_id

    def delete_subnet(self, subnet_id: str) -> DeleteOutcome:
        try:
            self.client.delete_subnet(SubnetId=subnet_id)
        except ClientError as exc:
            if _error_code(exc) == NOT_FOUND_ERROR_CODE:
                log.info("Subnet %s does not exist on the provider", subnet_id)
                return DeleteOutcome.NOT_FOUND
            log.error(f"DeleteSubnet failed for {subnet_id}: {exc}")
            raise _provider_error(exc, operation="DeleteSubnet") from exc
        except BotoCoreError as exc:
            log.error(f"DeleteSubnet failed for {subnet_id}: {exc}")
            raise _provider_error(exc, operation="DeleteSubnet") from exc
        return DeleteOutcome.DELETED


if TYPE_CHECKING:
    _provider_check: SubnetProvider = Ec2SubnetProvider()
