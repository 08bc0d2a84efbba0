"""AWS connection settings for the EC2 provider."""

from __future__ import annotations

from dataclasses import dataclass

from .env import first_env_var, optional_env_var

REGION_ENV_VARS = ("AWS_REGION", "AWS_DEFAULT_REGION")
ENDPOINT_URL_ENV_VAR = "SUBNETCTL_AWS_ENDPOINT_URL"
PROFILE_ENV_VAR = "AWS_PROFILE"


@dataclass(frozen=True, slots=True)
class AwsConfig:
    """Region and optional endpoint/profile used to build the EC2 client.

    Credentials are left to the boto3 default chain.
    """

    region: str
    endpoint_url: str | None = None
    profile: str | None = None


def get_aws_config() -> AwsConfig:
    return AwsConfig(
        region=first_env_var(REGION_ENV_VARS),
        endpoint_url=optional_env_var(ENDPOINT_URL_ENV_VAR),
        profile=optional_env_var(PROFILE_ENV_VAR),
    )
