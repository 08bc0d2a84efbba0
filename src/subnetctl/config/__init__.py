"""Application configuration helpers."""

from __future__ import annotations

from .aws import AwsConfig, get_aws_config
from .env import first_env_var, optional_env_var
from .errors import ConfigurationError, MissingConfigurationError
from .logging import configure_logging
from .storage import StorageConfig, get_storage_config

__all__ = [
    "AwsConfig",
    "ConfigurationError",
    "MissingConfigurationError",
    "StorageConfig",
    "configure_logging",
    "first_env_var",
    "get_aws_config",
    "get_storage_config",
    "optional_env_var",
]
