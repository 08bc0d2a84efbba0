"""Environment variable loaders for configuration."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from .errors import MissingConfigurationError

if TYPE_CHECKING:
    from collections.abc import Sequence


def optional_env_var(name: str) -> str | None:
    """Return the stripped value of ``name`` or ``None`` when unset/blank."""

    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip()


def first_env_var(names: Sequence[str]) -> str:
    """Return the first non-blank variable among ``names`` or raise."""

    for name in names:
        value = optional_env_var(name)
        if value is not None:
            return value
    raise MissingConfigurationError(f"Missing configuration for one of: {', '.join(names)}")
