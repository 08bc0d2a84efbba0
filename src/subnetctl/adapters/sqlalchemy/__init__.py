"""SQLAlchemy adapter package for subnetctl state."""

from __future__ import annotations

from .mappings import create_all_tables, metadata, subnet_state_table
from .repositories import SqlAlchemySubnetStateRepository
from .unit_of_work import (
    SqlAlchemyStateStore,
    SqlAlchemyStateUnitOfWork,
    StartupError,
    shutdown,
    startup,
)

__all__ = [
    "SqlAlchemyStateStore",
    "SqlAlchemyStateUnitOfWork",
    "SqlAlchemySubnetStateRepository",
    "StartupError",
    "create_all_tables",
    "metadata",
    "shutdown",
    "startup",
    "subnet_state_table",
]
