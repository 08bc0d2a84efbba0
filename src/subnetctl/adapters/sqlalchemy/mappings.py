"""SQLAlchemy table metadata for persisted subnet state."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from sqlalchemy import Column, DateTime, Dialect, MetaData, String, Table, TypeDecorator

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

metadata = MetaData(
    naming_convention={
        "ix": "ix_%(column_0_label)s",
        "uq": "uq_%(table_name)s_%(column_0_label)s",
        "ck": "ck_%(table_name)s_%(constraint_name)s",
        "pk": "pk_%(table_name)s",
    }
)


class UTCDateTime(TypeDecorator[datetime]):
    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: datetime | None, dialect: Dialect) -> datetime | None:
        _ = dialect
        if value is None:
            return None
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        return value.astimezone(UTC)

    def process_result_value(self, value: datetime | None, dialect: Dialect) -> datetime | None:
        _ = dialect
        if value is None:
            return None
        return value if value.tzinfo else value.replace(tzinfo=UTC)


subnet_state_table = Table(
    "subnet_state",
    metadata,
    Column("name", String, primary_key=True),
    Column("subnet_id", String, nullable=True),
    Column("vpc_id", String, nullable=True),
    Column("availability_zone", String, nullable=True),
    Column("cidr_block", String, nullable=True),
    Column("updated_at", UTCDateTime, nullable=False),
)


def create_all_tables(engine: Engine) -> None:
    """Create the state tables if they do not exist yet."""

    metadata.create_all(engine, checkfirst=True)
