"""Repository implementations backed by SQLAlchemy sessions."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from sqlalchemy import delete, insert, select, update

from subnetctl.adapters.sqlalchemy.mappings import subnet_state_table
from subnetctl.domain.subnet import SubnetState

if TYPE_CHECKING:
    from collections.abc import Callable

    from sqlalchemy.orm import Session


def _utcnow() -> datetime:
    return datetime.now(UTC)


class SqlAlchemySubnetStateRepository:
    """Read and write ``subnet_state`` rows within a caller-owned session."""

    def __init__(self, session: Session, *, clock: Callable[[], datetime] = _utcnow) -> None:
        self.session = session
        self.clock = clock

    def get(self, name: str) -> SubnetState | None:
        stmt = select(
            subnet_state_table.c.subnet_id,
            subnet_state_table.c.vpc_id,
            subnet_state_table.c.availability_zone,
            subnet_state_table.c.cidr_block,
        ).where(subnet_state_table.c.name == name)
        row = self.session.execute(stmt).one_or_none()
        if row is None:
            return None
        return SubnetState(
            subnet_id=row.subnet_id,
            vpc_id=row.vpc_id,
            availability_zone=row.availability_zone,
            cidr_block=row.cidr_block,
        )

    def put(self, name: str, state: SubnetState) -> None:
        values = {
            "subnet_id": state.subnet_id,
            "vpc_id": state.vpc_id,
            "availability_zone": state.availability_zone,
            "cidr_block": state.cidr_block,
            "updated_at": self.clock(),
        }
        exists_stmt = select(subnet_state_table.c.name).where(subnet_state_table.c.name == name)
        if self.session.execute(exists_stmt).scalar_one_or_none() is None:
            self.session.execute(insert(subnet_state_table).values(name=name, **values))
        else:
            self.session.execute(
                update(subnet_state_table).where(subnet_state_table.c.name == name).values(**values)
            )

    def delete(self, name: str) -> None:
        self.session.execute(delete(subnet_state_table).where(subnet_state_table.c.name == name))

