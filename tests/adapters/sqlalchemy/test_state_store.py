from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from sqlalchemy import create_engine, select

from subnetctl.adapters.sqlalchemy import (
    SqlAlchemyStateStore,
    SqlAlchemyStateUnitOfWork,
    StartupError,
    shutdown,
    startup,
    subnet_state_table,
)
from subnetctl.adapters.sqlalchemy.unit_of_work import configured_engine
from subnetctl.domain.ports.state import StateStore
from subnetctl.domain.subnet import SubnetState

if TYPE_CHECKING:
    from collections.abc import Iterator

    from sqlalchemy.engine import Engine

APPLIED = SubnetState(
    subnet_id="subnet-abbaabba",
    vpc_id="vpc-abbaabba",
    availability_zone="us-east-1a",
)


@pytest.fixture(autouse=True)
def reset_unit_of_work_state() -> Iterator[None]:
    shutdown()
    yield
    shutdown()


def test_unit_of_work_requires_startup() -> None:
    with pytest.raises(StartupError):
        SqlAlchemyStateUnitOfWork()


def test_startup_requires_force_for_reconfiguration() -> None:
    engine_a = create_engine("sqlite+pysqlite:///:memory:", future=True)
    engine_b = create_engine("sqlite+pysqlite:///:memory:", future=True)

    startup(engine=engine_a, force=True)

    with pytest.raises(StartupError):
        startup(engine=engine_b)

    startup(engine=engine_b, force=True)
    assert configured_engine() is engine_b


def test_store_satisfies_port(state_store: SqlAlchemyStateStore) -> None:
    assert isinstance(state_store, StateStore)


def test_load_unknown_name_returns_empty_state(state_store: SqlAlchemyStateStore) -> None:
    assert state_store.load("default") == SubnetState()


def test_save_then_load_round_trips_state(state_store: SqlAlchemyStateStore) -> None:
    state_store.save("default", APPLIED)

    assert state_store.load("default") == APPLIED
    assert state_store.load("other") == SubnetState()


def test_save_overwrites_existing_record(state_store: SqlAlchemyStateStore) -> None:
    state_store.save("default", APPLIED)
    state_store.save("default", APPLIED.without_subnet())

    assert state_store.load("default") == APPLIED.without_subnet()


def test_saving_empty_state_deletes_record(
    state_store: SqlAlchemyStateStore, sqlite_engine: Engine
) -> None:
    state_store.save("default", APPLIED)
    state_store.save("default", SubnetState())

    with sqlite_engine.connect() as connection:
        rows = connection.execute(select(subnet_state_table.c.name)).all()
    assert rows == []
    assert state_store.load("default") == SubnetState()


def test_unit_of_work_rolls_back_on_error(state_store: SqlAlchemyStateStore) -> None:
    with pytest.raises(RuntimeError), SqlAlchemyStateUnitOfWork() as uow:
        uow.states.put("default", APPLIED)
        raise RuntimeError("boom")

    assert state_store.load("default") == SubnetState()
