from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest
from sqlalchemy import create_engine

from subnetctl.adapters.sqlalchemy.unit_of_work import SqlAlchemyStateStore, shutdown, startup

os.environ.setdefault("STATE_DATABASE_URI", "sqlite+pysqlite:///:memory:")

if TYPE_CHECKING:
    from collections.abc import Iterator

    from sqlalchemy.engine import Engine


@pytest.fixture
def sqlite_engine() -> Iterator[Engine]:
    engine = create_engine("sqlite+pysqlite:///:memory:", future=True)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def state_store(sqlite_engine: Engine) -> Iterator[SqlAlchemyStateStore]:
    startup(engine=sqlite_engine, force=True)
    try:
        yield SqlAlchemyStateStore()
    finally:
        shutdown()
