"""SQLAlchemy-backed unit of work and state store for subnet state."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING, Literal

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from subnetctl.adapters.sqlalchemy.mappings import create_all_tables
from subnetctl.adapters.sqlalchemy.repositories import SqlAlchemySubnetStateRepository
from subnetctl.config.storage import get_storage_config
from subnetctl.domain.ports.state import StateStore
from subnetctl.domain.subnet import SubnetState

if TYPE_CHECKING:
    from types import TracebackType

    from sqlalchemy.engine import Engine

log = getLogger(__name__)


class StartupError(RuntimeError):
    """Raised when a SQLAlchemy unit of work is used before initialisation."""


@dataclass(slots=True)
class _AdapterState:
    _engine: Engine | None = None
    _session_factory: sessionmaker[Session] | None = None

    @property
    def engine(self) -> Engine | None:
        return self._engine

    @engine.setter
    def engine(self, value: Engine | None) -> None:
        self._session_factory = None
        self._engine = value

    @property
    def session_factory(self) -> sessionmaker[Session]:
        if self._engine is None:
            raise StartupError(
                "SQLAlchemy adapter not initialised. Call subnetctl.adapters.sqlalchemy."
                "unit_of_work.startup() before requesting a unit of work."
            )
        if self._session_factory is None:
            self._session_factory = sessionmaker(bind=self._engine, expire_on_commit=False)
        return self._session_factory


_STATE = _AdapterState()


def startup(
    *,
    engine: Engine | None = None,
    database_uri: str | None = None,
    force: bool = False,
) -> None:
    """Initialise the SQLAlchemy engine, tables, and session factory."""

    if _STATE.engine is not None and not force:
        raise StartupError(
            "SQLAlchemy adapter already initialised. Pass force=True to reconfigure."
        )

    resolved_engine = engine or create_engine(
        database_uri or get_storage_config().state_database_uri(), future=True
    )
    create_all_tables(resolved_engine)
    log.debug("State database ready at %s", resolved_engine.url)
    _STATE.engine = resolved_engine


def configured_engine() -> Engine | None:
    """Return the engine currently managed by the adapter (if any)."""

    return _STATE.engine


def is_started() -> bool:
    """Return whether the adapter has been initialised."""

    return _STATE.engine is not None


def shutdown() -> None:
    """Dispose the managed engine and reset state (primarily for tests)."""

    if _STATE.engine is not None:
        _STATE.engine.dispose()
    _STATE.engine = None


class SqlAlchemyStateUnitOfWork:
    """Unit of work managing one SQLAlchemy session for subnet state."""

    def __init__(self) -> None:
        self.session_factory: sessionmaker[Session] = _STATE.session_factory
        self._session: Session | None = None
        self._repository: SqlAlchemySubnetStateRepository | None = None

    def __enter__(self) -> SqlAlchemyStateUnitOfWork:
        self.session = self.session_factory()
        self._repository = SqlAlchemySubnetStateRepository(self.session)
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> Literal[False]:
        if exc_type is not None:
            self.rollback()
        self.session.close()
        self.session = None
        self._repository = None
        return False

    def commit(self) -> None:
        self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()

    @property
    def states(self) -> SqlAlchemySubnetStateRepository:
        if self._repository is None:
            raise StartupError("Unit of work session not initialised")
        return self._repository

    @property
    def session(self) -> Session:
        if self._session is None:
            raise StartupError("Unit of work session not initialised")
        return self._session

    @session.setter
    def session(self, session: Session | None) -> None:
        if self._session is not None and session is not None:
            raise StartupError("Unit of work session already initialised")
        self._session = session


UnitOfWorkFactory = Callable[[], SqlAlchemyStateUnitOfWork]


@dataclass(slots=True)
class SqlAlchemyStateStore:
    """State store that commits every save in its own transaction.

    Saving the empty state removes the record for ``name`` altogether.
    """

    unit_of_work_factory: UnitOfWorkFactory = field(default=SqlAlchemyStateUnitOfWork)

    def load(self, name: str) -> SubnetState:
        with self.unit_of_work_factory() as uow:
            state = uow.states.get(name)
        return state or SubnetState()

    def save(self, name: str, state: SubnetState) -> None:
        with self.unit_of_work_factory() as uow:
            if state.is_empty:
                uow.states.delete(name)
            else:
                uow.states.put(name, state)
            uow.commit()
        log.debug("Saved state for %s: %s", name, state.to_mapping())


if TYPE_CHECKING:
    _store_check: StateStore = SqlAlchemyStateStore()
