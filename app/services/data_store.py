"""Data Store collaborator used by the uniqueness rule.

Rules only depend on the DataStore protocol: query(sql_template, parameters)
returning something with count(). SQLAlchemyDataStore is the concrete
adapter for real databases; tests can pass any object with the same shape.

SQLAlchemy Core is used directly (no ORM session): each query opens a
connection from the engine's pool, reads the rows and gives the connection
back before returning.
"""

import logging
from collections.abc import Mapping, Sequence
from typing import Any, Protocol, runtime_checkable

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from app.rules.errors import QueryError, StoreUnavailableError

logger = logging.getLogger(__name__)


@runtime_checkable
class ResultSet(Protocol):
    def count(self) -> int: ...


@runtime_checkable
class DataStore(Protocol):
    def query(self, sql_template: str, parameters: Mapping[str, Any]) -> ResultSet: ...


class RowResultSet:
    """Rows fetched by SQLAlchemyDataStore, already detached from the connection."""

    def __init__(self, rows: Sequence[Any]):
        self._rows = list(rows)

    def count(self) -> int:
        return len(self._rows)

    def __iter__(self):
        return iter(self._rows)


class SQLAlchemyDataStore:
    """DataStore backed by an SQLAlchemy Engine.

    Connection failures raise StoreUnavailableError; failures while running
    the statement raise QueryError. The original SQLAlchemy exception is
    chained in both cases. Nothing is retried.
    """

    def __init__(self, engine: Engine):
        self.engine = engine

    def query(self, sql_template: str, parameters: Mapping[str, Any]) -> RowResultSet:
        try:
            conn = self.engine.connect()
        except SQLAlchemyError as exc:
            logger.warning("Data store unavailable: %s", exc)
            raise StoreUnavailableError("Could not connect to the data store.") from exc

        with conn:
            try:
                rows = conn.execute(text(sql_template), dict(parameters)).fetchall()
            except SQLAlchemyError as exc:
                logger.warning("Data store query failed: %s", exc)
                raise QueryError("Data store query failed.") from exc

        return RowResultSet(rows)


def create_data_store(database_url: str) -> SQLAlchemyDataStore:
    """Build a SQLAlchemyDataStore for the given database URL."""
    engine = create_engine(database_url, pool_pre_ping=True)
    return SQLAlchemyDataStore(engine)
