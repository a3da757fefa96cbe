"""Unit tests for the SQLAlchemy-backed Data Store adapter."""

import pytest
from sqlalchemy import create_engine, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import StaticPool

from app.rules.errors import DataStoreError, QueryError, StoreUnavailableError
from app.services.data_store import (
    DataStore,
    ResultSet,
    RowResultSet,
    SQLAlchemyDataStore,
    create_data_store,
)


def _memory_engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    with engine.begin() as conn:
        conn.execute(text("CREATE TABLE products (sku TEXT)"))
        conn.execute(text("INSERT INTO products (sku) VALUES ('A-1'), ('A-2'), ('A-2')"))
    return engine


class TestRowResultSet:
    def test_count(self):
        assert RowResultSet([(1,), (2,)]).count() == 2

    def test_empty(self):
        assert RowResultSet([]).count() == 0

    def test_satisfies_protocol(self):
        assert isinstance(RowResultSet([]), ResultSet)


class TestSQLAlchemyDataStore:
    def test_satisfies_protocol(self):
        assert isinstance(SQLAlchemyDataStore(_memory_engine()), DataStore)

    def test_counts_matching_rows(self):
        store = SQLAlchemyDataStore(_memory_engine())
        result = store.query("SELECT 1 FROM products WHERE sku = :value", {"value": "A-2"})
        assert result.count() == 2

    def test_no_matching_rows(self):
        store = SQLAlchemyDataStore(_memory_engine())
        result = store.query("SELECT 1 FROM products WHERE sku = :value", {"value": "Z-9"})
        assert result.count() == 0

    def test_malformed_query_raises_query_error(self):
        store = SQLAlchemyDataStore(_memory_engine())
        with pytest.raises(QueryError) as exc_info:
            store.query("SELEC nonsense", {})
        assert isinstance(exc_info.value.__cause__, SQLAlchemyError)

    def test_unreachable_database_raises_store_unavailable(self, tmp_path):
        missing = tmp_path / "no_such_dir" / "db.sqlite"
        store = create_data_store(f"sqlite:///{missing}")
        with pytest.raises(StoreUnavailableError) as exc_info:
            store.query("SELECT 1", {})
        assert isinstance(exc_info.value.__cause__, SQLAlchemyError)

    def test_errors_share_base_class(self):
        assert issubclass(StoreUnavailableError, DataStoreError)
        assert issubclass(QueryError, DataStoreError)
