"""Validation service — wires the uniqueness rule to the configured database.

The rule modules never know where the database lives. This service owns
the application's default Data Store, built from Settings.database_url, and
hands it to check_unique on each call. Callers with their own store, such
as tests, pass it explicitly.

The store is cached per database URL, so after reset_settings_cache() picks
up a new DATABASE_URL the next call builds a store for the new database.
"""

from functools import lru_cache
from typing import Any, Optional

from app.config import get_settings
from app.rules.unique_rules import UniqueConstraint, check_unique
from app.services.data_store import DataStore, SQLAlchemyDataStore, create_data_store


@lru_cache(maxsize=1)
def _store_for_url(database_url: str) -> SQLAlchemyDataStore:
    return create_data_store(database_url)


def get_data_store() -> SQLAlchemyDataStore:
    """Return the application-wide store for the current Settings.database_url."""
    return _store_for_url(get_settings().database_url)


def reset_data_store_cache() -> None:
    """Drop the cached store so the next get_data_store() builds a new engine."""
    _store_for_url.cache_clear()


def unique_constraint(table: str, column: str, data_store: Optional[DataStore] = None) -> UniqueConstraint:
    """Build the requirement for evaluate("checkUnique", ...)."""
    if data_store is None:
        data_store = get_data_store()
    return UniqueConstraint(data_store, table, column)


def is_unique(table: str, column: str, value: Any, data_store: Optional[DataStore] = None) -> bool:
    """True when no row of `table` has `column` equal to value.

    Store failures propagate as StoreUnavailableError / QueryError.
    """
    if data_store is None:
        data_store = get_data_store()
    return check_unique(data_store, table, column, value)
