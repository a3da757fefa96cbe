"""Uniqueness rule — the only rule that talks to the Data Store.

The store is always passed in by the caller. Nothing here keeps a reference
to it after the call returns, and store errors (StoreUnavailableError,
QueryError) propagate unchanged: there is no retry and no fallback verdict.
"""

import re
from dataclasses import dataclass

from app.rules.errors import InvalidInputError
from app.services.data_store import DataStore

# Table/column names are interpolated into SQL, so they must be plain
# identifiers. An optional "schema." prefix is allowed for tables.
TABLE_PATTERN = re.compile(r"(?:[A-Za-z_][A-Za-z0-9_]*\.)?[A-Za-z_][A-Za-z0-9_]*")
COLUMN_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")

UNIQUE_QUERY = "SELECT 1 FROM {table} WHERE {column} = :value"


@dataclass(frozen=True)
class UniqueConstraint:
    """Requirement for the registry's checkUnique rule.

    Attributes:
        data_store: Object exposing query(sql_template, parameters) -> ResultSet.
        table: Table to search. Trusted caller input, never user data.
        column: Column compared against the value. Same trust rules as table.
    """

    data_store: DataStore
    table: str
    column: str


def check_unique(data_store: DataStore, table: str, column: str, value) -> bool:
    """checkUnique — true when no row in `table` has `column` equal to value.

    The value is sent as a bound parameter. Raises InvalidInputError if table
    or column is not a plain SQL identifier.
    """
    if not isinstance(table, str) or not TABLE_PATTERN.fullmatch(table):
        raise InvalidInputError(f"checkUnique: invalid table name {table!r}.")
    if not isinstance(column, str) or not COLUMN_PATTERN.fullmatch(column):
        raise InvalidInputError(f"checkUnique: invalid column name {column!r}.")

    sql = UNIQUE_QUERY.format(table=table, column=column)
    result = data_store.query(sql, {"value": value})
    return result.count() == 0


def unique_rule(field: str, value, requirement=None) -> bool:
    """Registry form of checkUnique; `requirement` must be a UniqueConstraint."""
    if not isinstance(requirement, UniqueConstraint):
        raise InvalidInputError(
            "checkUnique expects a UniqueConstraint requirement "
            f"(data store, table, column), got {type(requirement).__name__}."
        )
    return check_unique(requirement.data_store, requirement.table, requirement.column, value)
