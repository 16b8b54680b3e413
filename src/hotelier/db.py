"""
Database connection and query utilities.

Provides a simple interface for executing queries with psycopg,
returning results as dictionaries.

Service operations that touch more than one table wrap their work in
transaction(), which binds a single connection to the current thread or
task so that every query issued inside the block commits or rolls back
together.

For testing, use set_connection_override() to inject a connection
that will be used instead of creating new ones. This enables
transaction rollback between tests.
"""

import logging
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any

import psycopg
from psycopg.rows import dict_row

from hotelier.config import config

logger = logging.getLogger(__name__)

# =============================================================================
# Connection Override (for testing)
# =============================================================================

_connection_override: psycopg.Connection | None = None


def set_connection_override(conn: psycopg.Connection) -> None:
    """
    Set a connection to use instead of creating new ones.

    Used by test fixtures to ensure all database operations run
    within a single transaction that can be rolled back.

    Args:
        conn: The connection to use for all subsequent operations
    """
    global _connection_override
    _connection_override = conn


def clear_connection_override() -> None:
    """Clear the connection override, restoring normal behavior."""
    global _connection_override
    _connection_override = None


# =============================================================================
# Connection Management
# =============================================================================

_active_connection: ContextVar[psycopg.Connection | None] = ContextVar(
    "hotelier_active_connection", default=None
)


@contextmanager
def get_connection():
    """
    Context manager for database connections.

    In normal operation:
        - Opens a new connection
        - Commits on successful exit
        - Rolls back on exception
        - Closes connection when done

    Inside transaction():
        - Returns the transaction's connection
        - Does NOT commit, rollback, or close

    With override set (testing):
        - Returns the override connection
        - Does NOT commit, rollback, or close
        - Caller (test fixture) manages the transaction

    Usage:
        with get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute("SELECT ...")
    """
    if _connection_override is not None:
        yield _connection_override
        return

    active = _active_connection.get()
    if active is not None:
        yield active
        return

    conn = psycopg.connect(config.database_url)
    try:
        yield conn
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


@contextmanager
def transaction():
    """
    Run a block of queries as one atomic unit.

    Every get_connection() call made inside the block, from any repository,
    receives the same connection. The block commits when it exits normally
    and rolls back when it raises. Nested blocks join the outermost one.

    With override set (testing), the block runs inside a savepoint on the
    override connection so a failing operation leaves the test's outer
    transaction usable.

    Usage:
        with transaction():
            cleanings.delete(task)
            rooms.mark_clean(room_number)
    """
    if _connection_override is not None:
        with _connection_override.transaction():
            yield _connection_override
        return

    if _active_connection.get() is not None:
        yield _active_connection.get()
        return

    conn = psycopg.connect(config.database_url)
    token = _active_connection.set(conn)
    try:
        yield conn
        conn.commit()
    except Exception:
        logger.debug("Rolling back transaction", exc_info=True)
        conn.rollback()
        raise
    finally:
        _active_connection.reset(token)
        conn.close()


@contextmanager
def get_cursor():
    """
    Context manager for a cursor with dict rows.

    Convenience wrapper when you just need a cursor.

    Usage:
        with get_cursor() as cur:
            cur.execute("SELECT * FROM rooms")
            rows = cur.fetchall()  # List of dicts
    """
    with get_connection() as conn:
        with conn.cursor(row_factory=dict_row) as cur:
            yield cur


# =============================================================================
# Query Helpers
# =============================================================================


def execute(query: str, params: tuple = None) -> int:
    """
    Execute a query without returning results.

    Use for INSERT, UPDATE, DELETE when you don't need the affected rows.

    Args:
        query: SQL query with %s placeholders
        params: Tuple of parameter values

    Returns:
        Number of rows affected
    """
    with get_cursor() as cur:
        cur.execute(query, params)
        return cur.rowcount


def fetch_one(query: str, params: tuple = None) -> dict[str, Any] | None:
    """
    Execute a query and return a single row as dict.

    Args:
        query: SQL query with %s placeholders
        params: Tuple of parameter values

    Returns:
        Dict of column names to values, or None if no row found
    """
    with get_connection() as conn:
        with conn.cursor(row_factory=dict_row) as cur:
            cur.execute(query, params)
            return cur.fetchone()


def fetch_all(query: str, params: tuple = None) -> list[dict[str, Any]]:
    """
    Execute a query and return all rows as list of dicts.

    Args:
        query: SQL query with %s placeholders
        params: Tuple of parameter values

    Returns:
        List of dicts, empty list if no rows found
    """
    with get_connection() as conn:
        with conn.cursor(row_factory=dict_row) as cur:
            cur.execute(query, params)
            return cur.fetchall()


def fetch_count(query: str, params: tuple = None) -> int:
    """
    Execute a COUNT query and return its single value.

    The query must select exactly one column aliased as "count".
    """
    row = fetch_one(query, params)
    return int(row["count"]) if row else 0
