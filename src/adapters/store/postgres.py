"""
PostgreSQL store adapter - Implements KeyValueStore protocol.

This module provides the PostgreSQL implementation of the domain's
store port using psycopg3. Each logical table is a physical table of
JSONB documents:

    CREATE TABLE <name> (id TEXT PRIMARY KEY, doc JSONB NOT NULL)

Table names come from configuration and are always composed with
``psycopg.sql.Identifier``; values are always passed as parameters.

Concurrency:
-----------
``put_if_match`` is a single ``UPDATE ... WHERE doc -> field = expected``
statement, so the compare and the write happen atomically under the
row lock PostgreSQL takes for the update.

Every ``psycopg.Error`` (including pool timeouts) is re-raised as the
domain's ``StoreError``.
"""

import logging
from collections.abc import Iterable
from typing import Any

import psycopg
from psycopg import sql
from psycopg.types.json import Jsonb
from psycopg_pool import ConnectionPool

from src.domain.exceptions import StoreError

logger = logging.getLogger(__name__)


class PostgresStore:
    """
    Implements KeyValueStore protocol via psycopg3.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self, pool: ConnectionPool) -> None:
        """
        Initialize store with connection pool.

        Args:
            pool: psycopg3 ConnectionPool for database connections
        """
        self._pool = pool

    def get(self, table: str, key: str) -> dict[str, Any] | None:
        query = sql.SQL("SELECT doc FROM {} WHERE id = %s").format(sql.Identifier(table))

        try:
            with self._pool.connection() as conn, conn.cursor() as cursor:
                cursor.execute(query, (key,))
                row = cursor.fetchone()
        except psycopg.Error as e:
            raise StoreError(f"get from {table} failed") from e

        return row[0] if row is not None else None

    def put(self, table: str, document: dict[str, Any]) -> None:
        query = sql.SQL(
            """
            INSERT INTO {} (id, doc)
            VALUES (%s, %s)
            ON CONFLICT (id) DO UPDATE
            SET doc = EXCLUDED.doc
            """
        ).format(sql.Identifier(table))

        try:
            with self._pool.connection() as conn, conn.cursor() as cursor:
                cursor.execute(query, (document["id"], Jsonb(document)))
                conn.commit()
        except psycopg.Error as e:
            raise StoreError(f"put into {table} failed") from e

    def put_if_match(
        self, table: str, document: dict[str, Any], field: str, expected: Any
    ) -> bool:
        """
        Overwrite a document only if ``doc -> field`` still equals ``expected``.

        Returns:
            True if exactly one row was updated, False otherwise
        """
        query = sql.SQL(
            """
            UPDATE {}
            SET doc = %s
            WHERE id = %s AND doc -> %s::text = %s
            """
        ).format(sql.Identifier(table))

        try:
            with self._pool.connection() as conn, conn.cursor() as cursor:
                cursor.execute(
                    query, (Jsonb(document), document["id"], field, Jsonb(expected))
                )
                conn.commit()
                return cursor.rowcount == 1
        except psycopg.Error as e:
            raise StoreError(f"conditional put into {table} failed") from e


def create_tables(pool: ConnectionPool, tables: Iterable[str]) -> None:
    """
    Provision document tables if they do not already exist.

    Idempotent; safe to run on every startup.

    Args:
        pool: psycopg3 ConnectionPool instance
        tables: Physical table names to create
    """
    for table in tables:
        logger.info(f"Ensuring table exists: {table}")
        query = sql.SQL(
            "CREATE TABLE IF NOT EXISTS {} (id TEXT PRIMARY KEY, doc JSONB NOT NULL)"
        ).format(sql.Identifier(table))
        try:
            with pool.connection() as conn:
                conn.execute(query)
        except psycopg.Error as e:
            logger.error(f"Table provisioning failed: {table} - {e}")
            raise RuntimeError(f"Table provisioning failed: {table}") from e
