"""
Shared fixtures for integration tests.

Integration tests run against a real PostgreSQL database (via
docker-compose) and are skipped when it cannot be reached.
"""

from collections.abc import Generator

import pytest
from psycopg import sql
from psycopg_pool import ConnectionPool, PoolTimeout

from src.adapters.store.postgres import PostgresStore, create_tables
from src.config.settings import get_settings

KEY_TABLE = "it_keys"
IDENTITY_TABLE = "it_identities"


@pytest.fixture(scope="module")
def pool() -> Generator[ConnectionPool, None, None]:
    """Create connection pool for integration tests."""
    settings = get_settings()
    pool = ConnectionPool(
        conninfo=settings.database_url,
        min_size=1,
        max_size=10,
        open=True,
    )
    try:
        pool.wait(timeout=5.0)
    except PoolTimeout:
        pool.close()
        pytest.skip("PostgreSQL is not reachable")
    create_tables(pool, [KEY_TABLE, IDENTITY_TABLE])
    yield pool
    pool.close()


@pytest.fixture(autouse=True)
def clean_database(pool: ConnectionPool) -> Generator[None, None, None]:
    """Empty the test tables before each test."""
    with pool.connection() as conn:
        for table in (KEY_TABLE, IDENTITY_TABLE):
            conn.execute(sql.SQL("DELETE FROM {}").format(sql.Identifier(table)))
        conn.commit()
    yield


@pytest.fixture
def pg_store(pool: ConnectionPool) -> PostgresStore:
    return PostgresStore(pool)
