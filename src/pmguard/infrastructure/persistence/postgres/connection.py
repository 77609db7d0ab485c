"""PostgreSQL async connection pool."""

from psycopg_pool import AsyncConnectionPool


def create_pool(conninfo: str, min_size: int = 1, max_size: int = 10) -> AsyncConnectionPool:
    """Create async connection pool.

    Pool is created with open=False. Caller must call await pool.open()
    before use (PoolLifespanMiddleware does this on ASGI startup).
    """
    return AsyncConnectionPool(
        conninfo=conninfo,
        min_size=min_size,
        max_size=max_size,
        open=False,
    )
