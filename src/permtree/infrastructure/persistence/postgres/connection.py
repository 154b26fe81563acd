"""PostgreSQL async connection pool."""

from psycopg_pool import AsyncConnectionPool

from permtree.config import Settings


def create_pool(settings: Settings) -> AsyncConnectionPool:
    """Pool sized from settings, opened later by PoolLifespanMiddleware.

    Connections are checked on checkout so a restarted database shows up as
    a fresh connection rather than a failed permission check.
    """
    return AsyncConnectionPool(
        conninfo=settings.database_url,
        min_size=settings.db_pool_min_size,
        max_size=settings.db_pool_max_size,
        name="permtree",
        check=AsyncConnectionPool.check_connection,
        open=False,
    )
