"""PostgreSQL Unit of Work implementation."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import psycopg
from psycopg_pool import AsyncConnectionPool

from permtree.domain.exceptions import DataAccessError
from permtree.infrastructure.persistence.postgres.member_resource_permission_repository import (
    PostgresMemberResourcePermissionRepository,
)
from permtree.infrastructure.persistence.postgres.resource_repository import (
    PostgresResourceRepository,
)
from permtree.infrastructure.persistence.postgres.workspace_member_repository import (
    PostgresWorkspaceMemberRepository,
)

logger = logging.getLogger(__name__)


class PostgresUnitOfWork:
    """PostgreSQL Unit of Work - one connection, one transaction."""

    def __init__(self, pool: AsyncConnectionPool) -> None:
        self._pool = pool
        self._conn: object | None = None
        self._conn_cm: object | None = None

    async def __aenter__(self) -> "PostgresUnitOfWork":
        self._conn_cm = self._pool.connection()
        self._conn = await self._conn_cm.__aenter__()
        self._resources = PostgresResourceRepository(self._conn)
        self._member_permissions = PostgresMemberResourcePermissionRepository(self._conn)
        self._members = PostgresWorkspaceMemberRepository(self._conn)
        return self

    async def __aexit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        if exc_type and self._conn:
            await self._conn.rollback()
        if self._conn_cm:
            await self._conn_cm.__aexit__(exc_type, exc_val, exc_tb)

    @property
    def resources(self) -> PostgresResourceRepository:
        return self._resources

    @property
    def member_permissions(self) -> PostgresMemberResourcePermissionRepository:
        return self._member_permissions

    @property
    def members(self) -> PostgresWorkspaceMemberRepository:
        return self._members

    async def commit(self) -> None:
        if self._conn:
            await self._conn.commit()

    async def rollback(self) -> None:
        if self._conn:
            await self._conn.rollback()


def create_uow_factory(pool: AsyncConnectionPool) -> object:
    """Create UnitOfWork factory (async context manager).

    Driver and pool failures leave the factory as DataAccessError so callers
    can tell "could not decide" apart from a denial.
    """

    @asynccontextmanager
    async def factory() -> AsyncIterator[PostgresUnitOfWork]:
        uow = PostgresUnitOfWork(pool)
        try:
            async with uow:
                try:
                    yield uow
                    await uow.commit()
                except BaseException:
                    await uow.rollback()
                    raise
        except psycopg.Error as e:
            logger.error("Database access failed: %s", e)
            raise DataAccessError(str(e)) from e

    return factory
