"""Unit of Work port - one connection per permission check."""

from typing import Protocol

from permtree.application.ports.repositories import (
    MemberResourcePermissionRepository,
    ResourceRepository,
    WorkspaceMemberRepository,
)


class UnitOfWork(Protocol):
    """Unit of Work - manages the connection and repository access."""

    @property
    def resources(self) -> ResourceRepository: ...

    @property
    def member_permissions(self) -> MemberResourcePermissionRepository: ...

    @property
    def members(self) -> WorkspaceMemberRepository: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...
