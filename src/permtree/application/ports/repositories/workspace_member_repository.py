"""Workspace member repository port."""

from typing import Protocol
from uuid import UUID

from permtree.domain.entities import WorkspaceMember


class WorkspaceMemberRepository(Protocol):
    """Port for workspace members."""

    async def get_with_roles(self, member_id: UUID) -> WorkspaceMember | None: ...
