"""Member resource permission repository port."""

from datetime import datetime
from typing import Protocol
from uuid import UUID

from permtree.domain.entities import MemberResourcePermission
from permtree.domain.value_objects import Action, ResourceSubject


class MemberResourcePermissionRepository(Protocol):
    """Port for individual (per-member, per-path) permission overrides."""

    async def find_active(
        self,
        member_id: UUID,
        action: Action,
        subject: ResourceSubject,
        resource_path: str,
        now: datetime,
    ) -> MemberResourcePermission | None: ...

    async def list_by_path_prefix(
        self, member_id: UUID, path_prefix: str
    ) -> list[MemberResourcePermission]: ...
