"""Permission evaluator port - resource authorization decisions."""

from typing import Protocol
from uuid import UUID

from permtree.domain.value_objects import Action, ResourceType


class PermissionEvaluator(Protocol):
    """Port for deciding whether a member may act on a resource."""

    async def has_permission(
        self,
        member_id: UUID,
        action: Action,
        resource_id: UUID,
        resource_type: ResourceType | str,
    ) -> bool: ...

    async def has_space_permission(self, member_id: UUID, action: Action, space_id: UUID) -> bool: ...

    async def has_meeting_permission(
        self, member_id: UUID, action: Action, meeting_id: UUID
    ) -> bool: ...
