"""Repository ports."""

from permtree.application.ports.repositories.member_resource_permission_repository import (
    MemberResourcePermissionRepository,
)
from permtree.application.ports.repositories.resource_repository import ResourceRepository
from permtree.application.ports.repositories.workspace_member_repository import (
    WorkspaceMemberRepository,
)

__all__ = [
    "MemberResourcePermissionRepository",
    "ResourceRepository",
    "WorkspaceMemberRepository",
]
