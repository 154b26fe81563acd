"""Domain entities."""

from permtree.domain.entities.member_resource_permission import MemberResourcePermission
from permtree.domain.entities.permission import Permission, covers
from permtree.domain.entities.resource import Resource
from permtree.domain.entities.role import Role, RoleGrant
from permtree.domain.entities.workspace_member import WorkspaceMember

__all__ = [
    "MemberResourcePermission",
    "Permission",
    "Resource",
    "Role",
    "RoleGrant",
    "WorkspaceMember",
    "covers",
]
