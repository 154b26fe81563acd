"""Workspace member entity."""

from dataclasses import dataclass, field
from uuid import UUID

from permtree.domain.entities.role import Role
from permtree.domain.value_objects import Action, ResourceSubject


@dataclass
class WorkspaceMember:
    """Member of a workspace holding one or more roles."""

    id: UUID
    user_id: UUID
    workspace_id: UUID
    roles: list[Role] = field(default_factory=list)

    def covers(self, action: Action, subject: ResourceSubject) -> bool:
        """Any single role's coverage is sufficient."""
        return any(role.covers(action, subject) for role in self.roles)
