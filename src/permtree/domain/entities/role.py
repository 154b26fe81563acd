"""Role entity and its grants."""

from dataclasses import dataclass, field
from typing import Any
from uuid import UUID

from permtree.domain.entities.permission import Permission
from permtree.domain.value_objects import Action, ResourceSubject


@dataclass(frozen=True)
class RoleGrant:
    """Association of a role with a catalog permission. Conditions are opaque."""

    permission: Permission
    conditions: dict[str, Any] | None = None


@dataclass
class Role:
    """Role - system role when workspace_id is None, else scoped to one workspace."""

    id: UUID
    name: str
    description: str | None = None
    workspace_id: UUID | None = None
    grants: list[RoleGrant] = field(default_factory=list)

    def is_system_role(self) -> bool:
        return self.workspace_id is None

    def covers(self, action: Action, subject: ResourceSubject) -> bool:
        return any(g.permission.covers(action, subject) for g in self.grants)
