"""PostgreSQL workspace member repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection

from permtree.domain.entities import Permission, Role, RoleGrant, WorkspaceMember
from permtree.domain.value_objects import Action, ResourceSubject


def _assemble_member(rows: list[tuple]) -> WorkspaceMember | None:
    """Build a member with roles and grants from flat join rows.

    Row layout: member id, user id, workspace id, role id, role name,
    role description, role workspace id, permission id, action, subject,
    conditions. Role and permission columns are NULL for members without
    roles or roles without grants.
    """
    if not rows:
        return None
    first = rows[0]
    member = WorkspaceMember(id=first[0], user_id=first[1], workspace_id=first[2])
    roles: dict[UUID, Role] = {}
    for r in rows:
        role_id = r[3]
        if role_id is None:
            continue
        role = roles.get(role_id)
        if role is None:
            role = Role(id=role_id, name=r[4], description=r[5], workspace_id=r[6])
            roles[role_id] = role
            member.roles.append(role)
        if r[7] is not None:
            permission = Permission(id=r[7], action=Action(r[8]), subject=ResourceSubject(r[9]))
            role.grants.append(RoleGrant(permission=permission, conditions=r[10]))
    return member


class PostgresWorkspaceMemberRepository:
    """Workspace member repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_with_roles(self, member_id: UUID) -> WorkspaceMember | None:
        """Get member with every role and each role's grants in one query."""
        cur = await self._conn.execute(
            "SELECT wm.id, wm.user_id, wm.workspace_id, "
            "r.id, r.name, r.description, r.workspace_id, "
            "p.id, p.action, p.subject, rp.conditions "
            "FROM workspace_member wm "
            "LEFT JOIN workspace_member_role wmr ON wmr.workspace_member_id = wm.id "
            "LEFT JOIN role r ON r.id = wmr.role_id "
            "LEFT JOIN role_permission rp ON rp.role_id = r.id "
            "LEFT JOIN permission p ON p.id = rp.permission_id "
            "WHERE wm.id = %s "
            "ORDER BY r.name, p.id",
            (member_id,),
        )
        rows = await cur.fetchall()
        return _assemble_member(rows)
