"""PostgreSQL member resource permission repository implementation."""

from datetime import datetime
from uuid import UUID

from psycopg import AsyncConnection

from permtree.domain.entities import MemberResourcePermission, Permission
from permtree.domain.value_objects import PATH_DELIMITER, Action, ResourceSubject

_SELECT = (
    "SELECT mrp.id, mrp.workspace_member_id, p.id, p.action, p.subject, "
    "mrp.resource_path, mrp.is_allowed, mrp.expires_at, mrp.created_at "
    "FROM member_resource_permission mrp "
    "JOIN permission p ON p.id = mrp.permission_id "
)


def _row_to_override(r: tuple) -> MemberResourcePermission:
    return MemberResourcePermission(
        id=r[0],
        member_id=r[1],
        permission=Permission(id=r[2], action=Action(r[3]), subject=ResourceSubject(r[4])),
        resource_path=r[5],
        is_allowed=r[6],
        expires_at=r[7],
        created_at=r[8],
    )


def _descendant_like_pattern(path_prefix: str) -> str:
    """LIKE pattern matching strict descendants of path_prefix."""
    escaped = path_prefix.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"{escaped}{PATH_DELIMITER}%"


class PostgresMemberResourcePermissionRepository:
    """Member resource permission repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def find_active(
        self,
        member_id: UUID,
        action: Action,
        subject: ResourceSubject,
        resource_path: str,
        now: datetime,
    ) -> MemberResourcePermission | None:
        """Get the unexpired override for member, permission and exact path."""
        cur = await self._conn.execute(
            _SELECT
            + "WHERE mrp.workspace_member_id = %s AND p.action = %s AND p.subject = %s "
            "AND mrp.resource_path = %s "
            "AND (mrp.expires_at IS NULL OR mrp.expires_at > %s)",
            (member_id, action.value, subject.value, resource_path, now),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return _row_to_override(r)

    async def list_by_path_prefix(
        self, member_id: UUID, path_prefix: str
    ) -> list[MemberResourcePermission]:
        """List overrides on path_prefix and every path below it."""
        cur = await self._conn.execute(
            _SELECT
            + "WHERE mrp.workspace_member_id = %s "
            "AND (mrp.resource_path = %s OR mrp.resource_path LIKE %s) "
            "ORDER BY mrp.resource_path",
            (member_id, path_prefix, _descendant_like_pattern(path_prefix)),
        )
        rows = await cur.fetchall()
        return [_row_to_override(r) for r in rows]
