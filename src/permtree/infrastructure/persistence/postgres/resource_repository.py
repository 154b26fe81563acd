"""PostgreSQL resource repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection

from permtree.domain.entities import Resource
from permtree.domain.value_objects import ResourceType, ResourceVisibility

_COLUMNS = "id, workspace_id, owner_id, type, path, title, visibility"


def _resource_type(value: str) -> ResourceType | str:
    """Known kinds become ResourceType; unknown kinds stay raw and map to the RESOURCE subject."""
    try:
        return ResourceType(value)
    except ValueError:
        return value


def _row_to_resource(r: tuple) -> Resource:
    return Resource(
        id=r[0],
        workspace_id=r[1],
        owner_id=r[2],
        type=_resource_type(r[3]),
        path=r[4],
        title=r[5],
        visibility=ResourceVisibility(r[6]),
    )


class PostgresResourceRepository:
    """Resource repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(
        self, resource_id: UUID, resource_type: ResourceType | str
    ) -> Resource | None:
        """Get resource by id and kind."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM resource WHERE id = %s AND type = %s",
            (resource_id, str(resource_type)),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return _row_to_resource(r)

    async def list_by_paths(self, paths: list[str]) -> list[Resource]:
        """Batch-fetch resources whose path is in paths, shallowest first."""
        if not paths:
            return []
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM resource WHERE path = ANY(%s) "
            "ORDER BY array_length(string_to_array(path, '.'), 1)",
            (list(paths),),
        )
        rows = await cur.fetchall()
        return [_row_to_resource(r) for r in rows]
