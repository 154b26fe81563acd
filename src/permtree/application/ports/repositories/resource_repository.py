"""Resource repository port."""

from typing import Protocol
from uuid import UUID

from permtree.domain.entities import Resource
from permtree.domain.value_objects import ResourceType


class ResourceRepository(Protocol):
    """Port for reading the resource tree."""

    async def get_by_id(
        self, resource_id: UUID, resource_type: ResourceType | str
    ) -> Resource | None: ...

    async def list_by_paths(self, paths: list[str]) -> list[Resource]: ...
