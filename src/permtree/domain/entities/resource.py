"""Resource entity - node of the space/meeting tree."""

from dataclasses import dataclass
from uuid import UUID

from permtree.domain.value_objects import (
    ResourcePath,
    ResourceSubject,
    ResourceType,
    ResourceVisibility,
    subject_for,
)


@dataclass
class Resource:
    """Resource - space or meeting with visibility, owner and tree path."""

    id: UUID
    workspace_id: UUID
    owner_id: UUID
    type: ResourceType
    path: str
    title: str = ""
    visibility: ResourceVisibility = ResourceVisibility.PUBLIC

    @property
    def resource_path(self) -> ResourcePath:
        return ResourcePath(self.path)

    @property
    def subject(self) -> ResourceSubject:
        return subject_for(self.type)

    def is_owned_by(self, member_id: UUID) -> bool:
        return self.owner_id == member_id

    def is_public(self) -> bool:
        return self.visibility == ResourceVisibility.PUBLIC

    def is_private(self) -> bool:
        return self.visibility == ResourceVisibility.PRIVATE
