"""Resource subjects - the category a permission grant applies to."""

from enum import StrEnum

from permtree.domain.value_objects.resource_type import ResourceType


class ResourceSubject(StrEnum):
    """Subjects in the permission catalog. ALL matches every subject."""

    ALL = "all"
    SPACE = "Space"
    MEETING = "Meeting"
    RESOURCE = "Resource"
    LOGIN_EVENT = "LoginEvent"


_SUBJECT_BY_TYPE: dict[str, ResourceSubject] = {
    ResourceType.SPACE: ResourceSubject.SPACE,
    ResourceType.MEETING: ResourceSubject.MEETING,
}

# Dependent kinds fall back to their parent's subject.
_PARENT_SUBJECT_BY_TYPE: dict[str, ResourceSubject] = {
    ResourceType.MEETING: ResourceSubject.SPACE,
}


def subject_for(resource_type: str) -> ResourceSubject:
    """Map a resource type to its permission subject, RESOURCE when unknown."""
    return _SUBJECT_BY_TYPE.get(resource_type, ResourceSubject.RESOURCE)


def parent_subject_for(resource_type: str) -> ResourceSubject | None:
    """Subject of the parent resource for dependent kinds, None otherwise."""
    return _PARENT_SUBJECT_BY_TYPE.get(resource_type)
