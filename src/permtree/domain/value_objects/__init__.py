"""Domain value objects."""

from permtree.domain.value_objects.action import Action
from permtree.domain.value_objects.resource_path import (
    PATH_DELIMITER,
    ResourcePath,
    ancestor_paths,
    parent_path,
    path_segments,
)
from permtree.domain.value_objects.resource_subject import (
    ResourceSubject,
    parent_subject_for,
    subject_for,
)
from permtree.domain.value_objects.resource_type import ResourceType, ResourceVisibility
from permtree.domain.value_objects.system_role import (
    SYSTEM_ROLE_DESCRIPTIONS,
    SYSTEM_ROLE_GRANTS,
    SystemRole,
    system_role_grants,
)

__all__ = [
    "PATH_DELIMITER",
    "Action",
    "ResourcePath",
    "ResourceSubject",
    "ResourceType",
    "ResourceVisibility",
    "SYSTEM_ROLE_DESCRIPTIONS",
    "SYSTEM_ROLE_GRANTS",
    "SystemRole",
    "ancestor_paths",
    "parent_path",
    "parent_subject_for",
    "path_segments",
    "subject_for",
    "system_role_grants",
]
