"""Resource kinds and visibility."""

from enum import StrEnum


class ResourceType(StrEnum):
    """Concrete resource kinds stored in the resource tree."""

    SPACE = "space"
    MEETING = "meeting"


class ResourceVisibility(StrEnum):
    """Visibility of a resource node."""

    PUBLIC = "public"
    PRIVATE = "private"
