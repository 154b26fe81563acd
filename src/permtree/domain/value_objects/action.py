"""Permission actions."""

from enum import StrEnum


class Action(StrEnum):
    """Actions that can be granted on a resource subject.

    MANAGE subsumes every other action on the same subject.
    """

    CREATE = "create"
    READ = "read"
    UPDATE = "update"
    DELETE = "delete"
    MANAGE = "manage"
