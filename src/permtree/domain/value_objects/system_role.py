"""System roles seeded once and shared by every workspace."""

from enum import StrEnum

from permtree.domain.value_objects.action import Action
from permtree.domain.value_objects.resource_subject import ResourceSubject


class SystemRole(StrEnum):
    """Workspace-independent roles."""

    OWNER = "OWNER"
    ADMIN = "ADMIN"
    FULL_EDIT = "FULL_EDIT"
    CAN_EDIT = "CAN_EDIT"
    CAN_VIEW = "CAN_VIEW"


SYSTEM_ROLE_GRANTS: dict[SystemRole, list[tuple[Action, ResourceSubject]]] = {
    SystemRole.OWNER: [(Action.MANAGE, ResourceSubject.ALL)],
    SystemRole.ADMIN: [
        (Action.MANAGE, ResourceSubject.SPACE),
        (Action.MANAGE, ResourceSubject.MEETING),
        (Action.MANAGE, ResourceSubject.LOGIN_EVENT),
    ],
    SystemRole.FULL_EDIT: [
        (Action.MANAGE, ResourceSubject.SPACE),
        (Action.MANAGE, ResourceSubject.MEETING),
    ],
    SystemRole.CAN_EDIT: [
        (Action.CREATE, ResourceSubject.SPACE),
        (Action.UPDATE, ResourceSubject.SPACE),
        (Action.DELETE, ResourceSubject.SPACE),
        (Action.CREATE, ResourceSubject.MEETING),
        (Action.UPDATE, ResourceSubject.MEETING),
        (Action.DELETE, ResourceSubject.MEETING),
    ],
    SystemRole.CAN_VIEW: [
        (Action.READ, ResourceSubject.SPACE),
        (Action.READ, ResourceSubject.MEETING),
    ],
}

SYSTEM_ROLE_DESCRIPTIONS: dict[SystemRole, str] = {
    SystemRole.OWNER: "Workspace owner - every permission",
    SystemRole.ADMIN: "Administrator - manages content and login events",
    SystemRole.FULL_EDIT: "Full editor - manages spaces and meetings",
    SystemRole.CAN_EDIT: "Editor - creates, updates and deletes content",
    SystemRole.CAN_VIEW: "Viewer - read-only access",
}


def system_role_grants(role: SystemRole) -> list[tuple[Action, ResourceSubject]]:
    """(action, subject) pairs granted to a system role."""
    return list(SYSTEM_ROLE_GRANTS[role])
