"""Permission catalog entry and the coverage rule."""

from dataclasses import dataclass

from permtree.domain.value_objects import Action, ResourceSubject


def covers(
    grant: tuple[Action, ResourceSubject],
    requested: tuple[Action, ResourceSubject],
) -> bool:
    """True if a granted (action, subject) satisfies the requested one.

    MANAGE covers every action on its subject, ALL covers every subject,
    and the two compose: (MANAGE, ALL) covers everything.
    """
    grant_action, grant_subject = grant
    action, subject = requested
    action_matches = grant_action == action or grant_action == Action.MANAGE
    subject_matches = grant_subject == subject or grant_subject == ResourceSubject.ALL
    return action_matches and subject_matches


@dataclass(frozen=True)
class Permission:
    """Grantable capability - unique per (action, subject)."""

    action: Action
    subject: ResourceSubject
    id: int | None = None

    def matches(self, action: Action, subject: ResourceSubject) -> bool:
        return self.action == action and self.subject == subject

    def covers(self, action: Action, subject: ResourceSubject) -> bool:
        return covers((self.action, self.subject), (action, subject))

    def __str__(self) -> str:
        return f"{self.action}:{self.subject}"
