"""Permission evaluator - visibility gate, individual overrides and role grants."""

import logging
from collections.abc import Callable
from datetime import UTC, datetime
from uuid import UUID

from permtree.application.ports import UnitOfWork
from permtree.domain.entities import Resource
from permtree.domain.value_objects import (
    Action,
    ResourceSubject,
    ResourceType,
    parent_path,
    parent_subject_for,
    subject_for,
)

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(UTC)


class ResourcePermissionEvaluator:
    """Decides whether a member may perform an action on a space or meeting.

    Precedence, short-circuiting:

    1. the resource must exist;
    2. every node of its ancestor chain must pass the visibility gate
       (PRIVATE nodes need an allow override or ownership, a deny override
       fails the gate even for the owner);
    3. an active override on the resource path decides;
    4. for dependent kinds (meetings) an active override on the parent path decides;
    5. otherwise any role grant covering the request decides.

    "Not found" and "no permission" both yield False. Data-access failures
    propagate to the caller.
    """

    def __init__(
        self,
        unit_of_work_factory: type,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._clock = clock

    async def has_space_permission(self, member_id: UUID, action: Action, space_id: UUID) -> bool:
        """Check action on a space."""
        return await self.has_permission(member_id, action, space_id, ResourceType.SPACE)

    async def has_meeting_permission(
        self, member_id: UUID, action: Action, meeting_id: UUID
    ) -> bool:
        """Check action on a meeting, inheriting from its parent space."""
        return await self.has_permission(member_id, action, meeting_id, ResourceType.MEETING)

    async def has_permission(
        self,
        member_id: UUID,
        action: Action,
        resource_id: UUID,
        resource_type: ResourceType | str,
    ) -> bool:
        """Check action on a resource of the given kind."""
        now = self._clock()
        async with self._uow_factory() as uow:
            resource = await uow.resources.get_by_id(resource_id, resource_type)
            if not resource:
                logger.debug("Denied %s on %s %s: resource not found", action, resource_type, resource_id)
                return False

            if not await self._check_tree_visibility(uow, resource, member_id, action, now):
                logger.debug(
                    "Denied %s on %s for member %s: visibility gate", action, resource.path, member_id
                )
                return False

            subject = subject_for(resource_type)
            verdict = await self._find_direct_verdict(
                uow, member_id, action, subject, resource.path, now
            )
            if verdict is not None:
                return verdict

            parent_subject = parent_subject_for(resource_type)
            parent = parent_path(resource.path)
            subjects = [subject]
            # A root-level meeting has no space to inherit from.
            if parent_subject is not None and parent is not None:
                verdict = await self._find_direct_verdict(
                    uow, member_id, action, parent_subject, parent, now
                )
                if verdict is not None:
                    return verdict
                subjects.append(parent_subject)

            allowed = await self._check_role_permission(uow, member_id, action, subjects)
            logger.debug(
                "Role check %s on %s for member %s: %s", action, resource.path, member_id, allowed
            )
            return allowed

    async def _check_tree_visibility(
        self,
        uow: UnitOfWork,
        resource: Resource,
        member_id: UUID,
        action: Action,
        now: datetime,
    ) -> bool:
        """Every existing node from root to the resource must be visible to the member."""
        paths = resource.resource_path.chain()
        if not paths:
            return False

        chain = await uow.resources.list_by_paths(paths)
        if not chain:
            return False

        for node in chain:
            if not await self._check_visibility_access(uow, node, member_id, action, now):
                return False
        return True

    async def _check_visibility_access(
        self,
        uow: UnitOfWork,
        node: Resource,
        member_id: UUID,
        action: Action,
        now: datetime,
    ) -> bool:
        if node.is_public():
            return True
        if not node.is_private():
            return False

        explicit = await self._find_direct_verdict(
            uow, member_id, action, node.subject, node.path, now
        )
        # Explicit deny blocks even the owner.
        if explicit is not None:
            return explicit
        return node.is_owned_by(member_id)

    async def _find_direct_verdict(
        self,
        uow: UnitOfWork,
        member_id: UUID,
        action: Action,
        subject: ResourceSubject,
        resource_path: str,
        now: datetime,
    ) -> bool | None:
        """is_allowed of the active override on the exact path, None when absent."""
        override = await uow.member_permissions.find_active(
            member_id, action, subject, resource_path, now
        )
        if override is None or not override.is_active(now):
            return None
        return override.is_allowed

    async def _check_role_permission(
        self,
        uow: UnitOfWork,
        member_id: UUID,
        action: Action,
        subjects: list[ResourceSubject],
    ) -> bool:
        member = await uow.members.get_with_roles(member_id)
        if not member or not member.roles:
            return False
        return any(member.covers(action, subject) for subject in subjects)
