"""List member overrides use case."""

from uuid import UUID

from permtree.application.ports import PermissionEvaluator
from permtree.domain.entities import MemberResourcePermission
from permtree.domain.exceptions import NotFound, PermissionDenied
from permtree.domain.value_objects import Action, ResourceType


class ListMemberOverridesUseCase:
    """List a member's individual overrides on a space and everything below it."""

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_evaluator: PermissionEvaluator,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_evaluator = permission_evaluator

    async def execute(
        self,
        actor_id: UUID,
        space_id: UUID,
        member_id: UUID,
    ) -> list[MemberResourcePermission]:
        """Actor must be able to manage the space."""
        can_manage = await self._permission_evaluator.has_space_permission(
            actor_id, Action.MANAGE, space_id
        )
        if not can_manage:
            raise PermissionDenied("Member cannot manage this space")

        async with self._uow_factory() as uow:
            space = await uow.resources.get_by_id(space_id, ResourceType.SPACE)
            if not space:
                raise NotFound("Space", str(space_id))
            return await uow.member_permissions.list_by_path_prefix(member_id, space.path)
