"""Authorization boundary - explicit evaluator calls from request handlers."""

from uuid import UUID

import falcon
import falcon.asgi

from permtree.application.ports import PermissionEvaluator
from permtree.domain.exceptions import ValidationError
from permtree.domain.value_objects import Action, ResourceType


def parse_action(value: str) -> Action:
    """Action from a path segment, case-insensitive."""
    try:
        return Action(value.lower())
    except ValueError as e:
        raise ValidationError(f"Unknown action: {value}") from e


def parse_uuid(value: str, name: str) -> UUID:
    try:
        return UUID(value)
    except ValueError as e:
        raise ValidationError(f"Invalid {name}") from e


def require_member(req: falcon.asgi.Request) -> UUID:
    """Member id of the caller, 401 when absent."""
    member = getattr(req.context, "member", None)
    if not member:
        raise falcon.HTTPUnauthorized(title="Unauthorized")
    return member.member_id


async def authorize(
    evaluator: PermissionEvaluator,
    req: falcon.asgi.Request,
    action: Action,
    resource_type: ResourceType,
    resource_id: UUID,
) -> UUID:
    """Raise 403 unless the caller may perform action on the resource.

    A missing resource is indistinguishable from a denial here.
    """
    member_id = require_member(req)
    allowed = await evaluator.has_permission(member_id, action, resource_id, resource_type)
    if not allowed:
        raise falcon.HTTPForbidden(title="Permission denied")
    return member_id
