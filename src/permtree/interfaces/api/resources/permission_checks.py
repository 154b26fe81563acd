"""Permission check API resources."""

import falcon.asgi

from permtree.application.ports import PermissionEvaluator
from permtree.domain.value_objects import ResourceType
from permtree.interfaces.api.authorization import (
    authorize,
    parse_action,
    parse_uuid,
    require_member,
)


class _PermissionCheckResource:
    """Decision for the calling member on one resource kind.

    GET reports the decision as data. HEAD answers 204 or 403 so a gateway
    can use it as a forward-auth endpoint.
    """

    resource_type: ResourceType

    def __init__(self, evaluator: PermissionEvaluator) -> None:
        self._evaluator = evaluator

    async def _report(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, resource_id: str, action: str
    ) -> None:
        member_id = require_member(req)
        rid = parse_uuid(resource_id, f"{self.resource_type} ID")
        act = parse_action(action)

        allowed = await self._evaluator.has_permission(member_id, act, rid, self.resource_type)
        resp.media = {
            "member_id": str(member_id),
            "resource_type": str(self.resource_type),
            "resource_id": str(rid),
            "action": str(act),
            "allowed": allowed,
        }
        resp.status = falcon.HTTP_200

    async def _enforce(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, resource_id: str, action: str
    ) -> None:
        rid = parse_uuid(resource_id, f"{self.resource_type} ID")
        await authorize(self._evaluator, req, parse_action(action), self.resource_type, rid)
        resp.status = falcon.HTTP_204


class SpacePermissionResource(_PermissionCheckResource):
    """GET/HEAD /v1/spaces/{space_id}/permissions/{action}."""

    resource_type = ResourceType.SPACE

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, space_id: str, action: str
    ) -> None:
        await self._report(req, resp, space_id, action)

    async def on_head(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, space_id: str, action: str
    ) -> None:
        await self._enforce(req, resp, space_id, action)


class MeetingPermissionResource(_PermissionCheckResource):
    """GET/HEAD /v1/meetings/{meeting_id}/permissions/{action}."""

    resource_type = ResourceType.MEETING

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, meeting_id: str, action: str
    ) -> None:
        await self._report(req, resp, meeting_id, action)

    async def on_head(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, meeting_id: str, action: str
    ) -> None:
        await self._enforce(req, resp, meeting_id, action)
