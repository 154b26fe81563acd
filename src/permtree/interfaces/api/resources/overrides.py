"""Member override listing API resource."""

import falcon.asgi

from permtree.application.use_cases.permission.list_member_overrides import (
    ListMemberOverridesUseCase,
)
from permtree.domain.exceptions import NotFound, PermissionDenied
from permtree.interfaces.api.authorization import parse_uuid, require_member


class MemberOverridesResource:
    """GET /v1/spaces/{space_id}/members/{member_id}/overrides - list overrides under a space."""

    def __init__(self, list_member_overrides: ListMemberOverridesUseCase) -> None:
        self._list = list_member_overrides

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        space_id: str,
        member_id: str,
    ) -> None:
        """List the member's overrides on the space subtree."""
        actor_id = require_member(req)
        sid = parse_uuid(space_id, "space ID")
        mid = parse_uuid(member_id, "member ID")

        try:
            overrides = await self._list.execute(actor_id, sid, mid)
        except PermissionDenied:
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
            return
        except NotFound as e:
            resp.status = falcon.HTTP_404
            resp.media = {"error": str(e)}
            return

        resp.media = {
            "items": [
                {
                    "id": str(o.id),
                    "action": str(o.permission.action),
                    "subject": str(o.permission.subject),
                    "resource_path": o.resource_path,
                    "is_allowed": o.is_allowed,
                    "expires_at": o.expires_at.isoformat() if o.expires_at else None,
                }
                for o in overrides
            ]
        }
        resp.status = falcon.HTTP_200
