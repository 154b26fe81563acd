"""Member context middleware - exposes the already resolved member identity."""

import logging
from dataclasses import dataclass
from uuid import UUID

import falcon.asgi

logger = logging.getLogger(__name__)


@dataclass
class RequestMember:
    """Workspace member from request context."""

    member_id: UUID


class MemberContextMiddleware:
    """Sets req.context.member from the header set by the authenticating gateway."""

    def __init__(self, header_name: str = "X-Member-Id") -> None:
        self._header_name = header_name

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        """Parse member id header; missing or malformed means no member."""
        req.context.member = None
        raw = req.get_header(self._header_name)
        if not raw:
            return
        try:
            req.context.member = RequestMember(member_id=UUID(raw))
        except ValueError:
            logger.warning("Ignoring malformed %s header", self._header_name)
