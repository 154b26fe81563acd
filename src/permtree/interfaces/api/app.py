"""Falcon ASGI application."""

import logging

import falcon
import falcon.asgi
from falcon.asgi import App

from permtree.domain.exceptions import DataAccessError, ValidationError
from permtree.interfaces.api.resources.health import HealthResource
from permtree.interfaces.api.resources.overrides import MemberOverridesResource
from permtree.interfaces.api.resources.permission_checks import (
    MeetingPermissionResource,
    SpacePermissionResource,
)

logger = logging.getLogger(__name__)


async def handle_validation_error(req, resp, ex: ValidationError, params) -> None:
    resp.status = falcon.HTTP_400
    resp.media = {"error": str(ex)}


async def handle_data_access_error(req, resp, ex: DataAccessError, params) -> None:
    # Never surfaced as 403: the decision could not be made.
    logger.error("Permission check failed on %s %s: %s", req.method, req.path, ex)
    resp.status = falcon.HTTP_503
    resp.media = {"error": "Permission store unavailable"}


async def log_exception(req, resp, ex, params) -> None:
    logger.exception("Unhandled error on %s %s", req.method, req.path, exc_info=ex)
    resp.status = falcon.HTTP_500
    resp.media = {"title": "500 Internal Server Error"}


def create_app(
    space_permission_resource: SpacePermissionResource,
    meeting_permission_resource: MeetingPermissionResource,
    member_overrides_resource: MemberOverridesResource,
    health_resource: HealthResource,
    middleware: list | None = None,
) -> App:
    """Create Falcon ASGI app with routes and error handlers."""
    app = falcon.asgi.App(middleware=middleware or [])
    app.add_error_handler(Exception, log_exception)
    app.add_error_handler(ValidationError, handle_validation_error)
    app.add_error_handler(DataAccessError, handle_data_access_error)
    app.add_route("/v1/health", health_resource)
    app.add_route("/v1/health/ready", health_resource, suffix="ready")
    app.add_route("/v1/spaces/{space_id}/permissions/{action}", space_permission_resource)
    app.add_route("/v1/meetings/{meeting_id}/permissions/{action}", meeting_permission_resource)
    app.add_route(
        "/v1/spaces/{space_id}/members/{member_id}/overrides",
        member_overrides_resource,
    )
    return app
