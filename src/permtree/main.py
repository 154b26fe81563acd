"""Application entry point and composition root."""

import logging

from permtree import __version__
from permtree.application.use_cases.permission.list_member_overrides import (
    ListMemberOverridesUseCase,
)
from permtree.config import get_settings
from permtree.infrastructure.permission.permission_evaluator import ResourcePermissionEvaluator
from permtree.infrastructure.persistence.postgres.connection import create_pool
from permtree.infrastructure.persistence.postgres.unit_of_work import create_uow_factory
from permtree.interfaces.api.app import create_app
from permtree.interfaces.api.middleware.member_context import MemberContextMiddleware
from permtree.interfaces.api.middleware.pool_lifespan import PoolLifespanMiddleware
from permtree.interfaces.api.resources.health import HealthResource
from permtree.interfaces.api.resources.overrides import MemberOverridesResource
from permtree.interfaces.api.resources.permission_checks import (
    MeetingPermissionResource,
    SpacePermissionResource,
)
from permtree.logging_config import configure_logging

logger = logging.getLogger(__name__)


def main() -> None:
    """CLI entry point."""
    print(f"permtree v{__version__}")


def create_permtree_app():
    """Composition root - build Falcon app with all dependencies."""
    settings = get_settings()
    configure_logging(settings.log_level)

    pool = create_pool(settings)
    uow_factory = create_uow_factory(pool)

    evaluator = ResourcePermissionEvaluator(uow_factory)
    list_member_overrides = ListMemberOverridesUseCase(
        unit_of_work_factory=uow_factory,
        permission_evaluator=evaluator,
    )

    app = create_app(
        space_permission_resource=SpacePermissionResource(evaluator),
        meeting_permission_resource=MeetingPermissionResource(evaluator),
        member_overrides_resource=MemberOverridesResource(list_member_overrides),
        health_resource=HealthResource(pool),
        middleware=[
            PoolLifespanMiddleware(pool),
            MemberContextMiddleware(settings.member_id_header),
        ],
    )
    logger.info("permtree v%s configured (%s)", __version__, settings.environment)
    return app


def run_server() -> None:
    """Run uvicorn server."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(create_permtree_app(), host=settings.host, port=settings.port)
