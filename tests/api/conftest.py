"""Fixtures for API tests."""

import pytest
from falcon.testing import TestClient

from permtree.application.use_cases.permission.list_member_overrides import (
    ListMemberOverridesUseCase,
)
from permtree.interfaces.api.app import create_app
from permtree.interfaces.api.middleware.member_context import MemberContextMiddleware
from permtree.interfaces.api.resources.health import HealthResource
from permtree.interfaces.api.resources.overrides import MemberOverridesResource
from permtree.interfaces.api.resources.permission_checks import (
    MeetingPermissionResource,
    SpacePermissionResource,
)


@pytest.fixture
def app(world, evaluator):
    """Falcon ASGI app wired to the in-memory world and the real evaluator."""
    list_member_overrides = ListMemberOverridesUseCase(
        unit_of_work_factory=world.uow_factory(),
        permission_evaluator=evaluator,
    )
    return create_app(
        space_permission_resource=SpacePermissionResource(evaluator),
        meeting_permission_resource=MeetingPermissionResource(evaluator),
        member_overrides_resource=MemberOverridesResource(list_member_overrides),
        health_resource=HealthResource(),
        middleware=[MemberContextMiddleware()],
    )


@pytest.fixture
def client(app):
    """Falcon ASGI test client."""
    return TestClient(app)
