"""Unit tests for resource and override entities."""

from datetime import UTC, datetime, timedelta
from uuid import uuid4

from permtree.domain.entities import MemberResourcePermission, Permission, Resource
from permtree.domain.value_objects import (
    Action,
    ResourcePath,
    ResourceSubject,
    ResourceType,
    ResourceVisibility,
    parent_subject_for,
    subject_for,
)

NOW = datetime(2026, 3, 1, tzinfo=UTC)


def _override(expires_at=None, is_allowed=True) -> MemberResourcePermission:
    return MemberResourcePermission(
        id=uuid4(),
        member_id=uuid4(),
        permission=Permission(Action.READ, ResourceSubject.SPACE),
        resource_path="ws.space",
        is_allowed=is_allowed,
        expires_at=expires_at,
    )


class TestMemberResourcePermission:
    """Expiry and activity of individual overrides."""

    def test_without_expiry_is_active(self) -> None:
        assert _override().is_active(NOW)

    def test_future_expiry_is_active(self) -> None:
        assert _override(expires_at=NOW + timedelta(seconds=1)).is_active(NOW)

    def test_past_expiry_is_inactive(self) -> None:
        override = _override(expires_at=NOW - timedelta(seconds=1))
        assert override.is_expired(NOW)
        assert not override.is_active(NOW)

    def test_expiry_at_now_is_expired(self) -> None:
        assert _override(expires_at=NOW).is_expired(NOW)

    def test_deny_is_active(self) -> None:
        """Deny rows stay active so they can dominate."""
        assert _override(is_allowed=False).is_active(NOW)

    def test_defaults_to_wall_clock(self) -> None:
        assert _override(expires_at=datetime(2000, 1, 1, tzinfo=UTC)).is_expired()


class TestResource:
    """Resource helpers."""

    def _resource(self, **kwargs) -> Resource:
        defaults = dict(
            id=uuid4(),
            workspace_id=uuid4(),
            owner_id=uuid4(),
            type=ResourceType.MEETING,
            path="ws.space.meeting",
        )
        defaults.update(kwargs)
        return Resource(**defaults)

    def test_defaults_to_public(self) -> None:
        resource = self._resource()
        assert resource.is_public()
        assert not resource.is_private()

    def test_ownership(self) -> None:
        owner = uuid4()
        resource = self._resource(owner_id=owner)
        assert resource.is_owned_by(owner)
        assert not resource.is_owned_by(uuid4())

    def test_subject_and_path(self) -> None:
        resource = self._resource(visibility=ResourceVisibility.PRIVATE)
        assert resource.is_private()
        assert resource.subject == ResourceSubject.MEETING
        assert resource.resource_path == ResourcePath("ws.space.meeting")


class TestSubjectMapping:
    """Explicit resource type to subject table."""

    def test_known_types(self) -> None:
        assert subject_for(ResourceType.SPACE) == ResourceSubject.SPACE
        assert subject_for(ResourceType.MEETING) == ResourceSubject.MEETING

    def test_unknown_type_defaults_to_resource(self) -> None:
        assert subject_for("page") == ResourceSubject.RESOURCE

    def test_only_meetings_have_parent_subject(self) -> None:
        assert parent_subject_for(ResourceType.MEETING) == ResourceSubject.SPACE
        assert parent_subject_for(ResourceType.SPACE) is None
        assert parent_subject_for("page") is None
