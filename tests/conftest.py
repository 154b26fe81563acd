"""Pytest fixtures for permtree tests."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import UTC, datetime
from uuid import UUID, uuid4

import pytest

from permtree.domain.entities import (
    MemberResourcePermission,
    Permission,
    Resource,
    Role,
    RoleGrant,
    WorkspaceMember,
)
from permtree.domain.value_objects import (
    SYSTEM_ROLE_DESCRIPTIONS,
    Action,
    ResourceSubject,
    ResourceType,
    ResourceVisibility,
    SystemRole,
    path_segments,
    system_role_grants,
)
from permtree.infrastructure.permission.permission_evaluator import (
    ResourcePermissionEvaluator,
)

NOW = datetime(2026, 1, 15, 12, 0, tzinfo=UTC)


# --- Fake repositories ---


class FakeResourceRepository:
    """In-memory resource repository."""

    def __init__(self) -> None:
        self._by_id: dict[UUID, Resource] = {}
        self.path_queries: list[list[str]] = []
        self.error: Exception | None = None

    async def get_by_id(
        self, resource_id: UUID, resource_type: ResourceType | str
    ) -> Resource | None:
        if self.error:
            raise self.error
        resource = self._by_id.get(resource_id)
        # Kinds are bound as plain strings, same as the Postgres adapter.
        if not resource or str(resource.type) != str(resource_type):
            return None
        return resource

    async def list_by_paths(self, paths: list[str]) -> list[Resource]:
        if self.error:
            raise self.error
        self.path_queries.append(list(paths))
        wanted = set(paths)
        found = [r for r in self._by_id.values() if r.path in wanted]
        return sorted(found, key=lambda r: len(path_segments(r.path)))

    def add(self, resource: Resource) -> Resource:
        """Helper to add resource for tests."""
        self._by_id[resource.id] = resource
        return resource


class FakeMemberResourcePermissionRepository:
    """In-memory member resource permission repository."""

    def __init__(self) -> None:
        self._store: list[MemberResourcePermission] = []
        self.error: Exception | None = None

    async def find_active(
        self,
        member_id: UUID,
        action: Action,
        subject: ResourceSubject,
        resource_path: str,
        now: datetime,
    ) -> MemberResourcePermission | None:
        if self.error:
            raise self.error
        for o in self._store:
            if (
                o.member_id == member_id
                and o.permission.matches(action, subject)
                and o.resource_path == resource_path
                and not o.is_expired(now)
            ):
                return o
        return None

    async def list_by_path_prefix(
        self, member_id: UUID, path_prefix: str
    ) -> list[MemberResourcePermission]:
        return sorted(
            (
                o
                for o in self._store
                if o.member_id == member_id
                and (o.resource_path == path_prefix or o.resource_path.startswith(path_prefix + "."))
            ),
            key=lambda o: o.resource_path,
        )

    def add(
        self,
        member_id: UUID,
        action: Action,
        subject: ResourceSubject,
        resource_path: str,
        is_allowed: bool = True,
        expires_at: datetime | None = None,
    ) -> MemberResourcePermission:
        """Helper to add an override for tests."""
        override = MemberResourcePermission(
            id=uuid4(),
            member_id=member_id,
            permission=Permission(action=action, subject=subject),
            resource_path=resource_path,
            is_allowed=is_allowed,
            expires_at=expires_at,
        )
        self._store.append(override)
        return override


class FakeWorkspaceMemberRepository:
    """In-memory workspace member repository."""

    def __init__(self) -> None:
        self._by_id: dict[UUID, WorkspaceMember] = {}
        self.error: Exception | None = None

    async def get_with_roles(self, member_id: UUID) -> WorkspaceMember | None:
        if self.error:
            raise self.error
        return self._by_id.get(member_id)

    def add(self, member: WorkspaceMember) -> WorkspaceMember:
        """Helper to add member for tests."""
        self._by_id[member.id] = member
        return member


# --- Fake UnitOfWork ---


class FakeUnitOfWork:
    """In-memory Unit of Work with fake repositories."""

    def __init__(self) -> None:
        self.resources = FakeResourceRepository()
        self.member_permissions = FakeMemberResourcePermissionRepository()
        self.members = FakeWorkspaceMemberRepository()

    async def commit(self) -> None:
        pass

    async def rollback(self) -> None:
        pass


# --- Builders ---


def system_role(name: SystemRole) -> Role:
    """System role with its seeded grants."""
    return Role(
        id=uuid4(),
        name=name.value,
        description=SYSTEM_ROLE_DESCRIPTIONS[name],
        grants=[
            RoleGrant(permission=Permission(action=a, subject=s))
            for a, s in system_role_grants(name)
        ],
    )


def workspace_role(
    workspace_id: UUID, name: str, grants: list[tuple[Action, ResourceSubject]]
) -> Role:
    """Workspace-scoped role with the given grants."""
    return Role(
        id=uuid4(),
        name=name,
        workspace_id=workspace_id,
        grants=[RoleGrant(permission=Permission(action=a, subject=s)) for a, s in grants],
    )


class World:
    """Workspace fixture: members, resources and overrides on one FakeUnitOfWork."""

    def __init__(self) -> None:
        self.uow = FakeUnitOfWork()
        self.workspace_id = uuid4()
        self.root = "ws1"

    def member(self, *roles: Role) -> UUID:
        member = WorkspaceMember(
            id=uuid4(), user_id=uuid4(), workspace_id=self.workspace_id, roles=list(roles)
        )
        return self.uow.members.add(member).id

    def space(
        self,
        owner_id: UUID,
        segment: str = "space1",
        visibility: ResourceVisibility = ResourceVisibility.PUBLIC,
    ) -> Resource:
        return self.uow.resources.add(
            Resource(
                id=uuid4(),
                workspace_id=self.workspace_id,
                owner_id=owner_id,
                type=ResourceType.SPACE,
                path=f"{self.root}.{segment}",
                title=segment,
                visibility=visibility,
            )
        )

    def meeting(
        self,
        space: Resource,
        owner_id: UUID,
        segment: str = "meeting1",
        visibility: ResourceVisibility = ResourceVisibility.PUBLIC,
    ) -> Resource:
        return self.uow.resources.add(
            Resource(
                id=uuid4(),
                workspace_id=self.workspace_id,
                owner_id=owner_id,
                type=ResourceType.MEETING,
                path=f"{space.path}.{segment}",
                title=segment,
                visibility=visibility,
            )
        )

    def override(
        self,
        member_id: UUID,
        action: Action,
        resource: Resource,
        is_allowed: bool = True,
        expires_at: datetime | None = None,
        subject: ResourceSubject | None = None,
    ) -> MemberResourcePermission:
        return self.uow.member_permissions.add(
            member_id,
            action,
            subject or resource.subject,
            resource.path,
            is_allowed=is_allowed,
            expires_at=expires_at,
        )

    def uow_factory(self):
        """Factory yielding this world's UoW for every check."""

        @asynccontextmanager
        async def _factory() -> AsyncIterator[FakeUnitOfWork]:
            yield self.uow

        return _factory


# --- Fixtures ---


@pytest.fixture
def world() -> World:
    """Fresh in-memory workspace for each test."""
    return World()


@pytest.fixture
def evaluator(world: World) -> ResourcePermissionEvaluator:
    """Evaluator over the world's UoW with a fixed clock."""
    return ResourcePermissionEvaluator(world.uow_factory(), clock=lambda: NOW)


@pytest.fixture
def mock_permission_evaluator():
    """AsyncMock for PermissionEvaluator - allows by default."""
    from unittest.mock import AsyncMock

    mock = AsyncMock()
    mock.has_permission.return_value = True
    mock.has_space_permission.return_value = True
    mock.has_meeting_permission.return_value = True
    return mock
