"""Individual resource permission - per-member override on an exact path."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from permtree.domain.entities.permission import Permission


@dataclass
class MemberResourcePermission:
    """Allow or deny override for one member, permission and resource path."""

    id: UUID
    member_id: UUID
    permission: Permission
    resource_path: str
    is_allowed: bool = True
    expires_at: datetime | None = None
    created_at: datetime | None = None

    def is_expired(self, now: datetime | None = None) -> bool:
        if self.expires_at is None:
            return False
        return self.expires_at <= (now or datetime.now(UTC))

    def is_active(self, now: datetime | None = None) -> bool:
        """Unexpired overrides are active, whether they allow or deny."""
        return not self.is_expired(now)
