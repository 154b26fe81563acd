"""Initial schema - resource tree, permission catalog, roles and member overrides.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa

from permtree.domain.value_objects import (
    SYSTEM_ROLE_DESCRIPTIONS,
    SYSTEM_ROLE_GRANTS,
    Action,
    ResourceSubject,
)

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.execute('CREATE EXTENSION IF NOT EXISTS "pgcrypto"')

    op.create_table(
        "workspace_member",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("workspace_id", sa.UUID(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index(
        "ix_workspace_member_workspace_user", "workspace_member", ["workspace_id", "user_id"], unique=True
    )

    op.create_table(
        "permission",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("action", sa.String(20), nullable=False),
        sa.Column("subject", sa.String(50), nullable=False),
    )
    op.create_index("ix_permission_action_subject", "permission", ["action", "subject"], unique=True)

    op.create_table(
        "role",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("workspace_id", sa.UUID(), nullable=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
    )
    op.create_index("ix_role_workspace_name", "role", ["workspace_id", "name"], unique=True)
    # NULL workspace_id does not collide in a unique index; system roles need their own.
    op.create_index(
        "ix_role_system_name",
        "role",
        ["name"],
        unique=True,
        postgresql_where=sa.text("workspace_id IS NULL"),
    )

    op.create_table(
        "role_permission",
        sa.Column("role_id", sa.UUID(), sa.ForeignKey("role.id", ondelete="CASCADE"), primary_key=True),
        sa.Column(
            "permission_id", sa.Integer(), sa.ForeignKey("permission.id", ondelete="CASCADE"), primary_key=True
        ),
        sa.Column("conditions", sa.JSON(), nullable=True),
    )

    op.create_table(
        "workspace_member_role",
        sa.Column("id", sa.UUID(), primary_key=True, server_default=sa.text("gen_random_uuid()")),
        sa.Column(
            "workspace_member_id",
            sa.UUID(),
            sa.ForeignKey("workspace_member.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("role_id", sa.UUID(), sa.ForeignKey("role.id", ondelete="CASCADE"), nullable=False),
    )
    op.create_index(
        "ix_workspace_member_role_member_role",
        "workspace_member_role",
        ["workspace_member_id", "role_id"],
        unique=True,
    )

    op.create_table(
        "resource",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("workspace_id", sa.UUID(), nullable=False),
        sa.Column("owner_id", sa.UUID(), sa.ForeignKey("workspace_member.id"), nullable=False),
        sa.Column("type", sa.String(20), nullable=False),
        sa.Column("title", sa.String(255), nullable=False, server_default=""),
        sa.Column("visibility", sa.String(20), nullable=False, server_default="public"),
        sa.Column("path", sa.Text(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_resource_path", "resource", ["path"], unique=True)
    op.create_index("ix_resource_type_id", "resource", ["type", "id"])

    op.create_table(
        "member_resource_permission",
        sa.Column("id", sa.UUID(), primary_key=True, server_default=sa.text("gen_random_uuid()")),
        sa.Column(
            "workspace_member_id",
            sa.UUID(),
            sa.ForeignKey("workspace_member.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("permission_id", sa.Integer(), sa.ForeignKey("permission.id"), nullable=False),
        sa.Column("resource_path", sa.Text(), nullable=False),
        sa.Column("is_allowed", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("expires_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index(
        "ix_member_resource_permission_unique",
        "member_resource_permission",
        ["workspace_member_id", "permission_id", "resource_path"],
        unique=True,
    )
    op.create_index(
        "ix_member_resource_permission_path",
        "member_resource_permission",
        ["resource_path"],
        postgresql_ops={"resource_path": "text_pattern_ops"},
    )

    permission_table = sa.table(
        "permission",
        sa.column("action", sa.String),
        sa.column("subject", sa.String),
    )
    op.bulk_insert(
        permission_table,
        [{"action": a.value, "subject": s.value} for s in ResourceSubject for a in Action],
    )

    for role, description in SYSTEM_ROLE_DESCRIPTIONS.items():
        op.execute(
            sa.text(
                "INSERT INTO role (id, workspace_id, name, description) "
                "VALUES (gen_random_uuid(), NULL, :name, :description)"
            ).bindparams(name=role.value, description=description)
        )
        for action, subject in SYSTEM_ROLE_GRANTS[role]:
            op.execute(
                sa.text(
                    "INSERT INTO role_permission (role_id, permission_id) "
                    "SELECT r.id, p.id FROM role r, permission p "
                    "WHERE r.workspace_id IS NULL AND r.name = :name "
                    "AND p.action = :action AND p.subject = :subject"
                ).bindparams(name=role.value, action=action.value, subject=subject.value)
            )


def downgrade() -> None:
    op.drop_table("member_resource_permission")
    op.drop_table("resource")
    op.drop_table("workspace_member_role")
    op.drop_table("role_permission")
    op.drop_table("role")
    op.drop_table("permission")
    op.drop_table("workspace_member")
