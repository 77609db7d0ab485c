"""Initial schema - roles, users, groups, membership and permission overrides.

Revision ID: 001
Revises:
Create Date: 2026-10-18

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

from pmguard.domain.defaults import system_roles

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    role = op.create_table(
        "role",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("description", sa.String(255), nullable=True),
        sa.Column("is_system", sa.Boolean(), nullable=False, server_default=sa.false()),
        # {entity_type: {create, read, update, delete}}
        sa.Column("permissions", postgresql.JSONB(), nullable=False, server_default="{}"),
    )
    op.create_index("ix_role_name", "role", ["name"], unique=True)

    op.create_table(
        "app_user",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("role_id", sa.String(64), sa.ForeignKey("role.id"), nullable=False),
        sa.Column("first_name", sa.String(100), nullable=True),
        sa.Column("last_name", sa.String(100), nullable=True),
        sa.Column("email", sa.String(255), nullable=True),
    )

    op.create_table(
        "user_group",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("description", sa.String(255), nullable=True),
    )

    op.create_table(
        "group_member",
        sa.Column("group_id", sa.String(64), sa.ForeignKey("user_group.id", ondelete="CASCADE"), primary_key=True),
        sa.Column("user_id", sa.String(64), sa.ForeignKey("app_user.id", ondelete="CASCADE"), primary_key=True),
    )
    op.create_index("ix_group_member_user_id", "group_member", ["user_id"])

    op.create_table(
        "group_permission_override",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("group_id", sa.String(64), sa.ForeignKey("user_group.id", ondelete="CASCADE"), nullable=False),
        sa.Column("entity_type", sa.String(50), nullable=False),
        sa.Column("scope", sa.String(20), nullable=False),
        sa.Column("specific_entity_ids", postgresql.ARRAY(sa.String(64)), nullable=False, server_default="{}"),
        # Only the actions the override speaks to: {action: bool}
        sa.Column("permissions", postgresql.JSONB(), nullable=False, server_default="{}"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.CheckConstraint("scope IN ('all', 'specific')", name="ck_override_scope"),
        sa.CheckConstraint(
            "scope = 'all' OR cardinality(specific_entity_ids) > 0",
            name="ck_override_specific_ids",
        ),
    )
    op.create_index(
        "ix_group_permission_override_group_entity",
        "group_permission_override",
        ["group_id", "entity_type"],
    )

    op.bulk_insert(
        role,
        [
            {
                "id": r.id,
                "name": r.name,
                "description": r.description,
                "is_system": r.is_system,
                "permissions": {k.value: v.to_dict() for k, v in r.permissions.items()},
            }
            for r in system_roles()
        ],
    )


def downgrade() -> None:
    op.drop_table("group_permission_override")
    op.drop_table("group_member")
    op.drop_table("user_group")
    op.drop_table("app_user")
    op.drop_table("role")
