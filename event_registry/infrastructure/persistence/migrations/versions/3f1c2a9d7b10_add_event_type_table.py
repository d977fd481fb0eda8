"""add event_type table

Revision ID: 3f1c2a9d7b10
Revises:
Create Date: 2026-10-19 11:40:12.318204

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3f1c2a9d7b10"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema - add event_type table (tenant-scoped, soft-archived)."""
    op.create_table(
        "event_type",
        sa.Column("id", sa.String(length=32), nullable=False),
        sa.Column("tenant_id", sa.String(length=64), nullable=False),
        sa.Column("name", sa.String(length=256), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("archived", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("schemas", sa.JSON(), nullable=True),
        sa.Column("feature_flag", sa.String(length=256), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("tenant_id", "name", name="uq_event_type_tenant_name"),
    )
    op.create_index("ix_event_type_tenant_id", "event_type", ["tenant_id"])
    op.create_index(
        "ix_event_type_tenant_archived_name",
        "event_type",
        ["tenant_id", "archived", "name"],
    )


def downgrade() -> None:
    """Downgrade schema - remove event_type table."""
    op.drop_index("ix_event_type_tenant_archived_name", "event_type")
    op.drop_index("ix_event_type_tenant_id", "event_type")
    op.drop_table("event_type")
