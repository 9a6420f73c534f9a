"""create quest_records table

Revision ID: 20261018_0001
Revises:
Create Date: 2026-10-18 09:30:00
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision = "20261018_0001"
down_revision = None
branch_labels = None
depends_on = None

_JSON = sa.JSON().with_variant(postgresql.JSONB(astext_type=sa.Text()), "postgresql")


def upgrade() -> None:
    op.create_table(
        "quest_records",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column(
            "status",
            sa.String(length=32),
            nullable=False,
            comment="inactive, available, active, completed, failed",
        ),
        sa.Column("giver", sa.Text(), nullable=True),
        sa.Column("giver_data", _JSON, nullable=True),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("gmnotes", sa.Text(), nullable=False),
        sa.Column("playernotes", sa.Text(), nullable=False),
        sa.Column("image", sa.Text(), nullable=False),
        sa.Column("giver_name", sa.Text(), nullable=False),
        sa.Column("splash", sa.Text(), nullable=False),
        sa.Column("splash_pos", sa.String(length=16), nullable=False, comment="top, center, bottom"),
        sa.Column("splash_as_icon", sa.Boolean(), nullable=False),
        sa.Column("location", sa.Text(), nullable=True),
        sa.Column("priority", sa.Integer(), nullable=False),
        sa.Column("quest_type", sa.Text(), nullable=True),
        sa.Column("parent_id", sa.Uuid(), nullable=True),
        sa.Column("subquests", _JSON, nullable=False),
        sa.Column("tasks", _JSON, nullable=False),
        sa.Column("rewards", _JSON, nullable=False),
        sa.Column(
            "date",
            _JSON,
            nullable=True,
            comment="create/start/end timestamps; null when none were imported",
        ),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_quest_records"),
    )
    op.create_index("ix_quest_records_status", "quest_records", ["status"], unique=False)
    op.create_index("ix_quest_records_created_at", "quest_records", ["created_at"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_quest_records_created_at", table_name="quest_records")
    op.drop_index("ix_quest_records_status", table_name="quest_records")
    op.drop_table("quest_records")
