"""initial_schema

Revision ID: 0001
Revises:
Create Date: 2026-10-19

Creates the tables for AfterWork Buddy: users (one preference/status
record per chat user) and health (heartbeat row).
"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # --- users ---
    op.create_table(
        "users",
        sa.Column("user_id", sa.String(64), primary_key=True),
        sa.Column("name", sa.String(200), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("notifications", sa.Boolean, nullable=True),
        sa.Column("channels", sa.JSON, nullable=True),
        sa.Column("work_start", sa.String(5), nullable=True),
        sa.Column("work_end", sa.String(5), nullable=True),
        sa.Column("manual_override", sa.Boolean, nullable=True),
        sa.Column("override_until", sa.DateTime(timezone=True), nullable=True),
        sa.Column("current_status", sa.String(100), nullable=True),
        sa.Column("last_processed", sa.DateTime(timezone=True), nullable=True),
    )

    # --- health ---
    op.create_table(
        "health",
        sa.Column("check_id", sa.String(32), primary_key=True),
        sa.Column("timestamp", sa.DateTime(timezone=True), nullable=False),
    )


def downgrade() -> None:
    op.drop_table("health")
    op.drop_table("users")
