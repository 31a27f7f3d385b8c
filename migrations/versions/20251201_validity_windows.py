"""Add validity_windows table with a TSTZRANGE period column

Revision ID: 20251201_validity_windows
Revises:
Create Date: 2025-12-01
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import TSTZRANGE


revision = "20251201_validity_windows"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "validity_windows",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("label", sa.String(length=255), nullable=False),
        sa.Column("period", TSTZRANGE(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_validity_windows_id", "validity_windows", ["id"])
    op.create_index(
        "ix_validity_windows_period",
        "validity_windows",
        ["period"],
        postgresql_using="gist",
    )


def downgrade() -> None:
    op.drop_index("ix_validity_windows_period", table_name="validity_windows")
    op.drop_index("ix_validity_windows_id", table_name="validity_windows")
    op.drop_table("validity_windows")
