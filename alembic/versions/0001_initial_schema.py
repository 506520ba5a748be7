"""Initial schema

Revision ID: 0001_initial_schema
Revises:
Create Date: 2025-12-01 00:00:00
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "0001_initial_schema"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "matches",
        sa.Column("spinner_id", sa.String(), primary_key=True),
        sa.Column("receiver_id", sa.String(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.UniqueConstraint("receiver_id", name="uq_matches_receiver_id"),
    )

    op.create_table(
        "assignment_history",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("spinner_id", sa.String(), nullable=False),
        sa.Column("receiver_id", sa.String(), nullable=False),
        sa.Column("archived_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index("ix_assignment_history_spinner_id", "assignment_history", ["spinner_id"])


def downgrade() -> None:
    op.drop_index("ix_assignment_history_spinner_id", table_name="assignment_history")
    op.drop_table("assignment_history")
    op.drop_table("matches")
