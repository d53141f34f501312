"""Create player_stats and users tables

Revision ID: 20260301_initial
Revises:
Create Date: 2026-03-01

This migration creates the two key-value tables:
- player_stats: one schema-less JSON stats document per username
- users: account record holding the selected character colour
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "20260301_initial"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create player_stats and users."""
    op.create_table(
        "player_stats",
        sa.Column("username", sa.String(), primary_key=True),
        sa.Column("record", sa.JSON(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=True),
    )
    op.create_table(
        "users",
        sa.Column("username", sa.String(), primary_key=True),
        sa.Column("character", sa.String(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=True),
    )


def downgrade() -> None:
    """Drop users and player_stats."""
    op.drop_table("users")
    op.drop_table("player_stats")
