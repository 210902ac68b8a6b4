"""create_parking_lot_keeper_table

Revision ID: c3e4a5b6d7f8
Revises: b2d3f4a5c6e7
Create Date: 2026-10-13

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = "c3e4a5b6d7f8"
down_revision: Union[str, Sequence[str], None] = "b2d3f4a5c6e7"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create parking_lot_keeper association table."""
    op.create_table(
        "parking_lot_keeper",
        sa.Column("parking_lot_id", sa.String(length=36), nullable=False),
        sa.Column("user_id", sa.String(length=36), nullable=False),
        sa.ForeignKeyConstraint(["parking_lot_id"], ["parking_lot.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_id"], ["app_user.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("parking_lot_id", "user_id"),
    )


def downgrade() -> None:
    """Drop parking_lot_keeper table."""
    op.drop_table("parking_lot_keeper", if_exists=True)
