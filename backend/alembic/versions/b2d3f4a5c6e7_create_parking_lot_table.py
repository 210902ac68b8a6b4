"""create_parking_lot_table

Revision ID: b2d3f4a5c6e7
Revises: a1c2e3f4b5d6
Create Date: 2026-10-12 09:31:47.602913

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'b2d3f4a5c6e7'
down_revision: Union[str, Sequence[str], None] = 'a1c2e3f4b5d6'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "parking_lot",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("area_name", sa.String(length=255), nullable=False),
        sa.Column("address", sa.String(length=512), nullable=False),
        sa.Column("image_url", sa.String(length=1024), nullable=False),
        sa.Column("car_cost", sa.Float(), nullable=False),
        sa.Column("motor_cost", sa.Float(), nullable=False),
        sa.Column("owner_id", sa.String(length=36), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=True),
        sa.Column("updated_at", sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(["owner_id"], ["app_user.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_parking_lot_owner_id", "parking_lot", ["owner_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("ix_parking_lot_owner_id", table_name="parking_lot")
    op.drop_table("parking_lot", if_exists=True)
