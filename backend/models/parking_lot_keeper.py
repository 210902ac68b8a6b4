"""ParkingLotKeeper model: many keepers per parking lot, many parking lots per keeper."""
from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from models import Base


class ParkingLotKeeper(Base):
    """parking_lot_keeper table: one row per (parking lot, keeper user) pair."""

    __tablename__ = "parking_lot_keeper"

    parking_lot_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("parking_lot.id", ondelete="CASCADE"),
        primary_key=True,
    )
    user_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("app_user.id", ondelete="CASCADE"),
        primary_key=True,
    )
