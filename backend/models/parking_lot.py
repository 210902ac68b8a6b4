"""ParkingLot model for DB persistence."""
import uuid
from datetime import datetime

from sqlalchemy import DateTime, Float, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from models import Base


class ParkingLot(Base):
    """parking_lot table: id, area_name, address, image_url, car_cost, motor_cost, owner_id, timestamps."""

    __tablename__ = "parking_lot"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid.uuid4()),
    )
    area_name: Mapped[str] = mapped_column(String(255), nullable=False)
    address: Mapped[str] = mapped_column(String(512), nullable=False)
    image_url: Mapped[str] = mapped_column(String(1024), nullable=False)
    car_cost: Mapped[float] = mapped_column(Float(), nullable=False)
    motor_cost: Mapped[float] = mapped_column(Float(), nullable=False)
    owner_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("app_user.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    created_at: Mapped[datetime | None] = mapped_column(DateTime(), nullable=True)
    updated_at: Mapped[datetime | None] = mapped_column(DateTime(), nullable=True)
