"""User model: parking lot owners, keepers and customers."""
import enum
import uuid
from datetime import datetime

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from models import Base


class Role(str, enum.Enum):
    """User roles. Only PARK_OWNER users may own parking lots."""

    ADMIN = "Admin"
    PARK_OWNER = "ParkOwner"
    PARK_KEEPER = "ParkKeeper"
    CUSTOMER = "Customer"


class User(Base):
    """app_user table: id, name, role, created_at."""

    __tablename__ = "app_user"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid.uuid4()),
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    # Stored as the Role value string.
    role: Mapped[str] = mapped_column(String(32), nullable=False, default=Role.CUSTOMER.value)
    created_at: Mapped[datetime | None] = mapped_column(DateTime(), nullable=True)
