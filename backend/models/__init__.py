"""SQLAlchemy declarative base and the parking lot service models."""
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for app_user, parking_lot and parking_lot_keeper."""


# Imported after Base so every table is registered whenever models is imported.
from models.user import Role, User  # noqa: E402
from models.parking_lot import ParkingLot  # noqa: E402
from models.parking_lot_keeper import ParkingLotKeeper  # noqa: E402

__all__ = ["Base", "ParkingLot", "ParkingLotKeeper", "Role", "User"]
