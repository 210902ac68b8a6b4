"""Parking lot repository: save, get, update, detail join, list by owner."""
import uuid
from typing import Any, Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from models.parking_lot import ParkingLot
from models.parking_lot_keeper import ParkingLotKeeper
from models.user import User
from schemas.parking_lots import UpdateParkingLot


def save(session: Session, parking_lot: ParkingLot) -> ParkingLot:
    """Insert a new parking lot, commit, and return it."""
    session.add(parking_lot)
    session.commit()
    session.refresh(parking_lot)
    return parking_lot


def get_parking_lot(session: Session, parking_lot_id: uuid.UUID | str) -> Optional[ParkingLot]:
    """Return a parking lot by id or None."""
    return session.get(ParkingLot, str(parking_lot_id))


def update(
    session: Session,
    parking_lot_id: uuid.UUID | str,
    partial: UpdateParkingLot,
) -> Optional[ParkingLot]:
    """Apply the supplied columns of partial. Flushes only; the caller commits. None if not found."""
    parking_lot = get_parking_lot(session, parking_lot_id)
    if parking_lot is None:
        return None
    for column, value in partial.changes().items():
        setattr(parking_lot, column, value)
    session.flush()
    return parking_lot


def detail(session: Session, parking_lot_id: uuid.UUID | str) -> list[Any]:
    """Parking lot joined with its keepers: one row per keeper, keeper columns None when unassigned.

    Returns an empty list when the parking lot does not exist.
    """
    result = session.execute(
        select(
            ParkingLot.id,
            ParkingLot.area_name,
            ParkingLot.address,
            ParkingLot.image_url,
            ParkingLot.car_cost,
            ParkingLot.motor_cost,
            ParkingLot.owner_id,
            ParkingLot.created_at,
            ParkingLot.updated_at,
            User.id.label("keeper_id"),
            User.name.label("keeper_name"),
        )
        .outerjoin(ParkingLotKeeper, ParkingLotKeeper.parking_lot_id == ParkingLot.id)
        .outerjoin(User, User.id == ParkingLotKeeper.user_id)
        .where(ParkingLot.id == str(parking_lot_id))
        .order_by(User.name)
    )
    return list(result.all())


def find_by_owner(session: Session, owner_id: uuid.UUID | str) -> list[tuple[ParkingLot, int]]:
    """Return (parking lot, keeper count) for every parking lot owned by owner_id."""
    result = session.execute(
        select(ParkingLot, func.count(ParkingLotKeeper.user_id).label("keeper_count"))
        .outerjoin(ParkingLotKeeper, ParkingLotKeeper.parking_lot_id == ParkingLot.id)
        .where(ParkingLot.owner_id == str(owner_id))
        .group_by(ParkingLot.id)
        .order_by(ParkingLot.area_name)
    )
    return [(row[0], row[1]) for row in result.all()]
