"""User repository: create, lookup, keeper assignment."""
import uuid
from datetime import datetime, timezone
from typing import Iterable, Optional

from sqlalchemy import delete
from sqlalchemy.orm import Session

from models.parking_lot_keeper import ParkingLotKeeper
from models.user import Role, User


def create_user(session: Session, name: str, role: Role, user_id: str | None = None) -> User:
    """Create a user, commit, and return it. Id is generated if not provided."""
    user = User(
        id=user_id or str(uuid.uuid4()),
        name=name,
        role=role.value,
        created_at=datetime.now(timezone.utc).replace(tzinfo=None),
    )
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


def find_one_by_id(session: Session, user_id: uuid.UUID | str) -> Optional[User]:
    """Return a user by id or None."""
    return session.get(User, str(user_id))


def remove_parking_lot(session: Session, parking_lot_id: uuid.UUID | str) -> int:
    """Unassign every keeper from a parking lot. Flushes only; the caller commits. Returns rows removed."""
    result = session.execute(
        delete(ParkingLotKeeper)
        .where(ParkingLotKeeper.parking_lot_id == str(parking_lot_id))
        .execution_options(synchronize_session="fetch")
    )
    session.flush()
    return result.rowcount or 0


def update_parking_lot(
    session: Session,
    parking_lot_id: uuid.UUID | str,
    keeper_ids: Iterable[uuid.UUID | str],
) -> None:
    """Assign keepers to a parking lot. Flushes only; the caller commits."""
    # Duplicate ids in one request collapse to one assignment.
    for keeper_id in dict.fromkeys(str(k) for k in keeper_ids):
        session.add(ParkingLotKeeper(parking_lot_id=str(parking_lot_id), user_id=keeper_id))
    session.flush()
