"""Parking lot API routes."""
import logging
import uuid
from pathlib import Path

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from api.middleware import RequestBodyLoggingRoute
from db import get_db, transaction
from models.user import Role
from repositories import parking_lot_repository, user_repository
from schemas.envelope import SuccessResponse
from schemas.parking_lots import (
    CreateParkingLotPayload,
    DetailParkingLot,
    KeeperOnDetailParkingLot,
    ParkingLotResponse,
    ParkingLotWithCountOfKeeper,
    UpdateParkingLotPayload,
)
from utils import config
from utils.errors import BadRequest, NotFound

LOG = logging.getLogger(__name__)

router = APIRouter(
    prefix="/parking-lot",
    tags=["parking-lot"],
    route_class=RequestBodyLoggingRoute,
)


def _ensure_park_owner(db: Session, owner_id: uuid.UUID) -> None:
    """Raise unless owner_id is an existing user with the ParkOwner role."""
    user = user_repository.find_one_by_id(db, owner_id)
    if user is None:
        raise NotFound("User not found")
    if user.role != Role.PARK_OWNER.value:
        LOG.info("Rejected owner %s with role %s", owner_id, user.role)
        raise BadRequest("Related user is not having owner role")


def _image_exists(file_name: str) -> bool:
    """True if file_name is a plain file name present in the uploaded files directory."""
    if not file_name or Path(file_name).name != file_name:
        return False
    return (Path(config.FILES_DIR) / file_name).is_file()


def fold_detail(rows) -> DetailParkingLot:
    """Collapse detail join rows into one parking lot with its keepers.

    Scalars come from the last row; every row with both a keeper id and name
    becomes a keeper. No rows gives all-None scalars and no keepers.
    """
    detail = DetailParkingLot()
    keepers: list[KeeperOnDetailParkingLot] = []
    for row in rows:
        detail = DetailParkingLot(
            id=row.id,
            area_name=row.area_name,
            address=row.address,
            image_url=row.image_url,
            car_cost=row.car_cost,
            motor_cost=row.motor_cost,
            owner_id=row.owner_id,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )
        if row.keeper_id is not None and row.keeper_name is not None:
            keepers.append(KeeperOnDetailParkingLot(id=row.keeper_id, name=row.keeper_name))
    detail.keepers = keepers
    return detail


@router.post(
    "/",
    response_model=SuccessResponse[ParkingLotResponse],
    status_code=status.HTTP_201_CREATED,
)
def create(
    body: CreateParkingLotPayload,
    db: Session = Depends(get_db),
) -> SuccessResponse[ParkingLotResponse]:
    """Create a parking lot owned by a ParkOwner user."""
    _ensure_park_owner(db, body.owner_id)
    # TODO: check body.file_name against FILES_DIR once create accepts uploaded images.
    parking_lot = parking_lot_repository.save(db, body.into_parking_lot())
    LOG.info("Created parking lot %s for owner %s", parking_lot.id, parking_lot.owner_id)
    return SuccessResponse.ok(ParkingLotResponse.model_validate(parking_lot))


@router.patch("/{parking_lot_id}", response_model=SuccessResponse[ParkingLotResponse])
def update(
    parking_lot_id: uuid.UUID,
    body: UpdateParkingLotPayload,
    db: Session = Depends(get_db),
) -> SuccessResponse[ParkingLotResponse]:
    """Partially update a parking lot. A non-empty park_keeper_ids replaces all keepers."""
    if body.owner_id is not None:
        _ensure_park_owner(db, body.owner_id)
    if body.file_name is not None and not _image_exists(body.file_name):
        raise BadRequest("Image not found")
    if parking_lot_repository.get_parking_lot(db, parking_lot_id) is None:
        raise NotFound("Parking lot not found")

    with transaction(db):
        if body.park_keeper_ids:
            removed = user_repository.remove_parking_lot(db, parking_lot_id)
            user_repository.update_parking_lot(db, parking_lot_id, body.park_keeper_ids)
            LOG.info(
                "Replaced keepers of parking lot %s: %d removed, %d assigned",
                parking_lot_id,
                removed,
                len(body.park_keeper_ids),
            )
        parking_lot = parking_lot_repository.update(db, parking_lot_id, body.into_update_parking_lot())
        if parking_lot is None:
            raise NotFound("Parking lot not found")
    return SuccessResponse.ok(ParkingLotResponse.model_validate(parking_lot))


@router.get("/{parking_lot_id}", response_model=SuccessResponse[DetailParkingLot])
def detail(parking_lot_id: uuid.UUID, db: Session = Depends(get_db)) -> SuccessResponse[DetailParkingLot]:
    """Parking lot with its keepers. A missing parking lot is returned with every field null."""
    rows = parking_lot_repository.detail(db, parking_lot_id)
    return SuccessResponse.ok(fold_detail(rows))


@router.get("/owner/{owner_id}", response_model=SuccessResponse[list[ParkingLotWithCountOfKeeper]])
def get_by_owner(
    owner_id: uuid.UUID,
    db: Session = Depends(get_db),
) -> SuccessResponse[list[ParkingLotWithCountOfKeeper]]:
    """List parking lots of an owner with their keeper counts. Unknown owners get an empty list."""
    rows = parking_lot_repository.find_by_owner(db, owner_id)
    return SuccessResponse.ok(
        [
            ParkingLotWithCountOfKeeper(
                **ParkingLotResponse.model_validate(parking_lot).model_dump(),
                keeper_count=keeper_count,
            )
            for parking_lot, keeper_count in rows
        ]
    )
