"""Pydantic schemas for parking lot API."""
import uuid
from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict

from models.parking_lot import ParkingLot
from utils import config


def _utcnow() -> datetime:
    """Current UTC time as a naive datetime (stored columns are timezone-less)."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class CreateParkingLotPayload(BaseModel):
    """Payload for creating a parking lot."""

    area_name: str
    address: str
    file_name: str | None = None
    car_cost: float
    motor_cost: float
    owner_id: uuid.UUID

    def into_parking_lot(self) -> ParkingLot:
        """Build a new, unsaved row: fresh id and created_at, placeholder image_url."""
        return ParkingLot(
            id=str(uuid.uuid4()),
            area_name=self.area_name,
            address=self.address,
            image_url=config.PLACEHOLDER_IMAGE_URL,
            car_cost=self.car_cost,
            motor_cost=self.motor_cost,
            owner_id=str(self.owner_id),
            created_at=_utcnow(),
            updated_at=None,
        )


class UpdateParkingLot(BaseModel):
    """Sparse column values for a parking lot row. None means leave the column unchanged."""

    area_name: str | None = None
    address: str | None = None
    image_url: str | None = None
    car_cost: float | None = None
    motor_cost: float | None = None
    owner_id: str | None = None
    updated_at: datetime | None = None

    def changes(self) -> dict:
        """Column -> value for every field that was supplied."""
        return self.model_dump(exclude_none=True)


class UpdateParkingLotPayload(BaseModel):
    """Payload for updating a parking lot (all fields optional)."""

    area_name: str | None = None
    address: str | None = None
    file_name: str | None = None
    car_cost: float | None = None
    motor_cost: float | None = None
    owner_id: uuid.UUID | None = None
    park_keeper_ids: list[uuid.UUID] | None = None

    def into_update_parking_lot(self) -> UpdateParkingLot:
        """Column changes for this payload; image_url comes from file_name and updated_at is refreshed."""
        return UpdateParkingLot(
            area_name=self.area_name,
            address=self.address,
            image_url=self.file_name,
            car_cost=self.car_cost,
            motor_cost=self.motor_cost,
            owner_id=str(self.owner_id) if self.owner_id is not None else None,
            updated_at=_utcnow(),
        )


class ParkingLotResponse(BaseModel):
    """Parking lot row in API responses."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    area_name: str
    address: str
    image_url: str
    car_cost: float
    motor_cost: float
    owner_id: uuid.UUID
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ParkingLotWithCountOfKeeper(ParkingLotResponse):
    """Parking lot plus the number of keepers assigned to it."""

    keeper_count: int = 0


class KeeperOnDetailParkingLot(BaseModel):
    id: uuid.UUID | None = None
    name: str | None = None


class DetailParkingLot(BaseModel):
    """Parking lot with its keepers. Every scalar is None when the lot does not exist."""

    id: uuid.UUID | None = None
    area_name: str | None = None
    address: str | None = None
    image_url: str | None = None
    car_cost: float | None = None
    motor_cost: float | None = None
    owner_id: uuid.UUID | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    keepers: list[KeeperOnDetailParkingLot] = []
