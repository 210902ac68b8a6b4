# Schemas package
from .envelope import ErrorResponse, SuccessResponse
from .health import HealthResponse
from .parking_lots import (
    CreateParkingLotPayload,
    DetailParkingLot,
    KeeperOnDetailParkingLot,
    ParkingLotResponse,
    ParkingLotWithCountOfKeeper,
    UpdateParkingLot,
    UpdateParkingLotPayload,
)

__all__ = [
    "CreateParkingLotPayload",
    "DetailParkingLot",
    "ErrorResponse",
    "HealthResponse",
    "KeeperOnDetailParkingLot",
    "ParkingLotResponse",
    "ParkingLotWithCountOfKeeper",
    "SuccessResponse",
    "UpdateParkingLot",
    "UpdateParkingLotPayload",
]
