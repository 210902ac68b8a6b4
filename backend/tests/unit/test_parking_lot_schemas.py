"""Unit tests: parking lot payload conversions."""
import uuid

import pytest
from pydantic import ValidationError

from schemas.parking_lots import CreateParkingLotPayload, UpdateParkingLot, UpdateParkingLotPayload
from utils import config

pytestmark = pytest.mark.unit

OWNER_ID = uuid.uuid4()


def _create_payload(**overrides) -> CreateParkingLotPayload:
    data = {
        "area_name": "North Garage",
        "address": "1 North St",
        "file_name": "north.png",
        "car_cost": 5000.0,
        "motor_cost": 2000.0,
        "owner_id": str(OWNER_ID),
    }
    data.update(overrides)
    return CreateParkingLotPayload(**data)


def test_into_parking_lot_generates_identity_and_timestamps():
    """into_parking_lot sets a fresh UUID, created_at, and leaves updated_at empty."""
    lot = _create_payload().into_parking_lot()
    assert uuid.UUID(lot.id).version == 4
    assert lot.created_at is not None
    assert lot.updated_at is None
    assert lot.owner_id == str(OWNER_ID)
    assert lot.car_cost == 5000.0


def test_into_parking_lot_ids_are_unique():
    payload = _create_payload()
    assert payload.into_parking_lot().id != payload.into_parking_lot().id


def test_into_parking_lot_ignores_file_name(monkeypatch):
    """image_url is always the configured placeholder."""
    monkeypatch.setattr(config, "PLACEHOLDER_IMAGE_URL", "placeholder://image")
    assert _create_payload(file_name="other.png").into_parking_lot().image_url == "placeholder://image"
    assert _create_payload(file_name=None).into_parking_lot().image_url == "placeholder://image"


def test_create_payload_rejects_bad_owner_id():
    with pytest.raises(ValidationError):
        _create_payload(owner_id="not-a-uuid")


def test_into_update_parking_lot_maps_file_name_and_refreshes_updated_at():
    """file_name becomes image_url; updated_at is always set."""
    partial = UpdateParkingLotPayload(file_name="south.png", car_cost=10.5).into_update_parking_lot()
    assert partial.image_url == "south.png"
    assert partial.car_cost == 10.5
    assert partial.updated_at is not None


def test_update_changes_only_contains_supplied_fields():
    """Absent fields are left out of the column changes."""
    changes = UpdateParkingLotPayload(area_name="Renamed").into_update_parking_lot().changes()
    assert set(changes) == {"area_name", "updated_at"}
    assert changes["area_name"] == "Renamed"


def test_update_owner_id_stored_as_string():
    owner_id = uuid.uuid4()
    partial = UpdateParkingLotPayload(owner_id=owner_id).into_update_parking_lot()
    assert partial.owner_id == str(owner_id)


def test_empty_update_parking_lot_has_no_changes():
    assert UpdateParkingLot().changes() == {}
