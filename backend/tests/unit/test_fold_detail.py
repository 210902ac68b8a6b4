"""Unit tests: folding detail join rows into one parking lot with keepers."""
import uuid
from datetime import datetime
from types import SimpleNamespace

import pytest

from api.parking_lots import fold_detail

pytestmark = pytest.mark.unit

LOT_ID = str(uuid.uuid4())
OWNER_ID = str(uuid.uuid4())


def _row(keeper_id=None, keeper_name=None, area_name="Central"):
    return SimpleNamespace(
        id=LOT_ID,
        area_name=area_name,
        address="5 Center Rd",
        image_url="some url",
        car_cost=3000.0,
        motor_cost=1000.0,
        owner_id=OWNER_ID,
        created_at=datetime(2026, 1, 2, 3, 4, 5),
        updated_at=None,
        keeper_id=keeper_id,
        keeper_name=keeper_name,
    )


def test_no_rows_gives_all_none_and_empty_keepers():
    detail = fold_detail([])
    assert detail.id is None
    assert detail.area_name is None
    assert detail.owner_id is None
    assert detail.created_at is None
    assert detail.keepers == []


def test_row_without_keeper_gives_empty_keepers():
    detail = fold_detail([_row()])
    assert str(detail.id) == LOT_ID
    assert detail.area_name == "Central"
    assert detail.keepers == []


def test_each_keeper_row_becomes_a_keeper():
    k1, k2 = str(uuid.uuid4()), str(uuid.uuid4())
    detail = fold_detail([_row(k1, "Ann"), _row(k2, "Bob")])
    assert [(str(k.id), k.name) for k in detail.keepers] == [(k1, "Ann"), (k2, "Bob")]
    assert str(detail.owner_id) == OWNER_ID


def test_keeper_rows_missing_id_or_name_are_skipped():
    k1 = str(uuid.uuid4())
    detail = fold_detail([_row(k1, None), _row(None, "Ghost"), _row(k1, "Ann")])
    assert len(detail.keepers) == 1
    assert detail.keepers[0].name == "Ann"


def test_scalars_come_from_last_row():
    detail = fold_detail([_row(area_name="First"), _row(area_name="Last")])
    assert detail.area_name == "Last"
