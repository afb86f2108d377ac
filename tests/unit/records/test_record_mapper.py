from __future__ import annotations

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[3] / "src"))

from rms.application.mappers.record_mapper import (
    build_record,
    from_record_document,
    to_camel,
    to_record_document,
    to_snake,
)
from rms.domain.common.ids import RecordId
from rms.domain.records.entities import Order, Reservation
from rms.domain.records.registry import ORDERS, RESERVATIONS


def test_case_conversion() -> None:
    assert to_camel("restaurant_id") == "restaurantId"
    assert to_camel("date_time") == "dateTime"
    assert to_camel("name") == "name"
    assert to_snake("restaurantId") == "restaurant_id"
    assert to_snake("dateTime") == "date_time"
    assert to_snake("name") == "name"


def test_build_record_uses_required_fields_only() -> None:
    order = build_record(
        ORDERS,
        record_id=RecordId("ord_001"),
        created_at=1700000000000,
        payload={
            "restaurantId": "rst_001",
            "items": ["itm_001", "itm_002"],
            "total": 21.5,
            "status": "delivered",
            "unexpected": True,
        },
    )
    assert isinstance(order, Order)
    assert order.id == "ord_001"
    assert order.items == ["itm_001", "itm_002"]
    assert order.status == "pending"
    assert order.created_at == 1700000000000


def test_document_uses_camel_case_keys() -> None:
    reservation = build_record(
        RESERVATIONS,
        record_id=RecordId("rsv_001"),
        created_at=5,
        payload={"restaurantId": "rst_001", "name": "Dana", "dateTime": "2026-11-01T19:30"},
    )
    assert to_record_document(reservation) == {
        "id": "rsv_001",
        "restaurantId": "rst_001",
        "name": "Dana",
        "dateTime": "2026-11-01T19:30",
        "createdAt": 5,
    }


def test_document_maps_back_to_equal_record() -> None:
    reservation = Reservation(
        id=RecordId("rsv_001"),
        restaurant_id="rst_001",  # type: ignore[arg-type]
        name="Dana",
        date_time="2026-11-01T19:30",
        created_at=5,
    )
    document = to_record_document(reservation)
    assert from_record_document(Reservation, document) == reservation
