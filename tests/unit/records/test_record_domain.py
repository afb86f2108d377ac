from __future__ import annotations

import sys
from dataclasses import FrozenInstanceError
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[3] / "src"))

from rms.domain.common.clock import now_millis
from rms.domain.common.ids import RecordId, RestaurantId, new_record_id
from rms.domain.records.entities import ORDER_STATUS_PENDING, Order, Restaurant
from rms.domain.records.registry import (
    ENTITY_DEFINITIONS,
    RESTAURANTS,
    STAFF,
    EntityDefinition,
    get_definition,
)


def test_new_record_ids_are_unique_uuid_strings() -> None:
    ids = {new_record_id() for _ in range(1000)}
    assert len(ids) == 1000
    assert all(len(record_id) == 36 for record_id in ids)


def test_now_millis_is_epoch_milliseconds() -> None:
    value = now_millis()
    assert isinstance(value, int)
    assert value > 1_600_000_000_000


def test_registry_covers_every_entity_with_isolated_namespaces() -> None:
    names = [definition.name for definition in ENTITY_DEFINITIONS]
    assert names == [
        "restaurants",
        "staff",
        "menu",
        "orders",
        "reservations",
        "inventory",
        "expenses",
    ]
    namespaces = [definition.namespace for definition in ENTITY_DEFINITIONS]
    assert len(set(namespaces)) == len(namespaces)


def test_only_restaurants_are_not_owned_by_a_restaurant() -> None:
    unowned = [d.name for d in ENTITY_DEFINITIONS if not d.owned_by_restaurant]
    assert unowned == ["restaurants"]


def test_required_fields_keep_declared_order() -> None:
    assert RESTAURANTS.required_fields == ("name", "location")
    assert STAFF.required_fields == ("restaurantId", "name", "position", "schedule")


def test_get_definition_rejects_unknown_entity() -> None:
    assert get_definition("orders").label == "Order"
    with pytest.raises(KeyError):
        get_definition("tables")


def test_entity_definition_invariants() -> None:
    with pytest.raises(ValueError):
        EntityDefinition(
            name="broken",
            label="Broken",
            plural_label="broken",
            namespace=9,
            entity_type=Restaurant,
            required_fields=(),
        )
    with pytest.raises(ValueError):
        EntityDefinition(
            name="broken",
            label="Broken",
            plural_label="broken",
            namespace=-1,
            entity_type=Restaurant,
            required_fields=("name",),
        )


def test_order_starts_pending() -> None:
    order = Order(
        id=RecordId("ord_001"),
        restaurant_id=RestaurantId("rst_001"),
        items=["itm_001"],
        total=12.5,
        created_at=1,
    )
    assert order.status == ORDER_STATUS_PENDING


def test_records_are_immutable() -> None:
    restaurant = Restaurant(id=RecordId("rst_001"), name="Cafe A", location="Main St", created_at=1)
    with pytest.raises(FrozenInstanceError):
        restaurant.name = "Cafe B"  # type: ignore[misc]
