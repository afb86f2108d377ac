from __future__ import annotations

from sqlalchemy import inspect

from rms.domain.common.clock import now_millis
from rms.domain.common.ids import RecordId, RestaurantId
from rms.domain.records.entities import (
    Expense,
    InventoryItem,
    MenuItem,
    Order,
    Reservation,
    Restaurant,
    StaffMember,
)
from rms.domain.records.registry import (
    EXPENSES,
    INVENTORY,
    MENU,
    ORDERS,
    RESERVATIONS,
    RESTAURANTS,
    STAFF,
)
from rms.infrastructure.db.repositories.record_store import build_record_stores
from rms.infrastructure.db.session import get_engine

DEMO_RESTAURANT_ID = RestaurantId("rst_demo")


def demo_records(created_at: int) -> dict[str, list[object]]:
    return {
        RESTAURANTS.name: [
            Restaurant(
                id=RecordId(DEMO_RESTAURANT_ID),
                name="Downtown Test Kitchen",
                location="12 Main St",
                created_at=created_at,
            )
        ],
        STAFF.name: [
            StaffMember(
                id=RecordId("stf_demo_001"),
                restaurant_id=DEMO_RESTAURANT_ID,
                name="Bob Alvarez",
                position="chef",
                schedule="Mon-Fri 10:00-18:00",
                created_at=created_at,
            )
        ],
        MENU.name: [
            MenuItem(
                id=RecordId("itm_demo_001"),
                restaurant_id=DEMO_RESTAURANT_ID,
                name="Margherita Pizza",
                description="Tomato, mozzarella, basil",
                price=14.5,
                created_at=created_at,
            ),
            MenuItem(
                id=RecordId("itm_demo_002"),
                restaurant_id=DEMO_RESTAURANT_ID,
                name="Caesar Salad",
                description="Romaine, croutons, parmesan",
                price=9.9,
                created_at=created_at,
            ),
        ],
        ORDERS.name: [
            Order(
                id=RecordId("ord_demo_001"),
                restaurant_id=DEMO_RESTAURANT_ID,
                items=["itm_demo_001", "itm_demo_002"],
                total=24.4,
                created_at=created_at,
            )
        ],
        RESERVATIONS.name: [
            Reservation(
                id=RecordId("rsv_demo_001"),
                restaurant_id=DEMO_RESTAURANT_ID,
                name="Dana Lee",
                date_time="2026-11-01T19:30:00",
                created_at=created_at,
            )
        ],
        INVENTORY.name: [
            InventoryItem(
                id=RecordId("inv_demo_001"),
                restaurant_id=DEMO_RESTAURANT_ID,
                name="Mozzarella (kg)",
                quantity=12,
                created_at=created_at,
            )
        ],
        EXPENSES.name: [
            Expense(
                id=RecordId("exp_demo_001"),
                restaurant_id=DEMO_RESTAURANT_ID,
                description="Weekly produce delivery",
                amount=310.75,
                created_at=created_at,
            )
        ],
    }


def main() -> None:
    engine = get_engine(timeout_seconds=2.0)
    if "records" not in set(inspect(engine).get_table_names()):
        print("no schema yet")
        return

    stores = build_record_stores(engine)
    # Records are immutable: fixed ids already present are left untouched.
    for entity, records in demo_records(created_at=now_millis()).items():
        for record in records:
            if stores[entity].get(record.id) is None:  # type: ignore[attr-defined]
                stores[entity].insert(record.id, record)  # type: ignore[attr-defined]

    print("seed complete")


if __name__ == "__main__":
    main()
