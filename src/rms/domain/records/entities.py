from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from rms.domain.common.ids import RecordId, RestaurantId

ORDER_STATUS_PENDING = "pending"


@dataclass(frozen=True)
class Restaurant:
    id: RecordId
    name: str
    location: str
    created_at: int


@dataclass(frozen=True)
class StaffMember:
    id: RecordId
    restaurant_id: RestaurantId
    name: str
    position: str
    schedule: Any
    created_at: int


@dataclass(frozen=True)
class MenuItem:
    id: RecordId
    restaurant_id: RestaurantId
    name: str
    description: str
    price: float
    created_at: int


@dataclass(frozen=True)
class Order:
    id: RecordId
    restaurant_id: RestaurantId
    items: list[str]
    total: float
    created_at: int
    # Set at creation only; nothing in this service transitions it.
    status: str = field(default=ORDER_STATUS_PENDING)


@dataclass(frozen=True)
class Reservation:
    id: RecordId
    restaurant_id: RestaurantId
    name: str
    date_time: str
    created_at: int


@dataclass(frozen=True)
class InventoryItem:
    id: RecordId
    restaurant_id: RestaurantId
    name: str
    quantity: float
    created_at: int


@dataclass(frozen=True)
class Expense:
    id: RecordId
    restaurant_id: RestaurantId
    description: str
    amount: float
    created_at: int
