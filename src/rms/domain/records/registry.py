"""Per-entity wiring shared by the storage layer and the HTTP routes.

Each entity kind is described once here: the URL segment it is served under,
the human-readable labels used in response messages, the namespace that
isolates its keys in persistent storage, and the payload fields required to
construct it. Everything downstream is parametrized by an
:class:`EntityDefinition` instead of being written out seven times.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from rms.domain.records.entities import (
    Expense,
    InventoryItem,
    MenuItem,
    Order,
    Reservation,
    Restaurant,
    StaffMember,
)


@dataclass(frozen=True)
class EntityDefinition:
    name: str
    label: str
    plural_label: str
    namespace: int
    entity_type: type[Any]
    required_fields: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.required_fields:
            raise ValueError("required_fields must be non-empty")
        if self.namespace < 0:
            raise ValueError("namespace must be >= 0")

    @property
    def owned_by_restaurant(self) -> bool:
        return "restaurantId" in self.required_fields


RESTAURANTS = EntityDefinition(
    name="restaurants",
    label="Restaurant",
    plural_label="restaurants",
    namespace=0,
    entity_type=Restaurant,
    required_fields=("name", "location"),
)
STAFF = EntityDefinition(
    name="staff",
    label="Staff member",
    plural_label="staff members",
    namespace=1,
    entity_type=StaffMember,
    required_fields=("restaurantId", "name", "position", "schedule"),
)
MENU = EntityDefinition(
    name="menu",
    label="Menu item",
    plural_label="menu items",
    namespace=2,
    entity_type=MenuItem,
    required_fields=("restaurantId", "name", "description", "price"),
)
ORDERS = EntityDefinition(
    name="orders",
    label="Order",
    plural_label="orders",
    namespace=3,
    entity_type=Order,
    required_fields=("restaurantId", "items", "total"),
)
RESERVATIONS = EntityDefinition(
    name="reservations",
    label="Reservation",
    plural_label="reservations",
    namespace=4,
    entity_type=Reservation,
    required_fields=("restaurantId", "name", "dateTime"),
)
INVENTORY = EntityDefinition(
    name="inventory",
    label="Inventory item",
    plural_label="inventory items",
    namespace=5,
    entity_type=InventoryItem,
    required_fields=("restaurantId", "name", "quantity"),
)
EXPENSES = EntityDefinition(
    name="expenses",
    label="Expense",
    plural_label="expenses",
    namespace=6,
    entity_type=Expense,
    required_fields=("restaurantId", "description", "amount"),
)

ENTITY_DEFINITIONS: tuple[EntityDefinition, ...] = (
    RESTAURANTS,
    STAFF,
    MENU,
    ORDERS,
    RESERVATIONS,
    INVENTORY,
    EXPENSES,
)


def get_definition(name: str) -> EntityDefinition:
    for definition in ENTITY_DEFINITIONS:
        if definition.name == name:
            return definition
    raise KeyError(f"unknown entity: {name}")
