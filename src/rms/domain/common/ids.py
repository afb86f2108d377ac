from __future__ import annotations

from typing import NewType
from uuid import uuid4

RecordId = NewType("RecordId", str)
RestaurantId = NewType("RestaurantId", str)


def new_record_id() -> RecordId:
    return RecordId(str(uuid4()))
