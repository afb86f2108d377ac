from __future__ import annotations

import json
from datetime import datetime
from typing import Any
from uuid import uuid4


def _serialize_event(
    *,
    event_type: str,
    occurred_at: datetime,
    restaurant_id: str,
    payload: dict[str, Any],
    trace_id: str | None,
    request_id: str | None,
) -> str:
    envelope = {
        "event_id": str(uuid4()),
        "event_type": event_type,
        "occurred_at": occurred_at.isoformat(),
        "request_id": request_id,
        "trace_id": trace_id,
        "restaurant_id": restaurant_id,
        "payload": payload,
    }
    return json.dumps(envelope, separators=(",", ":"), ensure_ascii=False, default=str)


def serialize_record_created_event(
    *,
    occurred_at: datetime,
    entity: str,
    restaurant_id: str,
    record: dict[str, Any],
    trace_id: str | None,
    request_id: str | None,
) -> str:
    return _serialize_event(
        event_type="record.created",
        occurred_at=occurred_at,
        restaurant_id=restaurant_id,
        trace_id=trace_id,
        request_id=request_id,
        payload={"entity": entity, "record": record},
    )
