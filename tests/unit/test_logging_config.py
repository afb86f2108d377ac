from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from rms.api.middleware.request_id import request_id_context
from rms.infrastructure.observability.logging_config import JsonFormatter


def _record(**extra: object) -> logging.LogRecord:
    record = logging.LogRecord(
        name="rms.application.use_cases.create_record",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="record_created",
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_structured_extras() -> None:
    payload = json.loads(JsonFormatter().format(_record(entity="orders", record_id="ord_001")))

    assert payload["message"] == "record_created"
    assert payload["level"] == "INFO"
    assert payload["entity"] == "orders"
    assert payload["record_id"] == "ord_001"
    assert "status_code" not in payload


def test_json_formatter_carries_request_id() -> None:
    token = request_id_context.set("req-42")
    try:
        payload = json.loads(JsonFormatter().format(_record()))
    finally:
        request_id_context.reset(token)

    assert payload["request_id"] == "req-42"
