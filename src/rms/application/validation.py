from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any


def validate_payload(required_fields: Iterable[str], payload: Any) -> str | None:
    """Return an error message for the first missing field, or None.

    Only presence is checked. A key mapped to ``None`` counts as present.
    """
    if not isinstance(payload, Mapping):
        return "Invalid payload: expected a JSON object"
    for field_name in required_fields:
        if field_name not in payload:
            return f"Invalid payload: missing {field_name}"
    return None
