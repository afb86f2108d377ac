from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import fields
from typing import Any, TypeVar

from rms.domain.common.ids import RecordId
from rms.domain.records.registry import EntityDefinition

T = TypeVar("T")

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def to_camel(value: str) -> str:
    parts = value.split("_")
    return parts[0] + "".join(part.capitalize() for part in parts[1:])


def to_snake(value: str) -> str:
    return _CAMEL_BOUNDARY.sub("_", value).lower()


def to_record_document(record: Any) -> dict[str, Any]:
    return {to_camel(item.name): getattr(record, item.name) for item in fields(record)}


def from_record_document(entity_type: type[T], document: Mapping[str, Any]) -> T:
    values: dict[str, Any] = {}
    for item in fields(entity_type):  # type: ignore[arg-type]
        key = to_camel(item.name)
        if key in document:
            values[item.name] = document[key]
    return entity_type(**values)


def build_record(
    definition: EntityDefinition,
    *,
    record_id: RecordId,
    created_at: int,
    payload: Mapping[str, Any],
) -> Any:
    values = {to_snake(name): payload[name] for name in definition.required_fields}
    return definition.entity_type(id=record_id, created_at=created_at, **values)
