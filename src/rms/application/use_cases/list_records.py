from __future__ import annotations

from typing import Any

from rms.application.dto.responses import EnvelopeResponse, envelope
from rms.application.mappers.record_mapper import to_record_document
from rms.application.metrics.records import record_list_request
from rms.application.ports.stores import OrderedRecordStore
from rms.domain.records.registry import EntityDefinition

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10


class InvalidPaginationError(Exception):
    pass


class EmptyCollectionError(Exception):
    pass


def pagination_value(raw: str | None, default: int) -> int:
    """Missing, zero or non-numeric query values fall back to ``default``."""
    if raw is None:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        return default
    return value or default


class ListRecords:
    def __init__(self, definition: EntityDefinition, store: OrderedRecordStore[Any]) -> None:
        self._definition = definition
        self._store = store

    def execute(self, *, page: int = DEFAULT_PAGE, limit: int = DEFAULT_LIMIT) -> EnvelopeResponse:
        if page < 1:
            raise InvalidPaginationError("page must be >= 1")
        if limit < 1:
            raise InvalidPaginationError("limit must be >= 1")

        start = (page - 1) * limit
        records = self._store.values()[start : start + limit]
        record_list_request(self._definition.name)

        plural = self._definition.plural_label
        if not records:
            raise EmptyCollectionError(f"No {plural} found.")

        return envelope(
            200,
            f"{plural.capitalize()} retrieved successfully.",
            [to_record_document(record) for record in records],
        )
