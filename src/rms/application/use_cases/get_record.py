from __future__ import annotations

import json
import logging
from typing import Any

from rms.application.dto.responses import EnvelopeResponse, envelope
from rms.application.mappers.record_mapper import to_record_document
from rms.application.metrics.records import record_lookup
from rms.application.ports.outbound import RecordDocumentCache
from rms.application.ports.stores import OrderedRecordStore
from rms.domain.records.registry import EntityDefinition

logger = logging.getLogger(__name__)


class RecordNotFoundError(Exception):
    pass


def record_cache_key(entity: str, record_id: str) -> str:
    return f"records:{entity}:{record_id}"


class GetRecord:
    """Fetch one record by id, reading through the cache.

    Records are never mutated after insert, so a cached document can not go
    stale and entries only ever expire by TTL. Misses are not cached.
    """

    def __init__(
        self,
        definition: EntityDefinition,
        store: OrderedRecordStore[Any],
        cache: RecordDocumentCache,
        ttl_seconds: int = 300,
    ) -> None:
        self._definition = definition
        self._store = store
        self._cache = cache
        self._ttl_seconds = ttl_seconds

    def _cache_get(self, key: str) -> str | None:
        try:
            return self._cache.get(key)
        except Exception:
            return None

    def _cache_set(self, key: str, value: str) -> None:
        try:
            self._cache.set(key, value, ttl_seconds=self._ttl_seconds)
        except Exception:
            return

    def execute(self, record_id: str) -> EnvelopeResponse:
        entity = self._definition.name
        message = f"{self._definition.label} retrieved successfully."
        cache_key = record_cache_key(entity, record_id)

        cached = self._cache_get(cache_key)
        if cached is not None:
            try:
                document = json.loads(cached)
            except ValueError:
                document = None
            if isinstance(document, dict):
                record_lookup(entity, "cache_hit")
                return envelope(200, message, document)

        record = self._store.get(record_id)
        if record is None:
            record_lookup(entity, "not_found")
            logger.info("record_not_found", extra={"entity": entity, "record_id": record_id})
            raise RecordNotFoundError(f"{self._definition.label} not found with id={record_id}")

        record_lookup(entity, "hit")
        document = to_record_document(record)
        self._cache_set(cache_key, json.dumps(document))
        return envelope(200, message, document)
