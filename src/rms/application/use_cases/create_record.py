from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from rms.application.dto.responses import EnvelopeResponse, envelope
from rms.application.mappers.event_envelope import serialize_record_created_event
from rms.application.mappers.record_mapper import build_record, to_record_document
from rms.application.metrics.records import record_created, record_payload_rejected
from rms.application.ports.outbound import RecordEventPublisher
from rms.application.ports.stores import OrderedRecordStore
from rms.application.validation import validate_payload
from rms.domain.common.clock import now_millis
from rms.domain.common.ids import RecordId, new_record_id
from rms.domain.records.registry import EntityDefinition

logger = logging.getLogger(__name__)


class InvalidPayloadError(Exception):
    pass


@dataclass(frozen=True)
class TraceContext:
    """Request and trace ids stamped onto the record.created event."""

    trace_id: str | None
    request_id: str | None


class CreateRecord:
    def __init__(
        self,
        definition: EntityDefinition,
        store: OrderedRecordStore[Any],
        publisher: RecordEventPublisher,
        id_factory: Callable[[], RecordId] = new_record_id,
        clock: Callable[[], int] = now_millis,
    ) -> None:
        self._definition = definition
        self._store = store
        self._publisher = publisher
        self._id_factory = id_factory
        self._clock = clock

    def execute(self, payload: Any, trace_ctx: TraceContext) -> EnvelopeResponse:
        entity = self._definition.name
        error = validate_payload(self._definition.required_fields, payload)
        if error is not None:
            record_payload_rejected(entity)
            logger.info("record_payload_rejected", extra={"entity": entity})
            raise InvalidPayloadError(error)

        record = build_record(
            self._definition,
            record_id=self._id_factory(),
            created_at=self._clock(),
            payload=payload,
        )
        self._store.insert(record.id, record)
        record_created(entity)
        logger.info("record_created", extra={"entity": entity, "record_id": record.id})

        document = to_record_document(record)
        self._publish(document, trace_ctx)
        return envelope(201, f"{self._definition.label} created successfully.", document)

    def _publish(self, document: dict[str, Any], trace_ctx: TraceContext) -> None:
        if self._definition.owned_by_restaurant:
            restaurant_id = str(document["restaurantId"])
        else:
            restaurant_id = str(document["id"])
        message = serialize_record_created_event(
            occurred_at=datetime.now(timezone.utc),
            entity=self._definition.name,
            restaurant_id=restaurant_id,
            record=document,
            trace_id=trace_ctx.trace_id,
            request_id=trace_ctx.request_id,
        )
        try:
            self._publisher.publish(channel=f"events:{restaurant_id}", message=message)
        except Exception:
            # The record is already persisted; a lost event must not fail the request.
            logger.warning(
                "record_event_publish_failed",
                exc_info=True,
                extra={"entity": self._definition.name, "record_id": document["id"]},
            )
