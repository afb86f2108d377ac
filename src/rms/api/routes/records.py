from __future__ import annotations

import os
from typing import Any

from fastapi import APIRouter, Body, Query, Request

from rms.api.middleware.request_id import get_request_id
from rms.application.dto.responses import EnvelopeResponse
from rms.application.ports.stores import OrderedRecordStore
from rms.application.use_cases.create_record import CreateRecord, TraceContext
from rms.application.use_cases.get_record import GetRecord
from rms.application.use_cases.list_records import (
    DEFAULT_LIMIT,
    DEFAULT_PAGE,
    ListRecords,
    pagination_value,
)
from rms.domain.records.registry import ENTITY_DEFINITIONS, EntityDefinition
from rms.infrastructure.observability.otel import current_trace_id


def _record_cache_ttl_seconds() -> int:
    return int(os.getenv("RECORD_CACHE_TTL_SECONDS", "300"))


def _store(request: Request, definition: EntityDefinition) -> OrderedRecordStore[Any]:
    return request.app.state.record_stores[definition.name]


def _create_record_use_case(request: Request, definition: EntityDefinition) -> CreateRecord:
    return CreateRecord(
        definition=definition,
        store=_store(request, definition),
        publisher=request.app.state.event_publisher,
    )


def _list_records_use_case(request: Request, definition: EntityDefinition) -> ListRecords:
    return ListRecords(definition=definition, store=_store(request, definition))


def _get_record_use_case(request: Request, definition: EntityDefinition) -> GetRecord:
    return GetRecord(
        definition=definition,
        store=_store(request, definition),
        cache=request.app.state.record_cache,
        ttl_seconds=_record_cache_ttl_seconds(),
    )


def build_records_router(definition: EntityDefinition) -> APIRouter:
    router = APIRouter(tags=[definition.name])
    collection_path = f"/{definition.name}"

    @router.post(
        collection_path,
        response_model=EnvelopeResponse,
        status_code=201,
        name=f"create_{definition.name}",
    )
    def create_record(request: Request, payload: Any = Body(default=None)) -> EnvelopeResponse:
        return _create_record_use_case(request, definition).execute(
            payload,
            trace_ctx=TraceContext(trace_id=current_trace_id(), request_id=get_request_id()),
        )

    @router.get(
        collection_path,
        response_model=EnvelopeResponse,
        name=f"list_{definition.name}",
    )
    def list_records(
        request: Request,
        page: str | None = Query(default=None),
        limit: str | None = Query(default=None),
    ) -> EnvelopeResponse:
        return _list_records_use_case(request, definition).execute(
            page=pagination_value(page, DEFAULT_PAGE),
            limit=pagination_value(limit, DEFAULT_LIMIT),
        )

    @router.get(
        f"{collection_path}/{{record_id}}",
        response_model=EnvelopeResponse,
        name=f"get_{definition.name}",
    )
    def get_record(request: Request, record_id: str) -> EnvelopeResponse:
        return _get_record_use_case(request, definition).execute(record_id)

    return router


def build_records_routers() -> list[APIRouter]:
    return [build_records_router(definition) for definition in ENTITY_DEFINITIONS]
