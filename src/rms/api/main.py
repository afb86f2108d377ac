from __future__ import annotations

import logging
import os
import time
from collections.abc import Mapping
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import Counter, Histogram
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from rms.api.error_handling import register_exception_handlers
from rms.api.middleware.auth import StaticTokenAuthMiddleware, configured_auth_token
from rms.api.middleware.request_id import RequestIDMiddleware
from rms.api.routes.health import router as health_router
from rms.api.routes.metrics import router as metrics_router
from rms.api.routes.records import build_records_routers
from rms.application.ports.outbound import RecordDocumentCache, RecordEventPublisher
from rms.application.ports.stores import OrderedRecordStore
from rms.infrastructure.cache.cache_store import RedisCacheStore
from rms.infrastructure.db.repositories.record_store import build_record_stores
from rms.infrastructure.messaging.redis_publisher import RedisEventPublisher
from rms.infrastructure.observability.logging_config import configure_logging
from rms.infrastructure.observability.otel import configure_otel

logger = logging.getLogger("rms.api.access")

REQUEST_COUNT = Counter(
    "http_requests_total",
    "Total number of HTTP requests",
    ["method", "path", "status_code"],
)
REQUEST_LATENCY = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "path"],
)


def _cors_allow_origins() -> list[str]:
    env = os.getenv("APP_ENV", "dev").lower()

    # Dev/test: unblock everything (no credentials allowed)
    if env in {"dev", "test"}:
        return ["*"]

    default_value = "https://your-prod-domain.com"
    raw_value = os.getenv("CORS_ALLOW_ORIGINS", default_value)
    return [origin.strip() for origin in raw_value.split(",") if origin.strip()]


UNMATCHED_PATH_LABEL = "unmatched"


def _path_label(request: Request) -> str:
    # Route templates keep record ids out of metric labels. Requests that never
    # reach a route (rejected by auth, unknown paths) share one label.
    route = request.scope.get("route")
    return getattr(route, "path", UNMATCHED_PATH_LABEL)


class AccessLogMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        method = request.method
        try:
            response = await call_next(request)
        except Exception:
            duration_ms = (time.perf_counter() - started) * 1000
            path = _path_label(request)
            REQUEST_COUNT.labels(method=method, path=path, status_code="500").inc()
            REQUEST_LATENCY.labels(method=method, path=path).observe(duration_ms / 1000)
            logger.exception(
                "request_error",
                extra={
                    "method": method,
                    "path": request.url.path,
                    "status_code": 500,
                    "duration_ms": round(duration_ms, 2),
                },
            )
            raise

        duration_ms = (time.perf_counter() - started) * 1000
        path = _path_label(request)
        REQUEST_COUNT.labels(method=method, path=path, status_code=str(response.status_code)).inc()
        REQUEST_LATENCY.labels(method=method, path=path).observe(duration_ms / 1000)
        logger.info(
            "request_complete",
            extra={
                "method": method,
                "path": request.url.path,
                "status_code": response.status_code,
                "duration_ms": round(duration_ms, 2),
            },
        )
        return response


def create_app(
    *,
    record_stores: Mapping[str, OrderedRecordStore[Any]] | None = None,
    publisher: RecordEventPublisher | None = None,
    cache: RecordDocumentCache | None = None,
    auth_token: str | None = None,
) -> FastAPI:
    configure_logging()

    app = FastAPI(title="Restaurant Records Service", version="0.1.0")
    # One store per entity, shared by every request for the life of the process.
    app.state.record_stores = (
        dict(record_stores) if record_stores is not None else build_record_stores()
    )
    app.state.event_publisher = publisher or RedisEventPublisher()
    app.state.record_cache = cache or RedisCacheStore()

    register_exception_handlers(app)
    app.include_router(health_router)
    app.include_router(metrics_router)
    for records_router in build_records_routers():
        app.include_router(records_router)

    app.add_middleware(StaticTokenAuthMiddleware, token=auth_token or configured_auth_token())
    app.add_middleware(AccessLogMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=_cors_allow_origins(),
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-Id"],
    )

    configure_otel(app)
    return app


app = create_app()
