from __future__ import annotations

from prometheus_client import Counter

RECORDS_CREATED_TOTAL = Counter(
    "rms_records_created_total",
    "Total number of records created.",
    ["entity"],
)

RECORD_LOOKUPS_TOTAL = Counter(
    "rms_record_lookups_total",
    "Total number of get-by-id lookups by outcome.",
    ["entity", "outcome"],
)

RECORDS_LIST_REQUESTS_TOTAL = Counter(
    "rms_records_list_requests_total",
    "Total number of list requests.",
    ["entity"],
)

PAYLOAD_REJECTIONS_TOTAL = Counter(
    "rms_payload_rejections_total",
    "Total number of create requests rejected by payload validation.",
    ["entity"],
)


def record_created(entity: str) -> None:
    RECORDS_CREATED_TOTAL.labels(entity=entity).inc()


def record_lookup(entity: str, outcome: str) -> None:
    RECORD_LOOKUPS_TOTAL.labels(entity=entity, outcome=outcome).inc()


def record_list_request(entity: str) -> None:
    RECORDS_LIST_REQUESTS_TOTAL.labels(entity=entity).inc()


def record_payload_rejected(entity: str) -> None:
    PAYLOAD_REJECTIONS_TOTAL.labels(entity=entity).inc()
