from __future__ import annotations

from typing import Protocol


class RecordEventPublisher(Protocol):
    """Delivers serialized ``record.created`` events to a restaurant's channel."""

    def publish(self, channel: str, message: str) -> None: ...


class RecordDocumentCache(Protocol):
    """Holds JSON record documents for get-by-id, each entry with its own TTL."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str, ttl_seconds: int) -> None: ...
