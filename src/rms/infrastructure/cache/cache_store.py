from __future__ import annotations

from rms.application.ports.outbound import RecordDocumentCache
from rms.infrastructure.cache.redis_client import get_redis_client


class RedisCacheStore(RecordDocumentCache):
    """Record document cache; values are JSON strings with a TTL."""

    def __init__(self, timeout_seconds: float | None = None) -> None:
        self._timeout_seconds = timeout_seconds

    def get(self, key: str) -> str | None:
        value = get_redis_client(timeout_seconds=self._timeout_seconds).get(key)
        return None if value is None else str(value)

    def set(self, key: str, value: str, ttl_seconds: int) -> None:
        get_redis_client(timeout_seconds=self._timeout_seconds).setex(key, ttl_seconds, value)
