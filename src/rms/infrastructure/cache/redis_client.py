from __future__ import annotations

import os
from functools import lru_cache

import redis

DEFAULT_TIMEOUT_SECONDS = 1.0


def _redis_url() -> str:
    url = os.getenv("REDIS_URL")
    if not url:
        raise RuntimeError("REDIS_URL is not set")
    return url


def redis_timeout_seconds() -> float:
    return float(os.getenv("REDIS_TIMEOUT_SECONDS", str(DEFAULT_TIMEOUT_SECONDS)))


@lru_cache(maxsize=8)
def _client_for(redis_url: str, timeout_seconds: float) -> redis.Redis:
    # Record documents and event envelopes are JSON text.
    return redis.Redis.from_url(
        redis_url,
        decode_responses=True,
        socket_connect_timeout=timeout_seconds,
        socket_timeout=timeout_seconds,
        health_check_interval=30,
    )


def get_redis_client(timeout_seconds: float | None = None) -> redis.Redis:
    """One pooled client per (url, timeout), shared by the record cache and the publisher."""
    if timeout_seconds is None:
        timeout_seconds = redis_timeout_seconds()
    return _client_for(_redis_url(), timeout_seconds)


def ping_redis(timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS) -> bool:
    try:
        return bool(get_redis_client(timeout_seconds).ping())
    except (RuntimeError, redis.RedisError):
        return False
