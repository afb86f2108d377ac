from __future__ import annotations

import logging

from rms.application.ports.outbound import RecordEventPublisher
from rms.infrastructure.cache.redis_client import get_redis_client

logger = logging.getLogger(__name__)


class RedisEventPublisher(RecordEventPublisher):
    def __init__(self, timeout_seconds: float | None = None) -> None:
        self._timeout_seconds = timeout_seconds

    def publish(self, channel: str, message: str) -> None:
        receivers = get_redis_client(timeout_seconds=self._timeout_seconds).publish(
            channel, message
        )
        logger.debug("event_published", extra={"channel": channel, "receivers": receivers})
