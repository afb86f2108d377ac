from __future__ import annotations

import hmac
import logging
import os

from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.types import ASGIApp

from rms.application.dto.responses import envelope

AUTH_HEADER = "Authorization"
DEFAULT_AUTH_TOKEN = "secureToken"
PUBLIC_PATHS = frozenset({"/health/live", "/health/ready", "/metrics"})

logger = logging.getLogger(__name__)


def configured_auth_token() -> str:
    return os.getenv("API_AUTH_TOKEN", DEFAULT_AUTH_TOKEN)


class StaticTokenAuthMiddleware(BaseHTTPMiddleware):
    """Reject every non-public request whose Authorization header is not the shared secret."""

    def __init__(self, app: ASGIApp, token: str) -> None:
        super().__init__(app)
        if not token:
            raise ValueError("token must be non-empty")
        self._token = token.encode("utf-8")

    async def dispatch(self, request: Request, call_next):
        if request.url.path in PUBLIC_PATHS:
            return await call_next(request)

        supplied = request.headers.get(AUTH_HEADER)
        if supplied is None or not hmac.compare_digest(supplied.encode("utf-8"), self._token):
            logger.info(
                "request_forbidden",
                extra={"method": request.method, "path": request.url.path},
            )
            body = envelope(403, "Forbidden: Invalid token")
            return JSONResponse(status_code=403, content=body.model_dump())

        return await call_next(request)
