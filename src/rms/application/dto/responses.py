from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class EnvelopeResponse(BaseModel):
    status: int
    message: str
    data: Any = None


def envelope(status: int, message: str, data: Any = None) -> EnvelopeResponse:
    return EnvelopeResponse(status=status, message=message, data=data)
