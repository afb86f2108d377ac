from __future__ import annotations

from typing import Any, cast

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from rms.application.dto.responses import envelope
from rms.application.use_cases.create_record import InvalidPayloadError
from rms.application.use_cases.get_record import RecordNotFoundError
from rms.application.use_cases.list_records import EmptyCollectionError, InvalidPaginationError


def _envelope_response(
    *,
    status_code: int,
    message: str,
    data: Any = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=envelope(status_code, message, data).model_dump(),
        headers=headers,
    )


def _exception_handler(status_code: int):
    async def handler(_: Request, exc: Exception) -> JSONResponse:
        return _envelope_response(status_code=status_code, message=str(exc))

    return handler


async def _http_exception_handler(_: Request, exc: Exception) -> JSONResponse:
    http_exc = cast(StarletteHTTPException, exc)
    message = str(http_exc.detail) if http_exc.detail else "request failed"
    return _envelope_response(
        status_code=http_exc.status_code,
        message=message,
        headers=getattr(http_exc, "headers", None),
    )


async def _validation_exception_handler(_: Request, exc: Exception) -> JSONResponse:
    validation_exc = cast(RequestValidationError, exc)
    return _envelope_response(
        status_code=400,
        message="request validation failed",
        data={"errors": jsonable_encoder(validation_exc.errors())},
    )


def register_exception_handlers(app: FastAPI) -> None:
    mappings: list[tuple[type[Exception], int]] = [
        (InvalidPayloadError, 400),
        (InvalidPaginationError, 400),
        (RecordNotFoundError, 404),
        (EmptyCollectionError, 404),
    ]

    for exc_cls, status_code in mappings:
        app.add_exception_handler(exc_cls, _exception_handler(status_code))

    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
