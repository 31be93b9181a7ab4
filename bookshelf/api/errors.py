"""Unified error handling — ServiceError, StorageError and request validation → text."""

from __future__ import annotations

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse, Response

from bookshelf.dao.base import StorageError
from bookshelf.services import ServiceError, ValidationError

log = structlog.get_logger("bookshelf.api")

_STATUS_MAP: dict[type[ServiceError], int] = {
    ValidationError: 400,
}

# Storage failures never expose detail; the body depends only on the verb.
_STORAGE_FAILURE_MESSAGES = {
    "POST": "Error! Book could not be added",
    "PUT": "Error! Book could not be updated",
    "DELETE": "Error! Book could not be deleted",
}


async def _service_error_handler(_request: Request, exc: ServiceError) -> Response:
    status = 500
    for cls in type(exc).__mro__:
        if cls in _STATUS_MAP:
            status = _STATUS_MAP[cls]
            break
    return PlainTextResponse(str(exc), status_code=status)


async def _storage_error_handler(request: Request, exc: StorageError) -> Response:
    log.error(
        "storage failure",
        method=request.method,
        path=request.url.path,
        exc_info=exc,
    )
    message = _STORAGE_FAILURE_MESSAGES.get(request.method)
    if message is None:
        return Response(status_code=500)
    return PlainTextResponse(message, status_code=500)


async def _validation_error_handler(
    _request: Request, exc: RequestValidationError
) -> Response:
    messages = []
    for err in exc.errors():
        loc = " → ".join(str(part) for part in err["loc"])
        messages.append(f"{loc}: {err['msg']}")
    return PlainTextResponse("; ".join(messages), status_code=400)


def register_error_handlers(app: FastAPI) -> None:
    """Register exception handlers on the app."""
    app.add_exception_handler(ServiceError, _service_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(StorageError, _storage_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, _validation_error_handler)  # type: ignore[arg-type]
