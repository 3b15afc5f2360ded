"""Ledger exceptions and their HTTP mapping.

`OrderNotFound` and `StorageError` stay distinct all the way to the response
so clients can tell a missing order from a failing database.
"""

from fastapi import Request
from fastapi.responses import JSONResponse
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from starlette import status
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

logger = logging.getLogger("app.errors")


class LedgerError(Exception):
    """Base class for errors raised by the ledger core and its storage."""


class OrderNotFound(LedgerError):
    def __init__(self, order_id: int):
        super().__init__(f"order {order_id} not found")
        self.order_id = order_id


class StorageError(LedgerError):
    """The database could not complete an operation. Never retried."""


def order_not_found_handler(request: Request, exc: OrderNotFound):  # type: ignore
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"error": "not_found", "detail": str(exc)},
    )


def storage_error_handler(request: Request, exc: StorageError):  # type: ignore
    logger.error("storage failure: %s", exc, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"error": "storage_error", "detail": str(exc)},
    )


def http_error_handler(request: Request, exc: StarletteHTTPException):  # type: ignore
    if exc.status_code == status.HTTP_404_NOT_FOUND and exc.detail == "Not Found":
        detail = f"No route for {request.method} {request.url.path}"
        error = "not_found"
    else:
        detail = exc.detail
        error = "not_found" if exc.status_code == 404 else "http_error"
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": error, "detail": detail},
        headers=getattr(exc, "headers", None),
    )


def validation_error_handler(request: Request, exc: RequestValidationError):  # type: ignore
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error": "validation_error",
            "detail": jsonable_encoder(exc.errors()),
        },
    )


def server_error_handler(request: Request, exc: Exception):  # type: ignore
    logger.error("unhandled exception", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "internal_error",
            "detail": "An unexpected error occurred.",
        },
    )
