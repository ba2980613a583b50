# orders_api/errors.py
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class OrdersError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    code = "InternalError"
    message = "Internal server error"

    def __init__(self, message: str | None = None, details=None):
        super().__init__(message or self.message)
        if message is not None:
            self.message = message
        self.details = details

    def to_body(self) -> dict:
        body = {"error": self.message, "code": self.code}
        if self.details is not None:
            body["details"] = self.details
        return body


class ValidationError(OrdersError):
    """Malformed or out-of-range input. Raised before any storage call."""

    status_code = status.HTTP_400_BAD_REQUEST
    code = "ValidationError"
    message = "Invalid request"

    def __init__(self, code: str, message: str, details=None):
        super().__init__(message, details)
        self.code = code


class NotFoundError(OrdersError):
    status_code = status.HTTP_404_NOT_FOUND
    code = "NotFound"
    message = "Order not found"


class StorageError(OrdersError):
    # the underlying cause is logged, never returned to the caller
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    code = "StorageError"
    message = "Database error"


async def _orders_error_handler(request: Request, exc: OrdersError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


async def _http_error_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": "Route not found", "code": "RouteNotFound"},
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def _request_validation_handler(request: Request, exc: RequestValidationError):
    # only reachable for bodies that are not valid JSON
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Request body must be valid JSON", "code": "InvalidBody"},
    )


async def _unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error", "code": "InternalError"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(OrdersError, _orders_error_handler)
    app.add_exception_handler(StarletteHTTPException, _http_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)
