"""Error Handlers — global exception handlers that emit the {"error": ...} envelope.

Invariants:
    - SnickersError → status from the kind table, envelope from to_response()
    - RequestValidationError (path/query params) → 400 "validating request: ..."
    - Starlette HTTPException (unknown path, wrong method) → its own status,
      context "routing request"
    - Exception (catch-all) → 500 "handling request: internal error", never
      leaks internal details; the server keeps serving other requests

Design Decisions:
    - Four-layer handler: domain, validation, routing, catch-all
    - Client errors log at warning, server errors at error
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from snickers.api.responses import error_response, snickers_error_response
from snickers.core.errors import ErrorKind, SnickersError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_snickers_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_snickers_error_handler(app: FastAPI) -> None:
    """Register domain/storage error handler."""

    @app.exception_handler(SnickersError)
    async def snickers_error_handler(request: Request, exc: SnickersError):
        level = logging.ERROR if exc.http_status >= 500 else logging.WARNING
        logger.log(
            level,
            f"SnickersError: {exc.message}",
            extra={
                "error_kind": exc.code,
                "path": request.url.path,
                "method": request.method,
            },
        )
        return snickers_error_response(exc)


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"error_kind": ErrorKind.MALFORMED_INPUT.value},
        )
        return error_response(
            status.HTTP_400_BAD_REQUEST,
            "validating request",
            _summarize_validation_errors(exc),
        )


def _register_http_error_handler(app: FastAPI) -> None:
    """Register routing error handler (404 unknown path, 405 wrong method)."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        logger.info(
            f"{request.method} {request.url.path} -> {exc.status_code}",
            extra={"path": request.url.path, "method": request.method},
        )
        return error_response(
            exc.status_code,
            "routing request",
            str(exc.detail).lower(),
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"error_kind": ErrorKind.INTERNAL.value},
        )
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "handling request",
            "internal error",
        )


def _summarize_validation_errors(exc: RequestValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(loc) for loc in e['loc'])}: {e['msg']}"
        for e in exc.errors()
    )
