from collections.abc import Mapping, Sequence
from typing import Any, Final, cast
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_404_NOT_FOUND,
    HTTP_500_INTERNAL_SERVER_ERROR,
)
from pydantic import BaseModel

from app.core.exceptions import CatalogError, ErrorKind
from app.core.logging import get_logger


_STATUS_BY_KIND: Final[dict[ErrorKind, int]] = {
    ErrorKind.NOT_FOUND: HTTP_404_NOT_FOUND,
    ErrorKind.HAS_DEPENDENTS: HTTP_400_BAD_REQUEST,
    ErrorKind.INVALID_REFERENCE: HTTP_400_BAD_REQUEST,
    ErrorKind.VALIDATION: HTTP_400_BAD_REQUEST,
    ErrorKind.UNCLASSIFIED: HTTP_500_INTERNAL_SERVER_ERROR,
}


class ErrorBody(BaseModel):
    """Structured error body."""
    type: str
    message: str
    details: dict[str, object] | None = None


class ErrorEnvelope(BaseModel):
    error: ErrorBody
    meta: dict[str, object]


def status_for(kind: ErrorKind) -> int:
    return _STATUS_BY_KIND.get(kind, HTTP_500_INTERNAL_SERVER_ERROR)


def _build_meta(request: Request) -> dict[str, object]:
    """Collect metadata for error responses."""
    return {
        "request_id": getattr(request.state, "correlation_id", "-"),
        "path": request.url.path,
        "method": request.method,
    }

def _serialize_validation_errors(errors: Sequence[Mapping[Any, Any]]) -> list[dict[str, object]]:
    """Serialize validation errors, handling non-serializable objects in context."""

    serialized_errors: list[dict[str, object]] = []

    for error in errors:
        serialized_error: dict[str, object] = dict(error)

        if "ctx" in serialized_error and isinstance(serialized_error["ctx"], dict):
            ctx: dict[str, object] = cast(dict[str, object], serialized_error["ctx"]).copy()

            if "error" in ctx:
                ctx["error"] = str(ctx["error"])
            serialized_error["ctx"] = ctx
        serialized_errors.append(serialized_error)
    return serialized_errors


def _envelope(
    request: Request,
    error_type: str,
    message: str,
    details: dict[str, object] | None = None,
) -> dict[str, Any]:
    body = ErrorEnvelope(
        error=ErrorBody(type=error_type, message=message, details=details),
        meta=_build_meta(request),
    )
    return body.model_dump()


def register_exception_handlers(app: FastAPI) -> None:
    """Register centralized exception handlers."""

    @app.exception_handler(CatalogError)
    async def catalog_error_handler(request: Request, exc: CatalogError) -> JSONResponse:
        logger = get_logger(__name__, request)
        status_code = status_for(exc.kind)
        logger.info("Catalog error: %s (%s)", exc.message, exc.kind.value)
        return JSONResponse(
            status_code=status_code,
            content=_envelope(request, exc.kind.value, exc.message),
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        logger = get_logger(__name__, request)
        logger.warning("HTTP error", extra={"status_code": exc.status_code})
        if isinstance(exc.detail, dict):
            message = "Request failed"
            details = cast(dict[str, object], exc.detail)
        else:
            message = exc.detail or "HTTP error"
            details = None

        return JSONResponse(
            status_code=exc.status_code,
            content=_envelope(request, "http_error", message, details),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        logger = get_logger(__name__, request)
        logger.info("Validation error")
        return JSONResponse(
            status_code=status_for(ErrorKind.VALIDATION),
            content=_envelope(
                request,
                ErrorKind.VALIDATION.value,
                "Invalid request payload",
                {"errors": _serialize_validation_errors(exc.errors())},
            ),
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger = get_logger(__name__, request)
        logger.exception("Unhandled server error", exc_info=exc)
        return JSONResponse(
            status_code=HTTP_500_INTERNAL_SERVER_ERROR,
            content=_envelope(request, ErrorKind.UNCLASSIFIED.value, "Internal Server Error"),
        )
