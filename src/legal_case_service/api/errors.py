"""Central translation of failures into structured HTTP error bodies."""

import logging
from datetime import datetime, timezone
from typing import Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from legal_case_service.exceptions import CaseServiceError, UnauthorizedError
from legal_case_service.models import ErrorResponse

logger = logging.getLogger(__name__)

_REASONS = {
    status.HTTP_400_BAD_REQUEST: "Bad Request",
    status.HTTP_401_UNAUTHORIZED: "Unauthorized",
    status.HTTP_403_FORBIDDEN: "Forbidden",
    status.HTTP_404_NOT_FOUND: "Not Found",
    status.HTTP_405_METHOD_NOT_ALLOWED: "Method Not Allowed",
    status.HTTP_409_CONFLICT: "Conflict",
    status.HTTP_500_INTERNAL_SERVER_ERROR: "Internal Server Error",
}


def error_response(
    request: Request,
    status_code: int,
    error: str,
    message: str,
    headers: Optional[Dict[str, str]] = None,
) -> JSONResponse:
    """Render the {timestamp, status, error, message, path} body."""
    body = ErrorResponse(
        timestamp=datetime.now(timezone.utc),
        status=status_code,
        error=error,
        message=message,
        path=request.url.path,
    )
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(mode="json"),
        headers=headers,
    )


async def handle_case_service_error(request: Request, exc: CaseServiceError) -> JSONResponse:
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, UnauthorizedError) else None
    return error_response(request, exc.status_code, exc.error, exc.message, headers)


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()

    malformed = [e for e in errors if e.get("type") == "json_invalid"]
    if malformed:
        detail = malformed[0].get("ctx", {}).get("error") or malformed[0].get("msg")
        return error_response(
            request,
            status.HTTP_400_BAD_REQUEST,
            "Bad Request",
            f"Invalid JSON format: {detail}",
        )

    fields = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        fields.append(f"{'.'.join(loc) or 'body'}: {error.get('msg')}")

    return error_response(
        request,
        status.HTTP_400_BAD_REQUEST,
        "Validation Failed",
        f"Invalid input: {'; '.join(fields)}",
    )


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(
        request,
        exc.status_code,
        _REASONS.get(exc.status_code, "Error"),
        str(exc.detail),
        getattr(exc, "headers", None),
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return error_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Internal Server Error",
        "An unexpected error occurred",
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach every boundary handler to the app."""
    app.add_exception_handler(CaseServiceError, handle_case_service_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_unexpected_error)
