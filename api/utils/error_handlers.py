"""
Global Exception Handlers

Implements exception handling with consistent error responses and proper
logging for all API exceptions.

Design Considerations:
- Every failure rendered as a JSON body carrying an ``error`` message
- Service errors mapped through their own status and error code
- Malformed request bodies reported as caller errors (400)
- Unexpected failures sanitized before reaching the client
"""

import json
import logging
import traceback
from datetime import datetime, timezone
from typing import Any, Dict, List

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import JSONResponse as StarletteJSONResponse

from api.models.errors import ErrorResponse, ValidationErrorResponse, ValidationErrorItem
from recap.errors import RecapError, BadRequest

# Configure logging
logger = logging.getLogger(__name__)

# Custom JSON Encoder to handle datetime serialization
class DateTimeEncoder(json.JSONEncoder):
    """Custom JSON encoder that handles datetime objects."""
    def default(self, obj):
        if isinstance(obj, datetime):
            return obj.isoformat()
        return super().default(obj)

def serialize_json(obj):
    """Serialize object to JSON string with datetime support."""
    return json.dumps(obj, cls=DateTimeEncoder)

# Custom JSONResponse that automatically handles datetime serialization
class JSONResponse(StarletteJSONResponse):
    """Custom JSONResponse that handles datetime serialization."""
    def render(self, content):
        return serialize_json(content).encode("utf-8")

def add_exception_handlers(app: FastAPI) -> None:
    """
    Register all exception handlers with the FastAPI application.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(RecapError, service_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    logger.info("Exception handlers registered")


async def service_exception_handler(
    request: Request,
    exc: RecapError
) -> JSONResponse:
    """
    Handle errors raised by the recap services.

    Args:
        request: Request that caused exception
        exc: Service error

    Returns:
        Error response with the status mapped from the error kind
    """
    log_exception(request, exc, exc.status_code)

    error_response = ErrorResponse(
        error=exc.message,
        error_code=exc.error_code,
        details=exc.details,
        timestamp=datetime.now(timezone.utc)
    )

    return JSONResponse(
        status_code=exc.status_code,
        content=error_response.model_dump()
    )


async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException
) -> JSONResponse:
    """
    Handle HTTP exceptions with standardized format.

    Args:
        request: Request that caused exception
        exc: HTTP exception

    Returns:
        Standardized error response
    """
    log_exception(request, exc, exc.status_code)

    error_response = ErrorResponse(
        error=str(exc.detail),
        error_code=f"HTTP_{exc.status_code}",
        details=getattr(exc, "details", None),
        timestamp=datetime.now(timezone.utc)
    )

    return JSONResponse(
        status_code=exc.status_code,
        content=error_response.model_dump()
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle request validation errors with field information.

    A body that does not match the expected shape is a caller error and
    is reported as 400 Bad Request.

    Args:
        request: Request that caused exception
        exc: Validation exception

    Returns:
        Validation error response
    """
    log_exception(request, exc, status.HTTP_400_BAD_REQUEST)

    validation_errors = _format_validation_errors(exc.errors())

    error_response = ValidationErrorResponse(
        error="Invalid request body",
        error_code=BadRequest.error_code,
        validation_errors=validation_errors,
        timestamp=datetime.now(timezone.utc)
    )

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_response.model_dump()
    )


def _format_validation_errors(errors: List[Dict[str, Any]]) -> List[ValidationErrorItem]:
    # loc tuples mix ints and strings
    return [
        ValidationErrorItem(
            loc=[str(loc_item) for loc_item in error.get("loc", ())],
            msg=error.get("msg", ""),
            type=error.get("type", "")
        )
        for error in errors
    ]


async def general_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """
    Handle all unhandled exceptions with safe error responses.

    Args:
        request: Request that caused exception
        exc: Unhandled exception

    Returns:
        Safe error response
    """
    log_exception(request, exc, status.HTTP_500_INTERNAL_SERVER_ERROR, include_traceback=True)

    error_response = ErrorResponse(
        error="An unexpected error occurred",
        error_code="INTERNAL_SERVER_ERROR",
        details={"type": exc.__class__.__name__},
        timestamp=datetime.now(timezone.utc)
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_response.model_dump()
    )


def log_exception(
    request: Request,
    exc: Exception,
    status_code: int,
    include_traceback: bool = False
) -> None:
    """
    Log exception with request context and appropriate severity.

    Args:
        request: Request that caused exception
        exc: Exception instance
        status_code: HTTP status code
        include_traceback: Whether to include full traceback
    """
    if status_code >= 500:
        log_level = logging.ERROR
    elif status_code >= 400:
        log_level = logging.WARNING
    else:
        log_level = logging.INFO

    error_message = f"Exception during request to {request.method} {request.url.path}"
    error_details = {
        "status_code": status_code,
        "error_type": exc.__class__.__name__,
        "error_message": str(exc),
        "client_host": request.client.host if request.client else "unknown"
    }

    if include_traceback:
        error_details["traceback"] = traceback.format_exc()

    logger.log(log_level, error_message, extra={"error_details": error_details})
