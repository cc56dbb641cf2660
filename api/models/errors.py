"""
Error Response Models

Defines standardized error response models for consistent
error handling across the API surface.

Design Considerations:
- ``error`` carries the human-readable message clients display
- ``error_code`` distinguishes caller faults from server faults
- Proper timestamp handling
"""

from datetime import datetime, timezone
from typing import Dict, Optional, Any, List

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """
    Standardized error response model for API errors.

    Provides consistent error structure with metadata for client
    understanding and debugging.
    """
    error: str = Field(
        ...,
        description="Human-readable error message"
    )
    error_code: str = Field(
        ...,
        description="Machine-readable error code"
    )
    details: Optional[Dict[str, Any]] = Field(
        default=None,
        description="Additional error details"
    )
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Error timestamp"
    )


class ValidationErrorItem(BaseModel):
    """
    Validation error detail model for data validation errors.

    Contains specific information about field validation failures.
    """
    loc: List[str] = Field(
        ...,
        description="Error location (field path)"
    )
    msg: str = Field(
        ...,
        description="Error message"
    )
    type: str = Field(
        ...,
        description="Error type"
    )


class ValidationErrorResponse(ErrorResponse):
    """
    Error response for malformed request bodies.

    Extends standard error response with field-specific
    validation error details.
    """
    validation_errors: List[ValidationErrorItem] = Field(
        ...,
        description="List of specific validation errors"
    )
