# api/services/__init__.py
"""
API Services Package

Centralizes service construction for clean business logic
separation from route handlers.
"""

from api.services.recap_services import (
    get_transcript_ingestor,
    get_summarization_gateway,
    get_notification_dispatcher,
)

__all__ = ["get_transcript_ingestor", "get_summarization_gateway", "get_notification_dispatcher"]
