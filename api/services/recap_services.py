"""
Service Providers

Builds the recap services from the process settings for injection into
route handlers with ``Depends``. Each request gets a fresh, stateless
service instance; nothing is shared between requests except settings.
"""

import logging

from fastapi import Depends

from api.config import APISettings, get_settings
from recap.ingest import TranscriptIngestor
from recap.notifications import NotificationDispatcher
from recap.summarization import SummarizationGateway

# Configure logging
logger = logging.getLogger(__name__)


def get_transcript_ingestor(settings: APISettings = Depends(get_settings)) -> TranscriptIngestor:
    """Provide a transcript ingestor honouring the configured upload limit."""
    return TranscriptIngestor(max_bytes=settings.MAX_UPLOAD_BYTES)


def get_summarization_gateway(settings: APISettings = Depends(get_settings)) -> SummarizationGateway:
    """Provide a summarization gateway; a missing API key surfaces on use."""
    return SummarizationGateway(api_key=settings.gemini_api_key, model=settings.GEMINI_MODEL)


def get_notification_dispatcher(settings: APISettings = Depends(get_settings)) -> NotificationDispatcher:
    """Provide a dispatcher bound to the configured mail account."""
    return NotificationDispatcher(
        credentials=settings.mail_credentials(),
        host=settings.SMTP_HOST,
        port=settings.SMTP_PORT,
        timeout=settings.SMTP_TIMEOUT_SECONDS,
    )
