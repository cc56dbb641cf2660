"""
API Package Initialization

Provides the FastAPI application for the Meeting Recap service:
transcript upload, summarization and summary email routes.
"""

from api.routes import transcripts, summaries, notifications
from api.config import get_settings

__all__ = [
    'transcripts',
    'summaries',
    'notifications',
    'get_settings',
]
