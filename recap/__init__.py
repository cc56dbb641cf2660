"""
Meeting Recap service root package.

Provides centralized access to the transcript ingestion, summarization and
notification components consumed by the HTTP layer and the client.
"""

from recap.errors import (
    RecapError,
    BadRequest,
    ConfigError,
    UpstreamEmpty,
    UpstreamError,
    TransportError,
    InternalError,
)
from recap.ingest import TranscriptIngestor
from recap.summarization import SummarizationGateway, SummaryFields, coerce_summary
from recap.notifications import NotificationDispatcher, find_invalid_recipients

__version__ = '1.0.0'

__all__ = [
    'RecapError',
    'BadRequest',
    'ConfigError',
    'UpstreamEmpty',
    'UpstreamError',
    'TransportError',
    'InternalError',
    'TranscriptIngestor',
    'SummarizationGateway',
    'SummaryFields',
    'coerce_summary',
    'NotificationDispatcher',
    'find_invalid_recipients',
]
