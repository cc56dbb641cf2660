"""
HTTP client for the Meeting Recap API.

Wraps the three endpoints with aiohttp. A new session is opened per call;
the client keeps no connection state between requests.
"""

import logging
from typing import Any, Callable, Dict, List, Optional

import aiohttp

from recap.summarization.models import SummaryFields
from recap.summarization.parser import coerce_fields

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://127.0.0.1:8000"


class RecapAPIError(Exception):
    """Non-success response from the API."""

    def __init__(self, status: int, error: Optional[str] = None, reason: Optional[str] = None):
        super().__init__(error or reason or f"HTTP {status}")
        self.status = status
        self.error = error
        self.reason = reason


class RecapAPIClient:
    """Async client for upload, summarize and email endpoints."""

    def __init__(self, base_url: str = DEFAULT_BASE_URL,
                 session_factory: Callable[[], aiohttp.ClientSession] = aiohttp.ClientSession):
        self.base_url = base_url.rstrip("/")
        self.session_factory = session_factory

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    @staticmethod
    async def _read_json(response) -> Dict[str, Any]:
        if response.status >= 400:
            error = None
            try:
                body = await response.json(content_type=None)
                if isinstance(body, dict):
                    error = body.get("error")
            except (aiohttp.ContentTypeError, ValueError):
                pass
            raise RecapAPIError(response.status, error=error, reason=response.reason)
        return await response.json(content_type=None)

    async def upload(self, filename: str, content: bytes) -> str:
        """Upload a transcript file and return its text."""
        form = aiohttp.FormData()
        form.add_field("file", content, filename=filename, content_type="text/plain")

        async with self.session_factory() as session:
            async with session.post(self._url("/api/upload"), data=form) as response:
                data = await self._read_json(response)
        return data.get("text") or ""

    async def summarize(self, text: str, instruction: str) -> SummaryFields:
        """Request a structured summary."""
        payload = {"text": text, "instruction": instruction}
        async with self.session_factory() as session:
            async with session.post(self._url("/api/summarize"), json=payload) as response:
                data = await self._read_json(response)
        return coerce_fields(data)

    async def send_email(self, to: List[str], subject: str,
                         text: Optional[str] = None, html: Optional[str] = None) -> str:
        """Send the summary email and return the message id."""
        payload = {"to": to, "subject": subject, "text": text, "html": html}
        async with self.session_factory() as session:
            async with session.post(self._url("/api/email"), json=payload) as response:
                data = await self._read_json(response)
        return data.get("messageId") or ""
