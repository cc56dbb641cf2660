"""
SummarizationGateway: Structured Meeting Summary Service

Forwards a transcript and a free-text instruction to the Gemini API,
requesting strict JSON with five fields, and coerces whatever comes back
into a fully typed SummaryFields.

Design Considerations:
- Input validated before any configuration or network access
- Provider credential checked per call so a missing key is reported, not fatal
- Malformed model output degrades to empty fields instead of raising
- Provider failures translated into the service error taxonomy
"""

import logging
import time
import uuid
from datetime import datetime
from typing import Optional

from recap.errors import BadRequest, ConfigError, UpstreamEmpty, UpstreamError
from recap.integrations.gemini.client import GeminiClient, DEFAULT_MODEL
from .models import SummaryFields
from .parser import coerce_summary

logger = logging.getLogger(__name__)

SYSTEM_INSTRUCTION = "You are a helpful assistant that outputs strict JSON only, without extra commentary."

PROMPT_TEMPLATE = """
Instruction: {instruction}

Transcript:
{transcript}

Return strict JSON with this schema:
{{
  "summary": "string",
  "action_items": ["string"],
  "decisions": ["string"],
  "follow_ups": ["string"],
  "risks": ["string"]
}}
"""


class SummarizationGateway:
    """
    Summarization service backed by a generative model.

    A GeminiClient is built lazily from the API key on first use. Tests and
    callers that already hold a client can pass it in directly.
    """

    def __init__(self, api_key: Optional[str] = None, model: str = DEFAULT_MODEL,
                 client: Optional[GeminiClient] = None):
        self.api_key = api_key
        self.model = model
        self._client = client

    def _get_client(self) -> GeminiClient:
        if self._client is None:
            if not self.api_key:
                raise ConfigError("GEMINI_API_KEY missing")
            self._client = GeminiClient(api_key=self.api_key, model=self.model)
        return self._client

    @staticmethod
    def build_prompt(transcript: str, instruction: str) -> str:
        return PROMPT_TEMPLATE.format(instruction=instruction, transcript=transcript)

    async def summarize(self, transcript: Optional[str], instruction: Optional[str]) -> SummaryFields:
        """
        Produce a structured summary of a transcript.

        Args:
            transcript: Raw meeting transcript
            instruction: Directive steering style and focus of the summary

        Returns:
            SummaryFields with every field present, possibly empty

        Raises:
            BadRequest: If transcript or instruction is missing
            ConfigError: If no provider credential is configured
            UpstreamError: If the provider call fails
            UpstreamEmpty: If the provider returns no text
        """
        if not transcript or not transcript.strip() or not instruction or not instruction.strip():
            raise BadRequest("Missing text or instruction")

        client = self._get_client()
        request_id = f"summarize-{datetime.now().strftime('%Y%m%d%H%M%S')}-{uuid.uuid4().hex[:6]}"
        logger.info(f"[{request_id}] Summarizing transcript of {len(transcript)} characters")

        start_time = time.time()
        try:
            raw = await client.generate_text(
                self.build_prompt(transcript, instruction),
                system_instruction=SYSTEM_INSTRUCTION,
            )
        except Exception as e:
            logger.error(f"[{request_id}] Summarization request failed: {e}")
            raise UpstreamError(str(e) or "Summarization failed") from e

        if not raw or not isinstance(raw, str):
            logger.warning(f"[{request_id}] Model returned no text")
            raise UpstreamEmpty("Empty model response")

        result = coerce_summary(raw)
        if result.is_empty:
            logger.warning(f"[{request_id}] Model output yielded no usable fields")
        logger.info(f"[{request_id}] Summary ready in {time.time() - start_time:.3f} seconds")
        return result
