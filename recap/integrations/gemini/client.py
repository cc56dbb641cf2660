"""
Thin asynchronous wrapper around the Google Gen AI SDK.

The SDK call is blocking, so it runs in a worker thread. No retries are
performed; failures propagate to the caller unchanged.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Optional

from google import genai
from google.genai import types

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-1.5-flash"


@dataclass(frozen=True)
class GenerationSettings:
    """Sampling parameters sent with every request."""
    temperature: float = 0.2
    top_p: float = 0.95
    top_k: int = 40
    max_output_tokens: int = 1024
    response_mime_type: str = "application/json"


class GeminiClient:
    """Gemini text generation client returning raw response text."""

    def __init__(self, api_key: str, model: str = DEFAULT_MODEL,
                 generation: Optional[GenerationSettings] = None):
        if not api_key:
            raise ValueError("GEMINI_API_KEY must be provided")

        self.model = model
        self.generation = generation or GenerationSettings()
        self.client = genai.Client(api_key=api_key)

    def _build_config(self, system_instruction: Optional[str]) -> types.GenerateContentConfig:
        return types.GenerateContentConfig(
            system_instruction=system_instruction,
            temperature=self.generation.temperature,
            top_p=self.generation.top_p,
            top_k=self.generation.top_k,
            max_output_tokens=self.generation.max_output_tokens,
            response_mime_type=self.generation.response_mime_type,
        )

    async def generate_text(self, prompt: str, system_instruction: Optional[str] = None) -> Optional[str]:
        """
        Send a single-turn prompt and return the response text.

        Args:
            prompt: User prompt
            system_instruction: Optional system instruction for the model

        Returns:
            Response text, or None when the model produced no text
        """
        logger.debug(f"Sending prompt of {len(prompt)} characters to {self.model}")
        response = await asyncio.to_thread(
            self.client.models.generate_content,
            model=self.model,
            contents=prompt,
            config=self._build_config(system_instruction),
        )
        return response.text
