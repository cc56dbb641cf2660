"""
Tests for the SummarizationGateway.

The Gemini client is replaced with an AsyncMock so no network calls are
made. Covers input validation, configuration checks, prompt construction,
provider failure translation and response coercion.
"""

import json
import logging
import re
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from recap.errors import BadRequest, ConfigError, UpstreamEmpty, UpstreamError
from recap.summarization.gateway import SummarizationGateway, SYSTEM_INSTRUCTION


@pytest.fixture
def mock_client():
    """Gemini client double returning configurable text."""
    client = MagicMock()
    client.generate_text = AsyncMock()
    return client


@pytest.fixture
def gateway(mock_client):
    return SummarizationGateway(api_key="test-key", client=mock_client)


class TestSummarizationGateway:
    """Summarization request handling."""

    @pytest.mark.asyncio
    async def test_ship_friday_scenario(self, gateway, mock_client):
        """A schema-matching response is returned unchanged."""
        payload = {
            "summary": "Team agreed to ship Friday.",
            "action_items": ["Ship by Friday"],
            "decisions": [],
            "follow_ups": [],
            "risks": [],
        }
        mock_client.generate_text.return_value = json.dumps(payload)

        result = await gateway.summarize("Alice: let's ship Friday.", "Summarize briefly")

        assert result.to_dict() == payload

    @pytest.mark.asyncio
    async def test_log_lines_carry_request_id(self, gateway, mock_client, caplog):
        mock_client.generate_text.return_value = '{"summary": "ok"}'

        with caplog.at_level(logging.INFO, logger="recap.summarization.gateway"):
            await gateway.summarize("transcript", "instruction")

        request_ids = {re.match(r"\[(summarize-\d{14}-[0-9a-f]{6})\]", r.getMessage()).group(1)
                       for r in caplog.records if r.name == "recap.summarization.gateway"}
        assert len(request_ids) == 1

    @pytest.mark.asyncio
    async def test_prompt_embeds_instruction_and_transcript(self, gateway, mock_client):
        mock_client.generate_text.return_value = "{}"

        await gateway.summarize("Bob: budget approved.", "Focus on money")

        prompt = mock_client.generate_text.call_args.args[0]
        assert "Instruction: Focus on money" in prompt
        assert "Bob: budget approved." in prompt
        assert '"action_items": ["string"]' in prompt
        assert mock_client.generate_text.call_args.kwargs["system_instruction"] == SYSTEM_INSTRUCTION

    @pytest.mark.asyncio
    async def test_prose_wrapped_response(self, gateway, mock_client):
        mock_client.generate_text.return_value = 'Sure! {"summary":"ok"} Let me know if you need more.'

        result = await gateway.summarize("text", "instruction")

        assert result.summary == "ok"
        assert result.action_items == []

    @pytest.mark.asyncio
    async def test_garbage_response_yields_empty_fields(self, gateway, mock_client):
        mock_client.generate_text.return_value = "I cannot help with that."

        result = await gateway.summarize("text", "instruction")

        assert result.is_empty

    @pytest.mark.asyncio
    @pytest.mark.parametrize("text,instruction", [
        ("", "Summarize"),
        ("   ", "Summarize"),
        (None, "Summarize"),
        ("transcript", ""),
        ("transcript", None),
    ])
    async def test_missing_input_rejected(self, gateway, mock_client, text, instruction):
        with pytest.raises(BadRequest, match="Missing text or instruction"):
            await gateway.summarize(text, instruction)
        mock_client.generate_text.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_api_key_is_config_error(self):
        gateway = SummarizationGateway(api_key=None)

        with pytest.raises(ConfigError, match="GEMINI_API_KEY"):
            await gateway.summarize("text", "instruction")

    @pytest.mark.asyncio
    async def test_input_checked_before_configuration(self):
        gateway = SummarizationGateway(api_key=None)

        with pytest.raises(BadRequest):
            await gateway.summarize("", "instruction")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("raw", [None, ""])
    async def test_empty_provider_response(self, gateway, mock_client, raw):
        mock_client.generate_text.return_value = raw

        with pytest.raises(UpstreamEmpty):
            await gateway.summarize("text", "instruction")

    @pytest.mark.asyncio
    async def test_provider_failure_is_upstream_error(self, gateway, mock_client):
        mock_client.generate_text.side_effect = RuntimeError("quota exceeded")

        with pytest.raises(UpstreamError, match="quota exceeded"):
            await gateway.summarize("text", "instruction")

    def test_client_built_lazily_from_api_key(self):
        with patch("recap.summarization.gateway.GeminiClient") as client_cls:
            gateway = SummarizationGateway(api_key="key", model="gemini-test")
            client_cls.assert_not_called()

            gateway._get_client()
            gateway._get_client()

        client_cls.assert_called_once_with(api_key="key", model="gemini-test")
