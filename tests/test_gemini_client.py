"""
Tests for the Gemini client wrapper.

The google-genai Client is patched so requests never leave the process.
"""

from unittest.mock import MagicMock, patch

import pytest

from recap.integrations.gemini.client import GeminiClient, GenerationSettings, DEFAULT_MODEL


@pytest.fixture
def mock_genai_client():
    with patch("recap.integrations.gemini.client.genai.Client") as client_cls:
        yield client_cls


class TestGeminiClient:
    """Request construction and response handling."""

    def test_requires_api_key(self, mock_genai_client):
        with pytest.raises(ValueError):
            GeminiClient(api_key="")

    def test_builds_sdk_client_with_key(self, mock_genai_client):
        client = GeminiClient(api_key="secret")

        mock_genai_client.assert_called_once_with(api_key="secret")
        assert client.model == DEFAULT_MODEL

    @pytest.mark.asyncio
    async def test_generate_text_sends_fixed_generation_settings(self, mock_genai_client):
        sdk = mock_genai_client.return_value
        sdk.models.generate_content.return_value = MagicMock(text='{"summary": "ok"}')
        client = GeminiClient(api_key="secret", model="gemini-test")

        text = await client.generate_text("prompt body", system_instruction="be strict")

        assert text == '{"summary": "ok"}'
        kwargs = sdk.models.generate_content.call_args.kwargs
        assert kwargs["model"] == "gemini-test"
        assert kwargs["contents"] == "prompt body"

        config = kwargs["config"]
        assert config.temperature == 0.2
        assert config.top_p == 0.95
        assert config.top_k == 40
        assert config.max_output_tokens == 1024
        assert config.response_mime_type == "application/json"
        assert "be strict" in str(config.system_instruction)

    @pytest.mark.asyncio
    async def test_generate_text_returns_none_without_text(self, mock_genai_client):
        sdk = mock_genai_client.return_value
        sdk.models.generate_content.return_value = MagicMock(text=None)

        assert await GeminiClient(api_key="secret").generate_text("prompt") is None

    @pytest.mark.asyncio
    async def test_sdk_errors_propagate(self, mock_genai_client):
        sdk = mock_genai_client.return_value
        sdk.models.generate_content.side_effect = RuntimeError("permission denied")

        with pytest.raises(RuntimeError, match="permission denied"):
            await GeminiClient(api_key="secret").generate_text("prompt")

    def test_generation_settings_defaults(self):
        settings = GenerationSettings()
        assert (settings.temperature, settings.top_p, settings.top_k, settings.max_output_tokens) == (0.2, 0.95, 40, 1024)
