"""
Goose Quotes Backend: OpenAI Service Unit Tests (Mocked)
=========================================================

What:  Tests for OpenAIService with a mocked AsyncOpenAI client.
How:   The client is injected through the constructor, so no network
       access and no real key are needed.

What we test:
    ✅ Chat completion content is returned as-is
    ✅ Model, temperature and token limit come from settings
    ✅ Missing choices / empty content raise LLMServiceError
    ✅ Transient errors are retried, auth errors are not
    ✅ Image generation returns the first URL
    ❌ Real API calls
"""

from unittest.mock import AsyncMock, MagicMock

import httpx
import openai
import pytest

from goose_quotes.config import settings
from goose_quotes.exceptions import LLMServiceError
from goose_quotes.services.openai_service import OpenAIService

_REQUEST = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")


def _chat_response(*contents):
    response = MagicMock()
    response.choices = [MagicMock(message=MagicMock(content=c)) for c in contents]
    return response


def _mock_client(chat=None, chat_error=None, image=None):
    client = MagicMock()
    client.chat.completions.create = AsyncMock(return_value=chat, side_effect=chat_error)
    client.images.generate = AsyncMock(return_value=image)
    client.models.retrieve = AsyncMock()
    return client


class TestOpenAIComplete:

    @pytest.mark.asyncio
    async def test_complete_success(self):
        """The first choice's content should be returned unchanged."""
        client = _mock_client(chat=_chat_response("Honk\nHonk honk"))
        service = OpenAIService(api_key="test-key", client=client)

        result = await service.complete("You are a goose.", "Honk for me.")

        assert result == "Honk\nHonk honk"
        kwargs = client.chat.completions.create.await_args.kwargs
        assert kwargs["model"] == settings.openai_model
        assert kwargs["temperature"] == settings.llm_temperature
        assert kwargs["max_tokens"] == settings.llm_max_tokens
        assert kwargs["messages"] == [
            {"role": "system", "content": "You are a goose."},
            {"role": "user", "content": "Honk for me."},
        ]

    @pytest.mark.asyncio
    async def test_no_choices(self):
        client = _mock_client(chat=_chat_response())
        service = OpenAIService(api_key="test-key", client=client)

        with pytest.raises(LLMServiceError, match="no choices"):
            await service.complete("system", "user")

    @pytest.mark.asyncio
    async def test_empty_content(self):
        client = _mock_client(chat=_chat_response(None))
        service = OpenAIService(api_key="test-key", client=client)

        with pytest.raises(LLMServiceError, match="empty response"):
            await service.complete("system", "user")

    @pytest.mark.asyncio
    async def test_auth_error_is_not_retried(self):
        """AuthenticationError should fail fast with a single attempt."""
        error = openai.AuthenticationError(
            message="Incorrect API key",
            response=httpx.Response(401, request=_REQUEST),
            body=None,
        )
        client = _mock_client(chat_error=error)
        service = OpenAIService(api_key="test-key", client=client)

        with pytest.raises(LLMServiceError) as exc_info:
            await service.complete("system", "user")

        assert client.chat.completions.create.await_count == 1
        assert exc_info.value.context["error_type"] == "AuthenticationError"

    @pytest.mark.asyncio
    async def test_connection_error_is_retried(self):
        """Connection failures are retried up to RETRY_MAX_ATTEMPTS times."""
        client = _mock_client(chat_error=openai.APIConnectionError(request=_REQUEST))
        service = OpenAIService(api_key="test-key", client=client)

        with pytest.raises(LLMServiceError):
            await service.complete("system", "user")

        assert client.chat.completions.create.await_count == settings.retry_max_attempts

    @pytest.mark.asyncio
    async def test_missing_api_key(self):
        """Without a key, no client is built and the call fails with LLMServiceError."""
        service = OpenAIService(api_key="")

        with pytest.raises(LLMServiceError, match="missing OpenAI API key"):
            await service.complete("system", "user")


class TestOpenAIImage:

    @pytest.mark.asyncio
    async def test_generate_image_returns_url(self):
        image = MagicMock()
        image.data = [MagicMock(url="https://images.example.com/goose.png")]
        client = _mock_client(image=image)
        service = OpenAIService(api_key="test-key", client=client)

        url = await service.generate_image("A goose in a hat")

        assert url == "https://images.example.com/goose.png"
        kwargs = client.images.generate.await_args.kwargs
        assert kwargs["model"] == settings.openai_image_model
        assert kwargs["size"] == "1024x1024"
        assert kwargs["n"] == 1

    @pytest.mark.asyncio
    async def test_generate_image_without_url(self):
        image = MagicMock()
        image.data = []
        service = OpenAIService(api_key="test-key", client=_mock_client(image=image))

        with pytest.raises(LLMServiceError, match="no image URL"):
            await service.generate_image("A goose")


class TestOpenAIHealth:

    @pytest.mark.asyncio
    async def test_health_check_ok(self):
        service = OpenAIService(api_key="test-key", client=_mock_client())
        assert await service.health_check() is True

    @pytest.mark.asyncio
    async def test_health_check_without_key(self):
        service = OpenAIService(api_key="")
        assert await service.health_check() is False
