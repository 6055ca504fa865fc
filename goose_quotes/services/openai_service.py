"""
Goose Quotes Backend: OpenAI Service Implementation
====================================================

What:  Default LLM provider. Chat completions for quotes and bios, image
       generation for goose portraits.
How:   Wraps `openai.AsyncOpenAI`. Transient failures (connection errors,
       timeouts, rate limits, 5xx) are retried by tenacity with exponential
       backoff and jitter; everything else, and any response without usable
       content, is translated to LLMServiceError.
Who:   Built once per process by `get_llm_service()`.

The SDK's own retry loop is disabled (max_retries=0) so the attempt count in
RETRY_MAX_ATTEMPTS is the only one in play.
"""

import logging
import time
import uuid
from typing import Optional

import openai
from openai import AsyncOpenAI
from tenacity import (
    before_sleep_log,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential_jitter,
)

from goose_quotes.config import settings
from goose_quotes.exceptions import LLMServiceError
from goose_quotes.services.llm_base import LLMService

logger = logging.getLogger(__name__)

# Failures worth another attempt. Auth, permission and bad-request errors are
# not in this list: retrying cannot fix them.
TRANSIENT_OPENAI_ERRORS = (
    openai.APIConnectionError,  # includes APITimeoutError
    openai.RateLimitError,
    openai.InternalServerError,
)

provider_retry = retry(
    retry=retry_if_exception_type(TRANSIENT_OPENAI_ERRORS),
    stop=stop_after_attempt(settings.retry_max_attempts),
    wait=wait_exponential_jitter(
        initial=settings.retry_min_wait,
        max=settings.retry_max_wait,
        jitter=1,
    ),
    before_sleep=before_sleep_log(logger, logging.WARNING),
    reraise=True,
)


class OpenAIService(LLMService):
    """
    OpenAI implementation of LLMService.

    The AsyncOpenAI client is created lazily on first use, so the app can
    start (and serve CRUD endpoints) without an API key; the generation
    endpoints then answer 503 instead.
    """

    provider_name = "openai"

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        image_model: Optional[str] = None,
        client: Optional[AsyncOpenAI] = None,
    ):
        self.api_key = settings.openai_api_key if api_key is None else api_key
        self.model = model or settings.openai_model
        self.image_model = image_model or settings.openai_image_model
        self._client = client

        logger.info(
            "OpenAIService initialized with model=%s, image_model=%s",
            self.model,
            self.image_model,
        )

    @property
    def client(self) -> AsyncOpenAI:
        if self._client is None:
            if not self.api_key:
                raise LLMServiceError(
                    message="The goose generation service is not configured (missing OpenAI API key).",
                    context={"provider": self.provider_name},
                )
            self._client = AsyncOpenAI(
                api_key=self.api_key,
                timeout=settings.llm_timeout,
                max_retries=0,
            )
        return self._client

    async def complete(self, system_prompt: str, user_prompt: str) -> str:
        call_id = str(uuid.uuid4())[:8]
        client = self.client
        start_time = time.time()

        try:
            response = await self._create_chat_completion(client, system_prompt, user_prompt)
        except openai.OpenAIError as e:
            logger.error(
                "[%s] OpenAI chat completion failed after %.0fms: %s",
                call_id,
                (time.time() - start_time) * 1000,
                str(e),
            )
            raise LLMServiceError(
                message="Text generation failed. Please try again later.",
                context={"call_id": call_id, "error_type": type(e).__name__},
            ) from e

        if not response.choices:
            raise LLMServiceError(
                message="Text generation returned no choices.",
                context={"call_id": call_id},
            )

        content = response.choices[0].message.content
        if not content or not content.strip():
            raise LLMServiceError(
                message="Text generation returned an empty response.",
                context={"call_id": call_id},
            )

        logger.info(
            "[%s] OpenAI chat completion finished in %.0fms (%d chars)",
            call_id,
            (time.time() - start_time) * 1000,
            len(content),
        )
        return content

    async def generate_image(self, prompt: str) -> str:
        call_id = str(uuid.uuid4())[:8]
        client = self.client

        try:
            response = await self._create_image(client, prompt)
        except openai.OpenAIError as e:
            logger.error("[%s] OpenAI image generation failed: %s", call_id, str(e))
            raise LLMServiceError(
                message="Image generation failed. Please try again later.",
                context={"call_id": call_id, "error_type": type(e).__name__},
            ) from e

        if not response.data or not response.data[0].url:
            raise LLMServiceError(
                message="Image generation returned no image URL.",
                context={"call_id": call_id},
            )

        logger.info("[%s] OpenAI image generated", call_id)
        return response.data[0].url

    @provider_retry
    async def _create_chat_completion(
        self, client: AsyncOpenAI, system_prompt: str, user_prompt: str
    ):
        return await client.chat.completions.create(
            model=self.model,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            temperature=settings.llm_temperature,
            max_tokens=settings.llm_max_tokens,
        )

    @provider_retry
    async def _create_image(self, client: AsyncOpenAI, prompt: str):
        return await client.images.generate(
            model=self.image_model,
            prompt=prompt,
            n=1,
            size=settings.image_size,
        )

    async def health_check(self) -> bool:
        """Retrieves the configured model's metadata (no token cost)."""
        try:
            await self.client.models.retrieve(self.model)
            return True
        except (LLMServiceError, openai.OpenAIError) as e:
            logger.warning("OpenAI health check failed: %s", str(e))
            return False
