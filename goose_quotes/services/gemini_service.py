"""
Goose Quotes Backend: Google Gemini Service Implementation
===========================================================

What:  Alternative LLM provider (LLM_PROVIDER=gemini) for quotes and bios.
How:   Uses `google.generativeai` with the system prompt passed as the
       model's system instruction. Retries transient API errors with
       tenacity, then translates failures to LLMServiceError.

Limitation:
    The google-generativeai SDK has no image generation endpoint, so
    generate_image() always raises LLMServiceError (HTTP 503).
"""

import logging
import time
import uuid
from typing import Optional

import google.generativeai as genai
from google.api_core import exceptions as google_exceptions
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

TRANSIENT_GEMINI_ERRORS = (
    google_exceptions.ServiceUnavailable,
    google_exceptions.ResourceExhausted,
    google_exceptions.DeadlineExceeded,
    google_exceptions.InternalServerError,
    ConnectionError,
    TimeoutError,
)


class GeminiService(LLMService):
    """Google Gemini implementation of LLMService (text only)."""

    provider_name = "gemini"

    def __init__(self, api_key: Optional[str] = None, model_name: Optional[str] = None):
        self.api_key = settings.gemini_api_key if api_key is None else api_key
        self.model_name = model_name or settings.gemini_model

        # The SDK keeps credentials in module-level state
        if self.api_key:
            genai.configure(api_key=self.api_key)

        self.generation_config = genai.GenerationConfig(
            temperature=settings.llm_temperature,
            max_output_tokens=settings.llm_max_tokens,
        )

        logger.info("GeminiService initialized with model=%s", self.model_name)

    async def complete(self, system_prompt: str, user_prompt: str) -> str:
        if not self.api_key:
            raise LLMServiceError(
                message="The goose generation service is not configured (missing Gemini API key).",
                context={"provider": self.provider_name},
            )

        call_id = str(uuid.uuid4())[:8]
        model = genai.GenerativeModel(self.model_name, system_instruction=system_prompt)

        try:
            response = await self._call_gemini_with_retry(model, user_prompt, call_id)
        except google_exceptions.GoogleAPIError as e:
            logger.error("[%s] Gemini generation failed: %s", call_id, str(e))
            raise LLMServiceError(
                message="Text generation failed. Please try again later.",
                context={"call_id": call_id, "error_type": type(e).__name__},
            ) from e
        except (ConnectionError, TimeoutError) as e:
            logger.error("[%s] Gemini unreachable: %s", call_id, str(e))
            raise LLMServiceError(
                message="Text generation failed. Please try again later.",
                context={"call_id": call_id, "error_type": type(e).__name__},
            ) from e

        # .text raises ValueError when the response has no candidate parts
        # (e.g. blocked by safety filters)
        try:
            text = response.text
        except ValueError as e:
            raise LLMServiceError(
                message="Text generation returned no usable content.",
                context={"call_id": call_id},
            ) from e

        if not text or not text.strip():
            raise LLMServiceError(
                message="Text generation returned an empty response.",
                context={"call_id": call_id},
            )
        return text

    @retry(
        retry=retry_if_exception_type(TRANSIENT_GEMINI_ERRORS),
        stop=stop_after_attempt(settings.retry_max_attempts),
        wait=wait_exponential_jitter(
            initial=settings.retry_min_wait,
            max=settings.retry_max_wait,
            jitter=1,
        ),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True,
    )
    async def _call_gemini_with_retry(self, model, user_prompt: str, call_id: str):
        start_time = time.time()
        response = await model.generate_content_async(
            user_prompt,
            generation_config=self.generation_config,
            request_options={"timeout": settings.llm_timeout},
        )
        logger.info(
            "[%s] Gemini generation completed in %.0fms",
            call_id,
            (time.time() - start_time) * 1000,
        )
        return response

    async def generate_image(self, prompt: str) -> str:
        raise LLMServiceError(
            message="Image generation is not supported by the gemini provider.",
            context={"provider": self.provider_name},
        )

    async def health_check(self) -> bool:
        """Lists available models (no token cost)."""
        if not self.api_key:
            return False
        try:
            model_names = [m.name for m in genai.list_models()]
        except Exception as e:
            logger.warning("Gemini health check failed: %s", str(e))
            return False
        target = f"models/{self.model_name}"
        if target not in model_names:
            logger.warning("Configured model %s not found in available models", target)
        return True
