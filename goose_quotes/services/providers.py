"""
Process-wide LLM provider selection.

`get_llm_service` doubles as a FastAPI dependency; tests replace it through
`app.dependency_overrides`.
"""

from functools import lru_cache

from goose_quotes.config import settings
from goose_quotes.services.llm_base import LLMService


@lru_cache()
def get_llm_service() -> LLMService:
    """Builds the provider named by LLM_PROVIDER once and reuses it."""
    if settings.llm_provider == "gemini":
        from goose_quotes.services.gemini_service import GeminiService
        return GeminiService()

    from goose_quotes.services.openai_service import OpenAIService
    return OpenAIService()
