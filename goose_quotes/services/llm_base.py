"""
Goose Quotes Backend: Abstract LLM Service Interface
=====================================================

What:  The contract every LLM provider client implements.
How:   Concrete providers (OpenAIService, GeminiService) subclass LLMService.
       GenerationService only ever talks to this interface, so switching
       providers is a configuration change (LLM_PROVIDER).
"""

from abc import ABC, abstractmethod


class LLMService(ABC):
    """
    Abstract interface for text and image generation.

    Contract:
        - complete() returns the raw response text of one chat turn
        - generate_image() returns the URL of one generated image
        - Provider errors and malformed responses surface as LLMServiceError
        - Retries happen inside the implementation; callers never retry
    """

    provider_name: str = "unknown"

    @abstractmethod
    async def complete(self, system_prompt: str, user_prompt: str) -> str:
        """
        Run one chat-completion turn.

        Args:
            system_prompt: Persona/instructions for the model.
            user_prompt:   The actual request.

        Returns:
            The response text. Never empty: an empty answer is an error.

        Raises:
            LLMServiceError: provider failure after retries, or no usable text.
        """
        ...

    @abstractmethod
    async def generate_image(self, prompt: str) -> str:
        """
        Generate one square image for the prompt.

        Returns:
            The URL of the generated image.

        Raises:
            LLMServiceError: provider failure, missing URL, or unsupported.
        """
        ...

    @abstractmethod
    async def health_check(self) -> bool:
        """Lightweight reachability check. Returns False instead of raising."""
        ...
