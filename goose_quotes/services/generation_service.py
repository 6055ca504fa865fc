"""
Goose Quotes Backend: Generation Service
=========================================

What:  Turns a goose into quotes, a bio, an image URL, or a honk.
How:   Builds prompts from the goose's fields (see prompts.py), calls the
       injected LLMService, and shapes the answer into response models.
Who:   Called by the generation routes after the goose has been loaded, so
       a missing goose never reaches the provider.

Only the bio is persisted; quotes and image URLs are returned and forgotten.
"""

import logging

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from goose_quotes.exceptions import LLMServiceError
from goose_quotes.models.goose import Goose
from goose_quotes.schemas.goose import ImageResponse, MessageResponse, QuotesResponse
from goose_quotes.services.goose_service import GooseService, goose_service
from goose_quotes.services.llm_base import LLMService
from goose_quotes.services.prompts import (
    build_bio_prompts,
    build_honk_message,
    build_image_prompt,
    build_quotes_prompts,
    parse_quotes,
)
from goose_quotes.services.providers import get_llm_service

logger = logging.getLogger(__name__)


class GenerationService:
    def __init__(self, llm: LLMService, geese: GooseService = goose_service):
        self.llm = llm
        self.geese = geese

    async def generate_quotes(self, goose: Goose) -> QuotesResponse:
        """Five goose-influenced quotes in the style of the goose's namesake."""
        system_prompt, user_prompt = build_quotes_prompts(goose)
        text = await self.llm.complete(system_prompt, user_prompt)

        quotes = parse_quotes(text)
        if not quotes:
            raise LLMServiceError(
                message="Quote generation returned no quotes.",
                context={"goose_id": goose.id},
            )

        logger.info("Generated %d quotes for goose %s", len(quotes), goose.id)
        return QuotesResponse(name=goose.name, quotes=quotes)

    async def generate_bio(self, db: AsyncSession, goose: Goose) -> Goose:
        """Generates a bio, stores it on the goose, and returns the updated row."""
        system_prompt, user_prompt = build_bio_prompts(goose)
        bio = (await self.llm.complete(system_prompt, user_prompt)).strip()
        return await self.geese.update_by_id(db, goose.id, bio=bio)

    async def generate_image(self, goose: Goose) -> ImageResponse:
        image_url = await self.llm.generate_image(build_image_prompt(goose))
        return ImageResponse(image_url=image_url)

    def honk(self, goose: Goose) -> MessageResponse:
        return MessageResponse(message=build_honk_message(goose))


def get_generation_service(llm: LLMService = Depends(get_llm_service)) -> GenerationService:
    """FastAPI dependency wiring the process-wide provider into a GenerationService."""
    return GenerationService(llm=llm)
