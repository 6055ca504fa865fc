"""
Goose Quotes Backend: Geese Route Handlers
===========================================

What:  CRUD, search and generation endpoints under /api/geese.
How:   Each handler extracts parameters, makes one GooseService call
       (sometimes followed by one GenerationService call) and returns a
       response model. Errors are raised, never returned; the handlers in
       main.py turn them into status codes.

Route Matching:
    Id routes use the `{goose_id:int}` path convertor, so the static
    segments `flock-leaders` and `language` can never be captured as an id,
    whatever order routes are declared in. The catch-all routes at the bottom
    answer 400 for ids that are not integers instead of letting them fall
    through to a generic 404.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from goose_quotes.database import get_db_session
from goose_quotes.exceptions import ValidationError
from goose_quotes.schemas.goose import (
    ErrorResponse,
    GooseCreate,
    GooseMotivationsUpdate,
    GooseNameUpdate,
    GooseResponse,
    ImageResponse,
    MessageResponse,
    QuotesResponse,
)
from goose_quotes.services.generation_service import GenerationService, get_generation_service
from goose_quotes.services.goose_service import goose_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/geese", tags=["Geese"])

NOT_FOUND = {404: {"description": "Goose not found", "model": MessageResponse}}
UPSTREAM_FAILURE = {503: {"description": "LLM provider unavailable", "model": ErrorResponse}}


# ── Collection ────────────────────────────────────────────────────────────

@router.get(
    "",
    response_model=List[GooseResponse],
    summary="List geese, optionally searching by name",
)
async def list_geese(
    name: Optional[str] = Query(
        default=None,
        description="Case-insensitive substring of the name. Results are then sorted by name.",
    ),
    db: AsyncSession = Depends(get_db_session),
):
    return await goose_service.list_or_search(db, name=name)


@router.post(
    "",
    response_model=GooseResponse,
    summary="Create a goose",
)
async def create_goose(
    payload: GooseCreate,
    db: AsyncSession = Depends(get_db_session),
):
    return await goose_service.create(db, payload)


@router.get(
    "/flock-leaders",
    response_model=List[GooseResponse],
    summary="List geese that lead a flock",
)
async def list_flock_leaders(db: AsyncSession = Depends(get_db_session)):
    return await goose_service.list_flock_leaders(db)


@router.get(
    "/language/{language}",
    response_model=List[GooseResponse],
    summary="List geese by programming language",
)
async def list_geese_by_language(
    language: str,
    db: AsyncSession = Depends(get_db_session),
):
    return await goose_service.list_by_language(db, language)


# ── Single goose ──────────────────────────────────────────────────────────

@router.get(
    "/{goose_id:int}",
    response_model=GooseResponse,
    responses=NOT_FOUND,
    summary="Get a goose by id",
)
async def get_goose(goose_id: int, db: AsyncSession = Depends(get_db_session)):
    return await goose_service.get_by_id(db, goose_id)


@router.patch(
    "/{goose_id:int}",
    response_model=GooseResponse,
    responses=NOT_FOUND,
    summary="Rename a goose",
)
async def update_goose_name(
    goose_id: int,
    payload: GooseNameUpdate,
    db: AsyncSession = Depends(get_db_session),
):
    return await goose_service.update_by_id(db, goose_id, name=payload.name)


@router.patch(
    "/{goose_id:int}/motivations",
    response_model=GooseResponse,
    responses=NOT_FOUND,
    summary="Replace a goose's motivations",
)
async def update_goose_motivations(
    goose_id: int,
    payload: GooseMotivationsUpdate,
    db: AsyncSession = Depends(get_db_session),
):
    return await goose_service.update_by_id(db, goose_id, motivations=payload.motivations)


# ── Generation ────────────────────────────────────────────────────────────

@router.post(
    "/{goose_id:int}/generate",
    response_model=QuotesResponse,
    responses={**NOT_FOUND, **UPSTREAM_FAILURE},
    summary="Generate goose-influenced quotes",
)
async def generate_quotes(
    goose_id: int,
    db: AsyncSession = Depends(get_db_session),
    generation: GenerationService = Depends(get_generation_service),
):
    goose = await goose_service.get_by_id(db, goose_id)
    return await generation.generate_quotes(goose)


@router.post(
    "/{goose_id:int}/bio",
    response_model=GooseResponse,
    responses={**NOT_FOUND, **UPSTREAM_FAILURE},
    summary="Generate and store a goose bio",
)
async def generate_bio(
    goose_id: int,
    db: AsyncSession = Depends(get_db_session),
    generation: GenerationService = Depends(get_generation_service),
):
    goose = await goose_service.get_by_id(db, goose_id)
    return await generation.generate_bio(db, goose)


@router.post(
    "/{goose_id:int}/image",
    response_model=ImageResponse,
    responses={**NOT_FOUND, **UPSTREAM_FAILURE},
    summary="Generate a goose portrait",
)
async def generate_image(
    goose_id: int,
    db: AsyncSession = Depends(get_db_session),
    generation: GenerationService = Depends(get_generation_service),
):
    goose = await goose_service.get_by_id(db, goose_id)
    return await generation.generate_image(goose)


@router.post(
    "/{goose_id:int}/honk",
    response_model=MessageResponse,
    responses=NOT_FOUND,
    summary="Make a goose honk",
)
async def honk(
    goose_id: int,
    db: AsyncSession = Depends(get_db_session),
    generation: GenerationService = Depends(get_generation_service),
):
    goose = await goose_service.get_by_id(db, goose_id)
    return generation.honk(goose)


# ── Malformed ids ─────────────────────────────────────────────────────────
# Must stay below every real route: these patterns match anything.

@router.api_route("/{goose_id}", methods=["GET", "PATCH"], include_in_schema=False)
@router.api_route("/{goose_id}/{action}", methods=["PATCH", "POST"], include_in_schema=False)
async def reject_malformed_goose_id(goose_id: str):
    if goose_id.isdigit():
        # Numeric id with an action no route knows
        raise HTTPException(status_code=404, detail="Not Found")
    raise ValidationError(
        message=f"Goose id '{goose_id}' must be a positive integer",
        field="id",
    )
