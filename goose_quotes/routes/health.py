"""
Goose Quotes Backend: Health Check Route
=========================================

What:  GET /health for load balancers and container health checks.
How:   Runs SELECT 1 against the database and asks the configured LLM
       provider for a lightweight status call.

Status levels:
    - healthy:   database and LLM provider reachable
    - degraded:  database reachable, LLM provider not (CRUD still works)
    - unhealthy: database unreachable
"""

import logging
import time

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from goose_quotes import __version__
from goose_quotes.database import engine
from goose_quotes.schemas.goose import HealthResponse
from goose_quotes.services.llm_base import LLMService
from goose_quotes.services.providers import get_llm_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get("/health", response_model=HealthResponse, summary="Service health check")
async def health_check(llm: LLMService = Depends(get_llm_service)) -> HealthResponse:
    db_status = "connected"
    llm_status = "available"
    overall = "healthy"

    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except (SQLAlchemyError, OSError) as e:
        db_status = "disconnected"
        overall = "unhealthy"
        logger.warning("Health check: database unreachable: %s", str(e))

    if not await llm.health_check():
        llm_status = "unavailable"
        if overall == "healthy":
            overall = "degraded"

    return HealthResponse(
        status=overall,
        version=__version__,
        database=db_status,
        llm=llm_status,
        llm_provider=llm.provider_name,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
