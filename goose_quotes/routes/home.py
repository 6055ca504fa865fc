"""
Goose Quotes Backend: Home and Diagnostic Routes
=================================================

What:  GET / greeting and GET /api/goose-headers header echo. Neither
       touches the database or the LLM provider.
"""

from typing import Optional

from fastapi import APIRouter, Header, Query
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["Home"])


@router.get("/", response_class=PlainTextResponse, summary="Greeting")
async def home(
    should_honk: Optional[str] = Query(
        default=None,
        alias="shouldHonk",
        description="Present (with any value, even empty) to append a honk",
    ),
) -> str:
    honk = "Honk honk!" if should_honk is not None else ""
    return f"Hello Goose Quotes! {honk}".strip()


@router.get(
    "/api/goose-headers",
    response_class=PlainTextResponse,
    summary="Echo the x-goose-id request header",
)
async def goose_headers(x_goose_id: Optional[str] = Header(default=None)) -> str:
    return x_goose_id or ""
