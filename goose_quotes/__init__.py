"""
Goose Quotes Backend: Application Package
==========================================

What: CRUD API over the `geese` table plus LLM-backed generation endpoints.
Who:  Imported by uvicorn (`goose_quotes.main:app`), pytest, and the
      `goose-quotes` console script.

Architecture Note:
    The backend is layered the same way top to bottom:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │   Services (Data access, Generation)│  ← Queries, prompts, LLM calls
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    Routes translate HTTP to service calls; services raise the exceptions in
    `goose_quotes.exceptions`, which the handlers in `main.py` map to status
    codes.
"""

__version__ = "1.0.0"
