"""
Goose Quotes Backend: Goose Service (Data Access)
==================================================

What:  Every query the API runs against the `geese` table.
How:   Stateless methods taking the request's AsyncSession. Each maps 1:1 to
       a route. Missing rows raise NotFoundError; SQLAlchemy failures are
       logged and re-raised as DatabaseError. Writes are flushed, not
       committed: the session dependency commits when the request succeeds.

Query patterns:
    list_or_search       SELECT * FROM geese [WHERE name ILIKE :q ORDER BY name]
    list_flock_leaders   SELECT * FROM geese WHERE is_flock_leader
    list_by_language     SELECT * FROM geese WHERE programming_language ILIKE :q
    get_by_id            SELECT * FROM geese WHERE id = :id
"""

import logging
from contextlib import contextmanager
from typing import Any, Iterator, List, Optional

from sqlalchemy import asc, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from goose_quotes.exceptions import DatabaseError, NotFoundError
from goose_quotes.models.goose import Goose
from goose_quotes.schemas.goose import GooseCreate
from goose_quotes.services.prompts import describe_goose

logger = logging.getLogger(__name__)

# Columns the PATCH/bio paths may write
UPDATABLE_FIELDS = {"name", "motivations", "bio"}

# Upper bound of the SERIAL (int4) primary key
MAX_GOOSE_ID = 2**31 - 1


@contextmanager
def translate_db_errors(action: str, **context: Any) -> Iterator[None]:
    """Re-raises SQLAlchemy errors as DatabaseError with a generic message."""
    try:
        yield
    except SQLAlchemyError as e:
        logger.error("Database error while trying to %s: %s", action, str(e), exc_info=True)
        raise DatabaseError(
            message=f"Could not {action}. Please try again.",
            context={**context, "error_type": type(e).__name__},
        ) from e


class GooseService:
    """Data access for geese."""

    async def list_or_search(self, db: AsyncSession, name: Optional[str] = None) -> List[Goose]:
        """
        All geese, or those whose name contains `name` (case-insensitive).

        Unfiltered results come back in storage order; filtered results are
        ordered by name ascending. No match yields an empty list.
        """
        query = select(Goose)
        if name:
            query = query.where(Goose.name.icontains(name, autoescape=True)).order_by(
                asc(Goose.name)
            )

        with translate_db_errors("list geese", name=name):
            result = await db.execute(query)
            return list(result.scalars().all())

    async def create(self, db: AsyncSession, payload: GooseCreate) -> Goose:
        """Inserts a goose and returns it with its new id and description."""
        goose = Goose(
            name=payload.name,
            description=describe_goose(payload.name),
            is_flock_leader=payload.is_flock_leader,
            programming_language=payload.programming_language,
            motivations=payload.motivations,
            location=payload.location,
        )

        with translate_db_errors("create the goose", name=payload.name):
            db.add(goose)
            await db.flush()

        logger.info("Goose created: id=%s name=%s", goose.id, goose.name)
        return goose

    async def get_by_id(self, db: AsyncSession, goose_id: int) -> Goose:
        """
        Fetch one goose.

        Raises:
            NotFoundError: no goose has this id (→ 404 "Goose not found")
            DatabaseError: the query failed (→ 500)
        """
        if not 1 <= goose_id <= MAX_GOOSE_ID:
            # No row can carry this id; the driver would reject it outright
            raise NotFoundError(resource="Goose", resource_id=goose_id)

        with translate_db_errors("retrieve the goose", goose_id=goose_id):
            result = await db.execute(select(Goose).where(Goose.id == goose_id))
            goose = result.scalar_one_or_none()

        if goose is None:
            raise NotFoundError(resource="Goose", resource_id=goose_id)
        return goose

    async def update_by_id(self, db: AsyncSession, goose_id: int, **fields: Any) -> Goose:
        """
        Partial update of name, motivations and/or bio.

        Last write wins; updated_at is refreshed by the ORM on flush.
        """
        unknown = set(fields) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Fields cannot be updated: {sorted(unknown)}")

        goose = await self.get_by_id(db, goose_id)
        for field, value in fields.items():
            setattr(goose, field, value)

        with translate_db_errors("update the goose", goose_id=goose_id):
            await db.flush()

        logger.info("Goose %s updated: %s", goose_id, ", ".join(sorted(fields)))
        return goose

    async def list_flock_leaders(self, db: AsyncSession) -> List[Goose]:
        with translate_db_errors("list flock leaders"):
            result = await db.execute(select(Goose).where(Goose.is_flock_leader.is_(True)))
            return list(result.scalars().all())

    async def list_by_language(self, db: AsyncSession, fragment: str) -> List[Goose]:
        """Geese whose programming language contains `fragment` (case-insensitive)."""
        query = select(Goose).where(
            Goose.programming_language.icontains(fragment, autoescape=True)
        )
        with translate_db_errors("list geese by language", language=fragment):
            result = await db.execute(query)
            return list(result.scalars().all())


goose_service = GooseService()
