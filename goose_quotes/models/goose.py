"""
Goose Quotes Backend: Goose SQLAlchemy Model
=============================================

What:  ORM model for the `geese` table, the only persisted entity.
Who:   Used by GooseService for every query and by `init_models()` to create
       the table.

Table Design:
    - Integer autoincrement primary key (SERIAL on PostgreSQL)
    - name: required; every other descriptive column is optional text
    - description: derived from name when the row is created
    - bio: written only by the bio generation endpoint
    - created_at / updated_at: timezone-aware UTC; updated_at is refreshed
      by the ORM on every UPDATE
"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import Boolean, DateTime, Integer, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from goose_quotes.database import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Goose(Base):
    """
    A goose, with the attributes the generation prompts draw on.

    Lifecycle:
        1. Created by POST /api/geese (id assigned, description synthesized)
        2. Mutated by PATCH name / PATCH motivations / POST bio, each
           independent and last-write-wins
        3. Never deleted
    """

    __tablename__ = "geese"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(Text, nullable=False)

    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    is_flock_leader: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        server_default=text("false"),
    )

    programming_language: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    motivations: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    location: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    bio: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        onupdate=utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
    )

    def __repr__(self) -> str:
        return f"<Goose(id={self.id}, name='{self.name}')>"
