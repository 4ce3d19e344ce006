"""
Fashion Catalog API — Shared Record Columns
============================================

What:  Abstract base for the three catalog tables.
How:   Every catalog record carries two keys:

       - `pk`: the storage-internal primary key, assigned by the database
         and never exposed through the API
       - `id`: the public numeric identifier, assigned by the service layer
         as max(id) + 1 and protected by a UNIQUE constraint

       plus `created_at` / `updated_at` timestamps maintained on insert and
       update (serialized as createdAt / updatedAt).
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Integer
from sqlalchemy.orm import Mapped, mapped_column

from catalog_api.database import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CatalogRecord(Base):
    """Abstract base: no table is created for this class itself."""

    __abstract__ = True

    pk: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    # Public identifier; a lost id-assignment race surfaces as a UNIQUE violation
    id: Mapped[int] = mapped_column(
        Integer,
        unique=True,
        nullable=False,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        index=True,
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        onupdate=utcnow,
    )

    def __repr__(self) -> str:
        return f"<{type(self).__name__}(id={self.id}, created_at='{self.created_at}')>"
