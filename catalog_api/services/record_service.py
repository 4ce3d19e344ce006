"""
Fashion Catalog API — Record Service (shared CRUD logic)
=========================================================

What:  Generic create / read / update / delete over one catalog table,
       addressed by the public numeric `id`.
How:   Subclasses bind a model, a response schema and a resource name;
       ProductService, OfferingService and CategoryService add their own
       payload handling on top.
Who:   Called by route handlers with a request-scoped AsyncSession.

Identifier assignment:
    New records get max(id) + 1 (1 for an empty table). This is a
    read-then-write sequence without locking: two concurrent creations can
    compute the same id, in which case the UNIQUE constraint rejects the
    second insert and the request fails with a ValidationError (400). The
    race is accepted; there is no retry.

Error Handling Strategy:
    - Missing record           → NotFoundError (404), also for ids outside
                                 the INTEGER column range
    - UNIQUE/CHECK violation   → ValidationError (400)
    - Any other driver error   → DatabaseError (500, details logged only)
"""

import logging
from typing import Any, ClassVar, Dict, List, Optional, Type

from pydantic import BaseModel
from sqlalchemy import desc, func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.constants import MAX_RECORD_ID, MIN_RECORD_ID
from catalog_api.exceptions import DatabaseError, NotFoundError, ValidationError
from catalog_api.models.base import CatalogRecord, utcnow

logger = logging.getLogger(__name__)


class RecordService:
    """
    Base class for the per-resource services.

    Class attributes:
        model:           ORM model of the table
        response_model:  Pydantic schema records are serialized with
        resource:        Human name used in messages ("Product")
    """

    model: ClassVar[Type[CatalogRecord]]
    response_model: ClassVar[Type[BaseModel]]
    resource: ClassVar[str] = "Record"

    # Reported when the insert loses the id-assignment race
    conflict_message: ClassVar[str] = "Could not assign a unique id, please retry the request"
    # Reported when an update or delete violates a constraint
    update_conflict_message: ClassVar[str] = "The change conflicts with an existing record"

    # ── Helpers ───────────────────────────────────────────────────────────

    def to_response(self, record: CatalogRecord) -> BaseModel:
        return self.response_model.model_validate(record)

    async def next_id(self, db: AsyncSession) -> int:
        """Current maximum public id plus one, or 1 for an empty table."""
        result = await db.execute(select(func.max(self.model.id)))
        current = result.scalar()
        return (current or 0) + 1

    async def find(self, db: AsyncSession, record_id: int) -> CatalogRecord:
        """Load a record by public id or raise NotFoundError."""
        if not MIN_RECORD_ID <= record_id <= MAX_RECORD_ID:
            raise NotFoundError(resource=self.resource, resource_id=record_id)

        try:
            result = await db.execute(select(self.model).where(self.model.id == record_id))
            record = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error("Database error fetching %s %s: %s", self.resource, record_id, str(e))
            raise DatabaseError(
                message=f"Could not retrieve the {self.resource.lower()}. Please try again.",
                context={"resource_id": record_id},
            )

        if record is None:
            raise NotFoundError(resource=self.resource, resource_id=record_id)
        return record

    async def flush(self, db: AsyncSession, action: str) -> None:
        """Flush pending changes, translating constraint failures."""
        try:
            await db.flush()
        except IntegrityError as e:
            logger.warning("%s %s rejected by a constraint: %s", self.resource, action, str(e.orig))
            raise ValidationError(
                message=self.conflict_message if action == "create" else self.update_conflict_message,
                context={"resource": self.resource, "action": action},
            )
        except SQLAlchemyError as e:
            logger.error("Database error during %s %s: %s", self.resource, action, str(e), exc_info=True)
            raise DatabaseError(
                message=f"Could not {action} the {self.resource.lower()}. Please try again.",
                context={"error_type": type(e).__name__},
            )

    # ── Operations ────────────────────────────────────────────────────────

    async def list_records(
        self,
        db: AsyncSession,
        filters: Optional[Dict[str, Any]] = None,
    ) -> List[BaseModel]:
        """All matching records, most recently created first. No pagination."""
        query = select(self.model)
        if filters:
            query = query.filter_by(**filters)
        # pk breaks ties between records created within the same clock tick
        query = query.order_by(desc(self.model.created_at), desc(self.model.pk))

        try:
            result = await db.execute(query)
            records = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error("Database error listing %s records: %s", self.resource, str(e), exc_info=True)
            raise DatabaseError(
                message=f"Could not retrieve {self.resource.lower()}s. Please try again.",
                context={"error_type": type(e).__name__},
            )
        return [self.to_response(record) for record in records]

    async def get_record(self, db: AsyncSession, record_id: int) -> BaseModel:
        return self.to_response(await self.find(db, record_id))

    async def create_record(self, db: AsyncSession, data: Dict[str, Any]) -> BaseModel:
        """Assign the next public id, insert, and return the stored record."""
        try:
            record_id = await self.next_id(db)
        except SQLAlchemyError as e:
            logger.error("Database error computing next %s id: %s", self.resource, str(e))
            raise DatabaseError(context={"error_type": type(e).__name__})

        record = self.model(id=record_id, **data)
        db.add(record)
        await self.flush(db, "create")

        logger.info("%s %d created", self.resource, record.id)
        return self.to_response(record)

    async def update_record(
        self,
        db: AsyncSession,
        record_id: int,
        changes: Dict[str, Any],
    ) -> BaseModel:
        """Apply `changes` to the record and bump its updated_at timestamp."""
        return await self.apply_changes(db, await self.find(db, record_id), changes)

    async def apply_changes(
        self,
        db: AsyncSession,
        record: CatalogRecord,
        changes: Dict[str, Any],
    ) -> BaseModel:
        for field, value in changes.items():
            setattr(record, field, value)
        record.updated_at = utcnow()
        await self.flush(db, "update")

        logger.info("%s %d updated (%s)", self.resource, record.id, ", ".join(sorted(changes)) or "no fields")
        return self.to_response(record)

    async def delete_record(self, db: AsyncSession, record_id: int) -> BaseModel:
        """Remove the record permanently and return its last state."""
        record = await self.find(db, record_id)
        snapshot = self.to_response(record)
        await db.delete(record)
        await self.flush(db, "delete")

        logger.info("%s %d deleted", self.resource, record_id)
        return snapshot


class ItemService(RecordService):
    """
    Shared payload handling for priced items (products and services).

    Create stores every validated field. Update replaces every field except
    `images`, which is only replaced when a non-empty list is supplied.
    """

    async def create_item(self, db: AsyncSession, payload: BaseModel) -> BaseModel:
        return await self.create_record(db, payload.model_dump())

    async def update_item(self, db: AsyncSession, item_id: int, payload: BaseModel) -> BaseModel:
        changes = payload.model_dump(exclude={"images"})
        images = getattr(payload, "images", None)
        if images:
            changes["images"] = list(images)
        return await self.update_record(db, item_id, changes)
