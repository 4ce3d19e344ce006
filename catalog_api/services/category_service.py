"""
Fashion Catalog API — Category Service
=======================================

What:  CRUD for user-managed categories.
How:   Create stores the schema fields given (only `title` today) under the
       next public id. Update is a merge: fields absent from the request keep
       their stored value.

Title uniqueness is checked before writing so the client gets a specific
message; the UNIQUE constraint on `title` still backs the check up.
"""

from typing import Optional

from pydantic import BaseModel
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.exceptions import ValidationError
from catalog_api.models.category import Category
from catalog_api.schemas.catalog import CategoryCreate, CategoryResponse, CategoryUpdate
from catalog_api.services.record_service import RecordService


class CategoryService(RecordService):
    model = Category
    response_model = CategoryResponse
    resource = "Category"
    update_conflict_message = "A category with this title already exists"

    async def ensure_title_available(
        self,
        db: AsyncSession,
        title: str,
        exclude_id: Optional[int] = None,
    ) -> None:
        query = select(Category.id).where(Category.title == title)
        if exclude_id is not None:
            query = query.where(Category.id != exclude_id)
        result = await db.execute(query)
        if result.first() is not None:
            raise ValidationError(
                message="A category with this title already exists",
                field="title",
            )

    async def create_category(self, db: AsyncSession, payload: CategoryCreate) -> BaseModel:
        await self.ensure_title_available(db, payload.title)
        return await self.create_record(db, payload.model_dump())

    async def update_category(
        self,
        db: AsyncSession,
        category_id: int,
        payload: CategoryUpdate,
    ) -> BaseModel:
        # title is NOT NULL, so an explicit null is treated like an absent field
        changes = {
            field: value
            for field, value in payload.model_dump(exclude_unset=True).items()
            if value is not None
        }
        record = await self.find(db, category_id)
        if "title" in changes:
            await self.ensure_title_available(db, changes["title"], exclude_id=record.id)
        return await self.apply_changes(db, record, changes)


category_service = CategoryService()
