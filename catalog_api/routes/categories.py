"""
Fashion Catalog API — Category Route Handlers
==============================================

/api/categories CRUD over the user-managed categories table, and
GET /api/categories-list for the fixed product category names.
"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.constants import PRODUCT_CATEGORIES
from catalog_api.database import get_db_session
from catalog_api.schemas.catalog import (
    CategoryCreate,
    CategoryDeleteResponse,
    CategoryListResponse,
    CategoryResponse,
    CategoryUpdate,
)
from catalog_api.schemas.common import ErrorResponse
from catalog_api.services.category_service import category_service

router = APIRouter(tags=["Categories"])

NOT_FOUND = {404: {"description": "Category not found", "model": ErrorResponse}}
INVALID = {400: {"description": "Invalid fields or duplicate title", "model": ErrorResponse}}


@router.get(
    "/api/categories-list",
    response_model=List[str],
    summary="Allowed product categories",
    description="The fixed list a product's `category` must belong to.",
)
async def list_allowed_categories() -> List[str]:
    return list(PRODUCT_CATEGORIES)


@router.get("/api/categories", response_model=CategoryListResponse, summary="List categories, newest first")
async def list_categories(db: AsyncSession = Depends(get_db_session)) -> CategoryListResponse:
    return CategoryListResponse(categories=await category_service.list_records(db))


@router.get(
    "/api/categories/{category_id}",
    response_model=CategoryResponse,
    responses={**NOT_FOUND, **INVALID},
    summary="Get a category by id",
)
async def get_category(
    category_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> CategoryResponse:
    return await category_service.get_record(db, category_id)


@router.post(
    "/api/categories",
    response_model=CategoryResponse,
    status_code=201,
    responses=INVALID,
    summary="Create a category",
)
async def create_category(
    payload: CategoryCreate,
    db: AsyncSession = Depends(get_db_session),
) -> CategoryResponse:
    return await category_service.create_category(db, payload)


@router.put(
    "/api/categories/{category_id}",
    response_model=CategoryResponse,
    responses={**NOT_FOUND, **INVALID},
    summary="Update a category",
    description="Merge update: only the fields present in the body change.",
)
async def update_category(
    category_id: int,
    payload: CategoryUpdate,
    db: AsyncSession = Depends(get_db_session),
) -> CategoryResponse:
    return await category_service.update_category(db, category_id, payload)


@router.delete(
    "/api/categories/{category_id}",
    response_model=CategoryDeleteResponse,
    responses={**NOT_FOUND, **INVALID},
    summary="Delete a category",
)
async def delete_category(
    category_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> CategoryDeleteResponse:
    category = await category_service.delete_record(db, category_id)
    return CategoryDeleteResponse(message="Category deleted successfully", category=category)
