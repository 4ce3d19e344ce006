"""
Fashion Catalog API — Product Route Handlers
=============================================

What:  /api/products CRUD plus POST /api/products/init-data.
How:   Thin handlers: FastAPI validates path/body, ProductService does the
       work, response models shape the JSON.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.database import get_db_session
from catalog_api.schemas.catalog import (
    ProductCreate,
    ProductDeleteResponse,
    ProductListResponse,
    ProductResponse,
    ProductUpdate,
)
from catalog_api.schemas.common import ErrorResponse, MessageResponse
from catalog_api.services.product_service import product_service

router = APIRouter(prefix="/api/products", tags=["Products"])

NOT_FOUND = {404: {"description": "Product not found", "model": ErrorResponse}}
INVALID = {400: {"description": "Missing or invalid fields", "model": ErrorResponse}}


@router.get(
    "",
    response_model=ProductListResponse,
    summary="List products, newest first",
)
async def list_products(
    category: Optional[str] = Query(
        default=None,
        description="Only return products of this category (exact match)",
    ),
    db: AsyncSession = Depends(get_db_session),
) -> ProductListResponse:
    products = await product_service.list_products(db, category=category)
    return ProductListResponse(products=products)


@router.post(
    "/init-data",
    response_model=MessageResponse,
    response_model_exclude_none=True,
    summary="Seed the catalog with a sample product",
    description="Inserts the sample product only when no product exists; otherwise does nothing.",
)
async def init_data(db: AsyncSession = Depends(get_db_session)) -> MessageResponse:
    return await product_service.init_sample_data(db)


@router.get(
    "/{product_id}",
    response_model=ProductResponse,
    responses={**NOT_FOUND, **INVALID},
    summary="Get a product by id",
)
async def get_product(
    product_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> ProductResponse:
    return await product_service.get_record(db, product_id)


@router.post(
    "",
    response_model=ProductResponse,
    status_code=201,
    responses=INVALID,
    summary="Create a product",
    description="The server assigns `id` as the current highest id plus one.",
)
async def create_product(
    payload: ProductCreate,
    db: AsyncSession = Depends(get_db_session),
) -> ProductResponse:
    return await product_service.create_item(db, payload)


@router.put(
    "/{product_id}",
    response_model=ProductResponse,
    responses={**NOT_FOUND, **INVALID},
    summary="Replace a product",
    description="All fields are replaced; omit `images` (or send []) to keep the stored images.",
)
async def update_product(
    product_id: int,
    payload: ProductUpdate,
    db: AsyncSession = Depends(get_db_session),
) -> ProductResponse:
    return await product_service.update_item(db, product_id, payload)


@router.delete(
    "/{product_id}",
    response_model=ProductDeleteResponse,
    responses={**NOT_FOUND, **INVALID},
    summary="Delete a product",
)
async def delete_product(
    product_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> ProductDeleteResponse:
    product = await product_service.delete_record(db, product_id)
    return ProductDeleteResponse(message="Product deleted successfully", product=product)
