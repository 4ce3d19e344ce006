"""
Fashion Catalog API — Service Route Handlers
=============================================

/api/services CRUD. Same contract as products, without a category.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.database import get_db_session
from catalog_api.schemas.catalog import (
    ServiceCreate,
    ServiceDeleteResponse,
    ServiceListResponse,
    ServiceResponse,
    ServiceUpdate,
)
from catalog_api.schemas.common import ErrorResponse
from catalog_api.services.offering_service import offering_service

router = APIRouter(prefix="/api/services", tags=["Services"])

NOT_FOUND = {404: {"description": "Service not found", "model": ErrorResponse}}
INVALID = {400: {"description": "Missing or invalid fields", "model": ErrorResponse}}


@router.get("", response_model=ServiceListResponse, summary="List services, newest first")
async def list_services(db: AsyncSession = Depends(get_db_session)) -> ServiceListResponse:
    return ServiceListResponse(services=await offering_service.list_records(db))


@router.get(
    "/{service_id}",
    response_model=ServiceResponse,
    responses={**NOT_FOUND, **INVALID},
    summary="Get a service by id",
)
async def get_service(
    service_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> ServiceResponse:
    return await offering_service.get_record(db, service_id)


@router.post(
    "",
    response_model=ServiceResponse,
    status_code=201,
    responses=INVALID,
    summary="Create a service",
)
async def create_service(
    payload: ServiceCreate,
    db: AsyncSession = Depends(get_db_session),
) -> ServiceResponse:
    return await offering_service.create_item(db, payload)


@router.put(
    "/{service_id}",
    response_model=ServiceResponse,
    responses={**NOT_FOUND, **INVALID},
    summary="Replace a service",
    description="All fields are replaced; omit `images` (or send []) to keep the stored images.",
)
async def update_service(
    service_id: int,
    payload: ServiceUpdate,
    db: AsyncSession = Depends(get_db_session),
) -> ServiceResponse:
    return await offering_service.update_item(db, service_id, payload)


@router.delete(
    "/{service_id}",
    response_model=ServiceDeleteResponse,
    responses={**NOT_FOUND, **INVALID},
    summary="Delete a service",
)
async def delete_service(
    service_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> ServiceDeleteResponse:
    service = await offering_service.delete_record(db, service_id)
    return ServiceDeleteResponse(message="Service deleted successfully", service=service)
