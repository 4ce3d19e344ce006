"""
Fashion Catalog API — Catalog Request/Response Schemas
=======================================================

What:  Pydantic models defining the API contract for products, services and
       categories.
How:   FastAPI validates request bodies against the *Create / *Update models
       (failures become 400 responses, see main.py) and serializes responses
       through the *Response models.

Serialized entities use camelCase timestamp keys (createdAt / updatedAt);
the storage-internal primary key is never part of a response.
Unknown request fields are ignored.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from catalog_api.constants import PRODUCT_CATEGORIES

# Member names are derived from the category titles ("T-shirts" → T_SHIRTS);
# values are the titles themselves
ProductCategory = Enum(
    "ProductCategory",
    {name.upper().replace("-", "_"): name for name in PRODUCT_CATEGORIES},
    type=str,
)


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class ItemFields(BaseModel):
    """Fields shared by products and services, required on create and update."""

    model_config = ConfigDict(use_enum_values=True)

    title: str = Field(min_length=1, description="Display title")
    price: float = Field(ge=0, allow_inf_nan=False, description="Unit price, zero or more, finite")
    description: str = Field(min_length=1, description="Long description")


class ServiceCreate(ItemFields):
    images: List[str] = Field(min_length=1, description="Image URLs, at least one")


class ServiceUpdate(ItemFields):
    """Full replace, except `images`: omitted, null or empty keeps the stored list."""

    images: Optional[List[str]] = Field(
        default=None,
        description="Replacement image URLs; omit to keep the current images",
    )


class ProductCreate(ServiceCreate):
    category: ProductCategory = Field(description="One of the fixed catalog categories")


class ProductUpdate(ServiceUpdate):
    category: ProductCategory = Field(description="One of the fixed catalog categories")


class CategoryCreate(BaseModel):
    title: str = Field(min_length=1, description="Unique category title")


class CategoryUpdate(BaseModel):
    """Merge update: only supplied fields change."""

    title: Optional[str] = Field(default=None, min_length=1)


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class RecordResponse(BaseModel):
    """Fields every stored record exposes."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")

    @field_validator("created_at", "updated_at")
    @classmethod
    def assume_utc(cls, v: datetime) -> datetime:
        """SQLite hands timestamps back without tzinfo; they are stored in UTC."""
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v


class ServiceResponse(RecordResponse):
    images: List[str]
    title: str
    price: float
    description: str


class ProductResponse(RecordResponse):
    images: List[str]
    category: str
    title: str
    price: float
    description: str


class CategoryResponse(RecordResponse):
    title: str


class ProductListResponse(BaseModel):
    products: List[ProductResponse]


class ServiceListResponse(BaseModel):
    services: List[ServiceResponse]


class CategoryListResponse(BaseModel):
    categories: List[CategoryResponse]


class ProductDeleteResponse(BaseModel):
    message: str
    product: ProductResponse


class ServiceDeleteResponse(BaseModel):
    message: str
    service: ServiceResponse


class CategoryDeleteResponse(BaseModel):
    message: str
    category: CategoryResponse
