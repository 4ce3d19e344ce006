"""
Fashion Catalog API — Product Model
====================================

What:  ORM model for the `products` table.
Who:   Used by ProductService for CRUD, by StatsService for aggregation,
       and by Alembic for schema management.

Query patterns:
    - List recent products:  ORDER BY created_at DESC  (ix_products_created_at)
    - Filter by category:    WHERE category = :name     (ix_products_category)
    - Stats:                 COUNT / AVG(price) / GROUP BY category
"""

from typing import List

from sqlalchemy import JSON, CheckConstraint, Float, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from catalog_api.models.base import CatalogRecord


class Product(CatalogRecord):
    """A catalog article; `category` is one of PRODUCT_CATEGORIES."""

    __tablename__ = "products"

    # Ordered list of image URLs, stored as a JSON array
    images: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)

    category: Mapped[str] = mapped_column(String(50), nullable=False, index=True)

    title: Mapped[str] = mapped_column(String(255), nullable=False)

    price: Mapped[float] = mapped_column(Float, nullable=False)

    description: Mapped[str] = mapped_column(Text, nullable=False)

    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_products_price_non_negative"),
    )
