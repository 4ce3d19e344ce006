"""
Fashion Catalog API — Category Model
=====================================

ORM model for the `categories` table. Titles are unique; a duplicate insert
or rename fails on the UNIQUE constraint and is reported as a 400.

This table is user-managed and independent from the fixed
PRODUCT_CATEGORIES list that products are validated against.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from catalog_api.models.base import CatalogRecord


class Category(CatalogRecord):
    __tablename__ = "categories"

    title: Mapped[str] = mapped_column(String(120), unique=True, nullable=False)
