"""
Fashion Catalog API — Service Model
====================================

ORM model for the `services` table: same shape as a product without the
category (alterations, styling sessions, ...).
"""

from typing import List

from sqlalchemy import JSON, CheckConstraint, Float, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from catalog_api.models.base import CatalogRecord


class Service(CatalogRecord):
    __tablename__ = "services"

    images: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    price: Mapped[float] = mapped_column(Float, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)

    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_services_price_non_negative"),
    )
