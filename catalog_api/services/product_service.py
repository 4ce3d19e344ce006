"""
Fashion Catalog API — Product Service
======================================

What:  Product CRUD, the category filter, and sample-data seeding.
Who:   Called by the /api/products route handlers.
"""

import logging
from typing import List, Optional

from pydantic import BaseModel
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.models.product import Product
from catalog_api.schemas.catalog import ProductResponse
from catalog_api.schemas.common import MessageResponse
from catalog_api.services.record_service import ItemService

logger = logging.getLogger(__name__)

# Inserted by POST /api/products/init-data into an empty catalog
SAMPLE_PRODUCTS = (
    {
        "images": [
            "https://m.media-amazon.com/images/I/711jn73Rq3L._AC_SX569_.jpg",
            "https://m.media-amazon.com/images/I/81FBJmpHFyL._AC_SY741_.jpg",
            "https://m.media-amazon.com/images/I/817AEoX9dML._AC_SY741_.jpg",
            "https://m.media-amazon.com/images/I/81D5kR7pYDL._AC_SX569_.jpg",
        ],
        "category": "Robes",
        "title": "Robe",
        "price": 79.99,
        "description": (
            "Discover the floral summer dress, perfect for sunny days. "
            "Comfort and elegance guaranteed in the Robes category."
        ),
    },
)


class ProductService(ItemService):
    model = Product
    response_model = ProductResponse
    resource = "Product"

    async def list_products(
        self,
        db: AsyncSession,
        category: Optional[str] = None,
    ) -> List[BaseModel]:
        """
        List products, newest first.

        `category` is an exact-match filter; an empty value means no filter.
        A category outside the fixed list simply matches nothing.
        """
        filters = {"category": category} if category else None
        return await self.list_records(db, filters)

    async def init_sample_data(self, db: AsyncSession) -> MessageResponse:
        """
        Seed the catalog with SAMPLE_PRODUCTS when it holds no product.

        Idempotent: a non-empty table is left untouched.
        """
        result = await db.execute(select(func.count()).select_from(Product))
        existing = result.scalar() or 0
        if existing > 0:
            logger.info("Sample data skipped: %d products already stored", existing)
            return MessageResponse(message="The database already contains products")

        for data in SAMPLE_PRODUCTS:
            await self.create_record(db, dict(data))

        logger.info("Sample data added: %d products", len(SAMPLE_PRODUCTS))
        return MessageResponse(
            message="Sample data added successfully",
            count=len(SAMPLE_PRODUCTS),
        )


# ── Singleton Instance ────────────────────────────────────────────────────
product_service = ProductService()
