"""
Fashion Catalog API — Stats Service
====================================

What:  Catalog statistics computed from the products table on every call.
How:   Two aggregation queries:

           SELECT COUNT(*), AVG(price) FROM products
           SELECT category, COUNT(*) FROM products GROUP BY category

       No caching; the numbers always reflect the current table.
"""

import logging
import math
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.exceptions import DatabaseError
from catalog_api.models.product import Product
from catalog_api.schemas.common import StatsResponse

logger = logging.getLogger(__name__)


def round_price(value: Optional[float]) -> float:
    """Round half up to 2 decimals; None (empty table) becomes 0."""
    if not value:
        return 0
    return math.floor(value * 100 + 0.5) / 100


class StatsService:
    async def compute(self, db: AsyncSession) -> StatsResponse:
        try:
            totals = await db.execute(select(func.count(), func.avg(Product.price)).select_from(Product))
            total_products, average_price = totals.one()

            grouped = await db.execute(
                select(Product.category, func.count()).group_by(Product.category)
            )
            by_category = {category: count for category, count in grouped.all()}
        except SQLAlchemyError as e:
            logger.error("Database error computing stats: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not compute catalog statistics. Please try again.",
                context={"error_type": type(e).__name__},
            )

        return StatsResponse(
            total_products=total_products or 0,
            average_price=round_price(average_price),
            products_by_category=by_category,
        )


stats_service = StatsService()
