"""
ORM models. Importing this package registers every table on Base.metadata.
"""

from catalog_api.models.category import Category
from catalog_api.models.product import Product
from catalog_api.models.service import Service

__all__ = ["Category", "Product", "Service"]
