"""
Fashion Catalog API — Offering Service
=======================================

CRUD for the `services` table (alterations, styling sessions, ...). Named
"offering" in code to keep it apart from the service layer itself.
"""

from catalog_api.models.service import Service
from catalog_api.schemas.catalog import ServiceResponse
from catalog_api.services.record_service import ItemService


class OfferingService(ItemService):
    model = Service
    response_model = ServiceResponse
    resource = "Service"


offering_service = OfferingService()
