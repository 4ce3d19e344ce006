"""
Application Constants
=====================

Static catalog configuration shared by schemas, services and routes.
The category list is fixed at deploy time; it is not derived from the
categories table.
"""

# Product categories, in display order
PRODUCT_CATEGORIES = (
    "Robes",
    "Hauts",
    "Pantalons",
    "Jupes",
    "Pulls",
    "Manteaux",
    "Combinaisons",
    "T-shirts",
    "Cardigans",
    "Chemisiers",
)

# Interactive documentation (Swagger UI) and the OpenAPI document live under
# this prefix so the authentication gate can exempt them together
DOCS_URL = "/api-docs"
OPENAPI_URL = f"{DOCS_URL}/openapi.json"

# Paths served without credentials (exact matches)
PUBLIC_PATHS = frozenset({"/", "/health"})

# Public ids live in an INTEGER column (32-bit on PostgreSQL); ids outside
# this range cannot exist
MIN_RECORD_ID = -(2 ** 31)
MAX_RECORD_ID = 2 ** 31 - 1
