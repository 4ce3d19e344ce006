"""
Fashion Catalog API — Shared Response Schemas
==============================================

Error envelope, statistics, discovery and health payloads.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    """
    Error format for every failed request.

    Example:
        {"error": "Product not found"}
    """
    error: str = Field(description="Human-readable error description")


class MessageResponse(BaseModel):
    message: str
    count: Optional[int] = Field(default=None, description="Number of inserted records")


class StatsResponse(BaseModel):
    """
    Catalog statistics, recomputed on every request.

    averagePrice is rounded to 2 decimals and is 0 for an empty catalog;
    productsByCategory only lists categories holding at least one product.
    """
    model_config = ConfigDict(populate_by_name=True)

    total_products: int = Field(alias="totalProducts")
    average_price: float = Field(alias="averagePrice")
    products_by_category: Dict[str, int] = Field(alias="productsByCategory")


class EndpointInfo(BaseModel):
    path: str
    methods: List[str]


class EndpointListResponse(BaseModel):
    endpoints: List[EndpointInfo]


class RootResponse(BaseModel):
    message: str
    documentation: str
    endpoints: Dict[str, str]


class HealthResponse(BaseModel):
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
