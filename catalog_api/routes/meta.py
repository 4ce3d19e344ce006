"""
Fashion Catalog API — Discovery Routes
=======================================

What:  GET / (welcome payload, public) and GET /api/endpoints (route table).
How:   The route table is an immutable registry of (path, methods, handler)
       entries built once by the application factory after every router is
       mounted, and stored on app.state. The endpoint handler only applies
       describe_endpoints() to it; nothing inspects the router per request.
"""

from dataclasses import dataclass
from typing import Callable, Iterable, List, Tuple

from fastapi import APIRouter, Request
from fastapi.routing import APIRoute

from catalog_api.constants import DOCS_URL
from catalog_api.schemas.common import EndpointInfo, EndpointListResponse, RootResponse

router = APIRouter(tags=["Discovery"])


@dataclass(frozen=True)
class Endpoint:
    path: str
    methods: Tuple[str, ...]
    handler: Callable


EndpointRegistry = Tuple[Endpoint, ...]


def build_endpoint_registry(routes: Iterable[object]) -> EndpointRegistry:
    """
    Snapshot the documented API routes.

    Documentation routes (include_in_schema=False) are left out.
    """
    return tuple(
        Endpoint(path=route.path, methods=tuple(sorted(route.methods)), handler=route.endpoint)
        for route in routes
        if isinstance(route, APIRoute) and route.include_in_schema
    )


def describe_endpoints(registry: EndpointRegistry) -> List[EndpointInfo]:
    return [EndpointInfo(path=entry.path, methods=list(entry.methods)) for entry in registry]


@router.get("/", response_model=RootResponse, summary="Welcome payload")
async def root(request: Request) -> RootResponse:
    base_url = str(request.base_url).rstrip("/")
    return RootResponse(
        message="API Fashion Dashboard",
        documentation=f"{base_url}{DOCS_URL}",
        endpoints={
            "products": "/api/products",
            "categories": "/api/categories",
            "services": "/api/services",
            "stats": "/api/stats",
            "all": "/api/endpoints",
        },
    )


@router.get(
    "/api/endpoints",
    response_model=EndpointListResponse,
    summary="Every registered path and its HTTP methods",
)
async def list_endpoints(request: Request) -> EndpointListResponse:
    registry: EndpointRegistry = request.app.state.endpoint_registry
    return EndpointListResponse(endpoints=describe_endpoints(registry))
