"""
Fashion Catalog API — FastAPI Application Factory
==================================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn (uvicorn catalog_api.main:app, or python -m catalog_api).
When:  Once at server startup; the returned app handles all subsequent requests.

Application Architecture:
    ┌───────────────────────────────────────────────────────────┐
    │                       FastAPI App                         │
    │                                                           │
    │  Middleware Chain:                                        │
    │  ┌──────┐ ┌────────┐ ┌─────────┐ ┌──────┐ ┌────────────┐  │
    │  │ CORS │→│ Req ID │→│ Logging │→│ GZip │→│ Basic Auth │  │
    │  └──────┘ └────────┘ └─────────┘ └──────┘ └────────────┘  │
    │                                                           │
    │  Routes:                                                  │
    │  /api/products  /api/services  /api/categories            │
    │  /api/stats  /api/categories-list  /api/endpoints  /      │
    │  /health  /api-docs (Swagger UI)                          │
    │                                                           │
    │  Exception Handlers:                                      │
    │  Validation→400 │ Auth→401 │ NotFound→404 │ DB/other→500  │
    └───────────────────────────────────────────────────────────┘

Every error response body is {"error": "<message>"}.
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Dict, Sequence

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from catalog_api import __version__
from catalog_api.config import settings
from catalog_api.constants import DOCS_URL, OPENAPI_URL, PRODUCT_CATEGORIES
from catalog_api.database import dispose_engine
from catalog_api.exceptions import (
    AuthenticationError,
    CatalogError,
    DatabaseError,
    NotFoundError,
    ValidationError,
)
from catalog_api.middleware.auth import BasicAuthMiddleware, challenge_response
from catalog_api.middleware.logging import RequestLoggingMiddleware
from catalog_api.middleware.request_id import RequestIDMiddleware, request_id_var
from catalog_api.routes import categories, health, meta, products, services, stats

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Called once during app startup, before any other initialization.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
        force=True,
    )

    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup:
        1. Setup logging
        2. Validate configuration (empty credentials abort startup)
        3. Log readiness
    Shutdown:
        1. Dispose database engine (close all pooled connections)
    """
    setup_logging()
    logger.info("=" * 60)
    logger.info("Fashion Catalog API %s starting up...", __version__)

    try:
        settings.validate_required_for_production()
    except ValueError as e:
        logger.error("Configuration error: %s", str(e))
        raise

    if settings.uses_default_credentials():
        logger.warning("Using the default API credentials; set AUTH_USERNAME and AUTH_PASSWORD")

    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)
    logger.info("API docs: http://%s:%d%s", settings.backend_host, settings.backend_port, DOCS_URL)
    logger.info("=" * 60)

    yield

    logger.info("Fashion Catalog API shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Request Validation Messages
# ══════════════════════════════════════════════════════════════════════════

def describe_request_errors(errors: Sequence[Dict[str, Any]]) -> str:
    """
    Turn FastAPI/Pydantic validation errors into one client message.

    Precedence:
        1. Non-integer path id
        2. Body missing or not a JSON object
        3. Missing or invalid fields (listed by name)
        4. Category outside PRODUCT_CATEGORIES
        5. Non-string entries in `images`
    """
    fields = []
    bad_category = False
    bad_image = False

    for err in errors:
        loc = tuple(err.get("loc", ()))
        if not loc:
            continue
        if loc[0] == "path":
            return "Invalid id parameter: expected an integer"
        if loc[0] == "body" and (len(loc) == 1 or err.get("type") == "json_invalid"):
            return "A JSON object body is required"
        if loc[0] == "body" and len(loc) > 2 and loc[1] == "images":
            bad_image = True
        elif loc[0] == "body" and loc[1] == "category" and err.get("type") == "enum":
            bad_category = True
        else:
            fields.append(str(loc[1] if loc[0] == "body" else loc[-1]))

    if fields:
        return "Missing or invalid required fields: " + ", ".join(dict.fromkeys(fields))
    if bad_category:
        return "Invalid category. Must be one of: " + ", ".join(PRODUCT_CATEGORIES)
    if bad_image:
        return "Each image must be a string (URL)"
    return "Invalid request"


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to status codes and the {"error": ...} body.

    Handler hierarchy:
        ValidationError / RequestValidationError → 400
        AuthenticationError                      → 401 (+ WWW-Authenticate)
        NotFoundError                            → 404
        HTTPException (unknown route, 405, ...)  → its own status
        DatabaseError / CatalogError             → 500
        Exception (fallback)                     → 500

    Internal details (driver errors, stack traces) are logged, never returned.
    """

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        message = describe_request_errors(exc.errors())
        logger.warning("[%s] Request validation failed: %s", request_id_var.get(""), message)
        return JSONResponse(status_code=400, content={"error": message})

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        logger.warning("[%s] Validation error: %s", request_id_var.get(""), exc.message)
        return JSONResponse(status_code=400, content={"error": exc.message})

    @app.exception_handler(AuthenticationError)
    async def handle_authentication_error(request: Request, exc: AuthenticationError):
        return challenge_response(exc, settings.auth_realm)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return JSONResponse(status_code=404, content={"error": exc.message})

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        logger.error("[%s] Database error: %s | Context: %s", request_id_var.get(""), exc.message, exc.context)
        return JSONResponse(status_code=500, content={"error": exc.message})

    @app.exception_handler(CatalogError)
    async def handle_catalog_error(request: Request, exc: CatalogError):
        logger.error("[%s] Application error: %s | Context: %s", request_id_var.get(""), exc.message, exc.context)
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error(
            "[%s] Unexpected error: %s",
            request_id_var.get(""),
            str(exc),
            exc_info=True,
        )
        return JSONResponse(
            status_code=500,
            content={"error": "An unexpected error occurred. Please try again later."},
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns a fully configured instance whose endpoint registry
    (app.state.endpoint_registry) is already built.
    """
    app = FastAPI(
        title="Fashion Catalog API",
        description=(
            "Products, services and categories of a fashion e-commerce catalog, "
            "with catalog statistics. All /api routes require HTTP Basic authentication."
        ),
        version=__version__,
        docs_url=DOCS_URL,
        redoc_url=None,
        openapi_url=OPENAPI_URL,
        lifespan=lifespan,
    )

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added runs first: CORS → RequestID → Logging → GZip → BasicAuth
    app.add_middleware(BasicAuthMiddleware, config=settings)
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    origins = settings.cors_origins_list
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        # Credentialed CORS cannot be combined with the "*" wildcard
        allow_credentials="*" not in origins,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID", "WWW-Authenticate"],
    )

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(products.router)
    app.include_router(services.router)
    app.include_router(categories.router)
    app.include_router(stats.router)
    app.include_router(meta.router)
    app.include_router(health.router)

    # Built once, after every router is mounted
    app.state.endpoint_registry = meta.build_endpoint_registry(app.routes)

    return app


# ── Application Instance ─────────────────────────────────────────────────
app = create_app()
