"""
Fashion Catalog API — Application Package
==========================================

CRUD HTTP API for a fashion e-commerce catalog: products, services and
categories, with catalog statistics and HTTP Basic authentication.

Layers:

    ┌─────────────────────────────────────┐
    │    Middleware (auth, logging, IDs)  │  ← cross-cutting request concerns
    ├─────────────────────────────────────┤
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← id assignment, validation, CRUD
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
