"""
Fashion Catalog API — Test Configuration (conftest.py)
=======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── mock_db_session: Mock database session (no real DB needed)
    ├── db_engine:       SQLite database in tmp_path with every table created
    ├── client:          HTTPX AsyncClient bound to a fresh app using db_engine
    ├── auth_headers:    Valid Basic credentials
    └── product_payload / service_payload: valid request bodies
"""

import base64
import os
import tempfile
from unittest.mock import AsyncMock, MagicMock

# ══════════════════════════════════════════════════════════════════════════
# Environment Setup
# ══════════════════════════════════════════════════════════════════════════

# Override settings for testing BEFORE any catalog_api import
_test_dir = tempfile.mkdtemp(prefix="catalog_api_test_")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{os.path.join(_test_dir, 'health.db')}"
os.environ["AUTH_USERNAME"] = "admin"
os.environ["AUTH_PASSWORD"] = "admin123"
os.environ["CORS_ORIGINS"] = "*"
os.environ["LOG_LEVEL"] = "WARNING"  # Reduce noise during tests

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402

from catalog_api.database import create_all, get_db_session  # noqa: E402
from catalog_api.main import create_app  # noqa: E402


def basic_auth(username: str, password: str) -> dict:
    token = base64.b64encode(f"{username}:{password}".encode("utf-8")).decode("ascii")
    return {"Authorization": f"Basic {token}"}


# ══════════════════════════════════════════════════════════════════════════
# Function-Scoped Fixtures (created fresh for each test)
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_get(mock_db_session):
            mock_db_session.execute.return_value.scalar_one_or_none.return_value = record
            result = await product_service.get_record(mock_db_session, 1)
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.delete = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def auth_headers():
    return basic_auth("admin", "admin123")


@pytest.fixture
def product_payload():
    return {
        "images": ["https://example.com/robe-1.jpg", "https://example.com/robe-2.jpg"],
        "category": "Robes",
        "title": "Robe longue",
        "price": 59.9,
        "description": "Long summer dress",
    }


@pytest.fixture
def service_payload():
    return {
        "images": ["https://example.com/retouche.jpg"],
        "title": "Retouche",
        "price": 15,
        "description": "Hem and sleeve alterations",
    }


@pytest_asyncio.fixture
async def db_engine(tmp_path):
    """A throwaway SQLite database with the catalog tables."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'catalog.db'}")
    await create_all(bind=engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def client(db_engine):
    """
    Provides an async HTTP test client for endpoint testing.

    Each test gets its own app instance whose session dependency is bound
    to db_engine, so tests never share data.

    Usage:
        async def test_list(client, auth_headers):
            response = await client.get("/api/products", headers=auth_headers)
            assert response.status_code == 200
    """
    factory = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)

    async def override_session():
        async with factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app = create_app()
    app.dependency_overrides[get_db_session] = override_session

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as http_client:
        yield http_client
