"""Root conftest: test environment plus the in-memory API shared by all suites.

Invariants:
    - Every test that asks for ``api`` gets a fresh in-memory Mongo
    - The admin account from ADMIN_EMAIL/ADMIN_PASSWORD always exists there
"""

import asyncio
import os

# Nunca tocar una base real ni usar el secreto por defecto
os.environ.setdefault("MONGO_DATABASE", "portfolio_test")
os.environ.setdefault("MONGO_URI", "mongodb://localhost:27017/portfolio_test")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-with-enough-length-for-hs256")
os.environ.setdefault("ADMIN_EMAIL", "admin@portfolio.dev")
os.environ.setdefault("ADMIN_PASSWORD", "s3cret-pass")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from mongomock_motor import AsyncMongoMockClient  # noqa: E402

from backend.core import database  # noqa: E402
from backend.core.config import get_settings  # noqa: E402
from backend.user.models.user import Role  # noqa: E402
from backend.user.services.user_service import ensure_admin, hash_password  # noqa: E402

ADMIN_EMAIL = os.environ["ADMIN_EMAIL"]
ADMIN_PASSWORD = os.environ["ADMIN_PASSWORD"]


@pytest.fixture
def mongo_client():
    client = AsyncMongoMockClient()
    database.set_client(client)
    yield client
    database.set_client(None)


@pytest.fixture
def db(mongo_client):
    database_ = mongo_client[get_settings().MONGO_DATABASE]
    asyncio.run(ensure_admin(database_, ADMIN_EMAIL, ADMIN_PASSWORD))
    return database_


@pytest.fixture
def api(db):
    """FastAPI TestClient over the in-memory database."""
    from backend.main import app

    with TestClient(app) as c:
        yield c


@pytest.fixture
def admin_token(api):
    res = api.post("/api/auth/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
    assert res.status_code == 200, res.text
    return res.json()["token"]


@pytest.fixture
def admin_headers(admin_token):
    return {"Authorization": f"Bearer {admin_token}"}


@pytest.fixture
def viewer_headers(api, db):
    """Bearer header for an authenticated account without the admin role."""
    asyncio.run(db["users"].insert_one({
        "email": "viewer@portfolio.dev",
        "password_hash": hash_password("viewer-pass"),
        "is_active": True,
        "role": Role.user.value,
    }))
    res = api.post("/api/auth/login", json={"email": "viewer@portfolio.dev", "password": "viewer-pass"})
    assert res.status_code == 200, res.text
    return {"Authorization": f"Bearer {res.json()['token']}"}
