"""Pytest configuration and fixtures."""
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from catalog.config import get_settings
from catalog.database import Base, get_db
from catalog.main import app
from catalog.models.product import Product
from catalog.services import product_store
from catalog.services.auth import create_user

TEST_EMAIL = "test@example.com"
TEST_PASSWORD = "correct-horse-battery"


@pytest.fixture
def test_db():
    """Create a test database for testing."""
    # In-memory SQLite shared by every session through a single connection
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)

    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def override_get_db():
        try:
            db = TestingSessionLocal()
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db

    yield TestingSessionLocal

    Base.metadata.drop_all(bind=engine)
    app.dependency_overrides.clear()


@pytest.fixture
def db(test_db):
    """Session for arranging and inspecting rows directly."""
    session = test_db()
    yield session
    session.close()


@pytest.fixture
def client(test_db):
    """Client without a signed-in user."""
    return TestClient(app)


@pytest.fixture
def user(db):
    return create_user(db, "Test User", TEST_EMAIL, TEST_PASSWORD)


@pytest.fixture
def auth_client(client, user):
    """Client with an authenticated session."""
    response = client.post(
        "/login",
        data={"email": TEST_EMAIL, "password": TEST_PASSWORD},
        follow_redirects=False,
    )
    assert response.status_code == 302
    return client


@pytest.fixture
def make_product(db):
    """Factory for persisted products."""

    def _make(**overrides):
        fields = {"name": "Sample Product", "price": Decimal("10.00")}
        fields.update(overrides)
        return product_store.create_product(db, fields)

    return _make


def inertia_get(client, url, **kwargs):
    """GET a page the way the Inertia client does."""
    headers = {"X-Inertia": "true", "X-Inertia-Version": get_settings().inertia_version}
    headers.update(kwargs.pop("headers", {}))
    return client.get(url, headers=headers, follow_redirects=False, **kwargs)


def page_props(client, url):
    """Fetch a page and return its props."""
    response = inertia_get(client, url)
    assert response.status_code == 200
    return response.json()["props"]


def fetch_product(db, product_id):
    """Reload a product row, bypassing the identity map."""
    db.expire_all()
    return db.query(Product).filter(Product.id == product_id).first()
