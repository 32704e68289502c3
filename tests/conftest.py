"""Shared pytest fixtures and configuration."""

import os

# Set test environment variables before the application reads its settings
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient

from acemarket.core.exceptions import ImageUploadError
from acemarket.infrastructure.database import database
from acemarket.interfaces.deps import get_image_storage
from acemarket.main import app
from tests.utils.helpers import auth_headers, register


class FakeImageStorage:
    """In-memory stand-in for Cloudinary."""

    def __init__(self):
        self.uploads = []
        self.fail = False

    def upload(self, payload: str) -> str:
        if self.fail:
            raise ImageUploadError()
        self.uploads.append(payload)
        return f"https://res.cloudinary.com/demo/image/upload/v1/listing-{len(self.uploads)}.png"


@pytest.fixture
def image_storage():
    return FakeImageStorage()


@pytest.fixture
def client(image_storage):
    """API client over a fresh in-memory database."""
    app.dependency_overrides[get_image_storage] = lambda: image_storage
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def db_session():
    """Session on a fresh in-memory database, for service-level tests."""
    database.create_all()
    session = database.session()
    try:
        yield session
    finally:
        session.close()
        database.dispose()


@pytest.fixture
def alice(client):
    data = register(client, "alice").json()
    data["headers"] = auth_headers(data["token"])
    return data


@pytest.fixture
def bob(client):
    data = register(client, "bob").json()
    data["headers"] = auth_headers(data["token"])
    return data


@pytest.fixture
def sample_have_post():
    return {
        "type": "HAVE",
        "content": "Available: 5,000 sq ft industrial warehouse with loading dock.",
        "propertyDetails": {
            "propertyType": "Industrial",
            "industry": ["Logistics", "Manufacturing"],
            "location": {"city": "Los Angeles", "state": "CA", "address": "Industrial District"},
            "size": 5000,
            "sizeUnit": "sqft",
            "price": 250000,
        },
        "tags": ["warehouse", "loading-dock"],
    }


@pytest.fixture
def sample_need_post():
    return {
        "type": "NEED",
        "content": "Looking for a 2,000 sq ft office space in downtown area.",
    }
