import os

# app.main builds a module-level app from the environment on import.
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.main import create_app


@pytest.fixture()
def settings():
    return Settings(DATABASE_URL="sqlite://", LOG_LEVEL="WARNING", _env_file=None)


@pytest.fixture()
def app(settings):
    """A fresh application on its own in-memory database."""
    return create_app(settings)


@pytest.fixture()
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def category(client):
    resp = client.post("/api/categories", json={"name": "Paintings"})
    assert resp.status_code == 201
    return resp.json()["category"]


@pytest.fixture()
def make_product(client, category):
    def _make(title="Untitled", price=10.0, **extra):
        body = {"title": title, "price": price, "category": category["id"], **extra}
        resp = client.post("/api/products", json=body)
        assert resp.status_code == 201, resp.text
        return resp.json()["product"]

    return _make


@pytest.fixture()
def user(client):
    resp = client.post(
        "/api/users",
        json=[{"name": "Ada", "email": "ada@example.com", "password": "s3cret"}],
    )
    assert resp.status_code == 201, resp.text
    return resp.json()["users"][0]


@pytest.fixture()
def address(client, user):
    resp = client.post(
        "/api/addresses",
        json={
            "addresses": [
                {
                    "user": user["id"],
                    "street": "1 Gallery Road",
                    "city": "Pune",
                    "state": "MH",
                    "postalCode": "411001",
                    "country": "IN",
                    "phone": "+91-20-0000-0000",
                }
            ]
        },
    )
    assert resp.status_code == 201, resp.text
    return resp.json()["addresses"][0]
