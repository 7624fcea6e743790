# tests/conftest.py
import os

# Must be set before the server modules read their configuration
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET_KEY"] = "test-secret-key"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["PROTECT_PRODUCT_ROUTES"] = "false"

import pytest
from fastapi.testclient import TestClient

from main import create_app

TEST_USER = {"name": "A", "email": "a@x.com", "password": "p"}
PEN = {
    "productName": "Pen",
    "productPrice": 5,
    "productCategory": "Office",
    "productDescription": "Blue pen",
}


@pytest.fixture
def app():
    """Fresh application bound to its own in-memory database."""
    return create_app("sqlite://")


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def registered_user(client):
    r = client.post("/api/signup", json=TEST_USER)
    assert r.status_code == 201
    return dict(TEST_USER)


@pytest.fixture
def token(client, registered_user):
    r = client.post("/api/login", json={"email": registered_user["email"], "password": registered_user["password"]})
    assert r.status_code == 200
    return r.json()["token"]
