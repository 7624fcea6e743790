# tests/test_token_guard.py
from datetime import timedelta

import pytest
from fastapi import Depends, FastAPI, Request
from fastapi.testclient import TestClient
from jose import jwt

from api.auth import require_token
from core import config
from core.errors import InvalidTokenError
from core.security import create_access_token, decode_token
from main import create_app
from .conftest import PEN, TEST_USER


@pytest.fixture
def protected_client():
    with TestClient(create_app("sqlite://", protect_product_routes=True)) as c:
        yield c


@pytest.fixture
def protected_token(protected_client):
    protected_client.post("/api/signup", json=TEST_USER)
    r = protected_client.post("/api/login", json={"email": TEST_USER["email"], "password": TEST_USER["password"]})
    return r.json()["token"]


def test_product_routes_are_open_by_default(client):
    assert client.get("/api/products").status_code == 200
    assert client.post("/api/products", json=PEN).status_code == 201


def test_missing_header_is_unauthorized(protected_client):
    r = protected_client.get("/api/products")

    assert r.status_code == 401
    assert r.json() == {"message": "Unauthorized"}


def test_bad_token_is_forbidden(protected_client):
    r = protected_client.get("/api/products", headers={"Authorization": "not-a-token"})

    assert r.status_code == 403
    assert r.json() == {"message": "Forbidden"}


def test_bearer_prefix_is_not_stripped(protected_client, protected_token):
    r = protected_client.get("/api/products", headers={"Authorization": f"Bearer {protected_token}"})

    assert r.status_code == 403


def test_raw_token_is_accepted(protected_client, protected_token):
    headers = {"Authorization": protected_token}

    assert protected_client.post("/api/products", json=PEN, headers=headers).status_code == 201
    assert len(protected_client.get("/api/products", headers=headers).json()) == 1


def test_guard_attaches_claims_to_request(token):
    probe = FastAPI()

    @probe.get("/whoami")
    def whoami(request: Request, claims: dict = Depends(require_token)):
        return {"claims": claims["userId"], "state": request.state.user["userId"]}

    r = TestClient(probe).get("/whoami", headers={"Authorization": token})

    assert r.status_code == 200
    assert r.json() == {"claims": 1, "state": 1}


def test_token_has_no_expiry_by_default():
    claims = decode_token(create_access_token({"userId": 3}))

    assert claims["userId"] == 3
    assert "exp" not in claims


def test_expired_token_is_rejected():
    token = create_access_token({"userId": 3}, expires_delta=timedelta(seconds=-5))

    with pytest.raises(InvalidTokenError):
        decode_token(token)


def test_configured_expiry_is_applied(monkeypatch):
    monkeypatch.setattr(config, "ACCESS_TOKEN_EXPIRE_MINUTES", 30)

    claims = decode_token(create_access_token({"userId": 3}))

    assert claims["exp"] > claims["iat"]


def test_token_signed_with_other_secret_is_rejected():
    token = jwt.encode({"userId": 3}, "some-other-secret", algorithm="HS256")

    with pytest.raises(InvalidTokenError):
        decode_token(token)
