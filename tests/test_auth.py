# tests/test_auth.py
import pytest

from core.errors import HashingError
from core.security import decode_token
from models.user import User
from .conftest import TEST_USER


def test_signup_success(client):
    r = client.post("/api/signup", json=TEST_USER)

    assert r.status_code == 201
    assert r.json() == {"message": "User registered successfully"}


def test_signup_stores_hash_not_plaintext(app, registered_user):
    with app.state.SessionLocal() as db:
        user = db.query(User).filter(User.email == registered_user["email"]).one()

    assert user.password != registered_user["password"]
    assert user.password.startswith("$2")


@pytest.mark.parametrize("password", ["p", "something-else"])
def test_signup_duplicate_email(app, client, registered_user, password):
    """
    A second signup with the same email is rejected whatever the password,
    and no second row appears.
    """
    r = client.post("/api/signup", json={**TEST_USER, "password": password})

    assert r.status_code == 400
    assert r.json() == {"message": "User with this email already exists"}
    with app.state.SessionLocal() as db:
        assert db.query(User).filter(User.email == TEST_USER["email"]).count() == 1


def test_signup_unique_constraint_is_the_backstop(app, client, registered_user, monkeypatch):
    # Simulates a concurrent signup that slipped past the lookup
    monkeypatch.setattr("api.auth.find_user_by_email", lambda db, email: None)

    r = client.post("/api/signup", json=TEST_USER)

    assert r.status_code == 400
    assert r.json()["message"] == "User with this email already exists"
    with app.state.SessionLocal() as db:
        assert db.query(User).count() == 1


@pytest.mark.parametrize("body", [
    {"email": "a@x.com", "password": "p"},
    {"name": "A", "password": "p"},
    {"name": "A", "email": "a@x.com"},
    {"name": "", "email": "a@x.com", "password": "p"},
    {},
])
def test_signup_missing_fields(client, body):
    r = client.post("/api/signup", json=body)

    assert r.status_code == 400
    assert r.json() == {"message": "Please provide all required fields"}


def test_signup_without_body(client):
    r = client.post("/api/signup")

    assert r.status_code == 400
    assert r.json() == {"message": "Please provide all required fields"}


def test_signup_hashing_fault(client, monkeypatch):
    def broken_hash(password):
        raise HashingError()

    monkeypatch.setattr("api.auth.get_password_hash", broken_hash)

    r = client.post("/api/signup", json=TEST_USER)

    assert r.status_code == 500
    assert r.json() == {"message": "Internal server error"}


def test_login_returns_token_for_user(app, client, registered_user):
    r = client.post("/api/login", json={"email": "a@x.com", "password": "p"})

    assert r.status_code == 200
    token = r.json()["token"]
    with app.state.SessionLocal() as db:
        user = db.query(User).filter(User.email == "a@x.com").one()
    assert decode_token(token)["userId"] == user.id


def test_login_wrong_password_and_unknown_email_look_the_same(client, registered_user):
    wrong_password = client.post("/api/login", json={"email": "a@x.com", "password": "wrong"})
    unknown_email = client.post("/api/login", json={"email": "nobody@x.com", "password": "p"})

    assert wrong_password.status_code == 401
    assert unknown_email.status_code == 401
    assert wrong_password.json() == unknown_email.json() == {"message": "Invalid credentials"}


@pytest.mark.parametrize("body", [{"email": "a@x.com"}, {"password": "p"}, {"email": "", "password": ""}])
def test_login_missing_fields(client, body):
    r = client.post("/api/login", json=body)

    assert r.status_code == 400


def test_login_unreadable_stored_hash(app, client):
    with app.state.SessionLocal() as db:
        db.add(User(name="B", email="b@x.com", password="not-a-bcrypt-hash"))
        db.commit()

    r = client.post("/api/login", json={"email": "b@x.com", "password": "p"})

    assert r.status_code == 500
    assert r.json() == {"message": "Internal server error"}


def test_login_store_fault(app, client):
    User.__table__.drop(app.state.engine)

    r = client.post("/api/login", json={"email": "a@x.com", "password": "p"})

    assert r.status_code == 500
    assert r.json() == {"message": "Internal server error"}
