"""Tests covering the register, login and change-password endpoints."""

from __future__ import annotations

import pytest
from flask.testing import FlaskClient
from flask_jwt_extended import decode_token

from models.user import User

ALICE = {"name": "Alice", "email": "a@x.com", "phone": "555-1", "password": "p1"}
PUBLIC_USER = {"id": 1, "name": "Alice", "email": "a@x.com", "phone": "555-1", "role": "user"}


def _register(client: FlaskClient, **overrides):
    return client.post("/api/auth/register", json=dict(ALICE, **overrides))


def _login(client: FlaskClient, email: str, password: str):
    return client.post("/api/auth/login", json={"email": email, "password": password})


def test_register_returns_created_projection(client: FlaskClient):
    response = _register(client)

    assert response.status_code == 201
    payload = response.get_json()
    assert payload["message"] == "User registered successfully."
    assert payload["user"] == PUBLIC_USER


def test_register_duplicate_email_is_rejected(client: FlaskClient):
    _register(client)

    response = _register(client, name="Alicia", phone="555-0", password="other")

    assert response.status_code == 400
    payload = response.get_json()
    assert payload["detail"] == "A user with that email already exists."
    assert payload["request_id"]


@pytest.mark.parametrize(
    "payload",
    [
        {"email": "a@x.com", "phone": "555-1", "password": "p1"},
        {"name": "Alice", "phone": "555-1", "password": "p1"},
        {"name": "Alice", "email": "a@x.com", "password": "p1"},
        {"name": "Alice", "email": "a@x.com", "phone": "555-1"},
        {"name": "Alice", "email": "a@x.com", "phone": "555-1", "password": ""},
        {"name": "Alice", "email": "a@x.com", "phone": "555-1", "password": 123},
        {"name": "Alice", "email": "a@x.com", "phone": "555-1", "password": "p1", "role": "root"},
    ],
)
def test_register_validation(client: FlaskClient, payload):
    response = client.post("/api/auth/register", json=payload)

    assert response.status_code == 400


def test_login_returns_access_token_and_projection(client: FlaskClient, app):
    registered = _register(client).get_json()["user"]

    response = _login(client, "a@x.com", "p1")

    assert response.status_code == 200
    data = response.get_json()
    assert data["user"] == registered
    with app.app_context():
        claims = decode_token(data["access_token"])
    assert claims["sub"] == "1"
    assert claims["role"] == "user"


@pytest.mark.parametrize(
    "payload, status_code",
    [
        ({"email": "a@x.com"}, 400),
        ({"password": "p1"}, 400),
        ({"email": "a@x.com", "password": "wrong"}, 401),
        ({"email": "nobody@x.com", "password": "p1"}, 401),
    ],
)
def test_login_validation(client: FlaskClient, payload, status_code):
    _register(client)

    response = client.post("/api/auth/login", json=payload)

    assert response.status_code == status_code


def test_login_failures_are_indistinguishable(client: FlaskClient):
    _register(client)

    wrong_password = _login(client, "a@x.com", "wrong").get_json()
    unknown_email = _login(client, "nobody@x.com", "p1").get_json()

    assert wrong_password["error"] == unknown_email["error"] == "Unauthorized"
    assert wrong_password["detail"] == unknown_email["detail"] == "Invalid email or password."


def test_responses_never_include_credentials(client: FlaskClient):
    register_body = _register(client).get_data(as_text=True)
    listing_body = client.get("/api/users").get_data(as_text=True)
    login_user = _login(client, "a@x.com", "p1").get_json()["user"]

    for body in (register_body, listing_body):
        assert "password" not in body
        assert "p1" not in body
    assert set(login_user) == {"id", "name", "email", "phone", "role"}


def test_change_password_flow(client: FlaskClient, app):
    user_id = _register(client).get_json()["user"]["id"]

    response = client.post(
        f"/api/auth/{user_id}/change-password",
        json={"currentPassword": "p1", "newPassword": "p2"},
    )

    assert response.status_code == 200
    assert response.get_json() == {"message": "Password changed successfully."}
    assert _login(client, "a@x.com", "p1").status_code == 401
    assert _login(client, "a@x.com", "p2").status_code == 200


def test_change_password_wrong_current_keeps_hash(client: FlaskClient, app):
    user_id = _register(client).get_json()["user"]["id"]
    with app.app_context():
        before = User.query.filter_by(email="a@x.com").one().password_hash

    response = client.post(
        f"/api/auth/{user_id}/change-password",
        json={"currentPassword": "wrong", "newPassword": "p2"},
    )

    assert response.status_code == 401
    assert response.get_json()["detail"] == "Current password is incorrect."
    with app.app_context():
        assert User.query.filter_by(email="a@x.com").one().password_hash == before


@pytest.mark.parametrize(
    "user_id, payload, status_code",
    [
        (1, {"currentPassword": "p1"}, 400),
        (1, {"newPassword": "p2"}, 400),
        (99, {"currentPassword": "p1", "newPassword": "p2"}, 404),
    ],
)
def test_change_password_validation(client: FlaskClient, user_id, payload, status_code):
    _register(client)

    response = client.post(f"/api/auth/{user_id}/change-password", json=payload)

    assert response.status_code == status_code
