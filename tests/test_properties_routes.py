"""Tests for property CRUD endpoints."""

from __future__ import annotations

import pytest
from flask.testing import FlaskClient

COTTAGE = {
    "name": "Lake Cottage",
    "description": "Two bedrooms by the water",
    "type": "house",
    "size": "80 m2",
    "location": "Lakeside",
    "price": "120.50",
}


def _create(client: FlaskClient, **overrides) -> dict:
    response = client.post("/api/properties", json=dict(COTTAGE, **overrides))
    assert response.status_code == 201
    return response.get_json()


def test_create_property(client: FlaskClient):
    created = _create(client)

    assert created["id"] == 1
    assert created["name"] == "Lake Cottage"
    assert created["price"] == 120.5
    assert created["created_at"]


@pytest.mark.parametrize(
    "overrides, message",
    [
        ({"name": ""}, "name is required"),
        ({"price": "cheap"}, "price must be numeric"),
        ({"price": -5}, "price must be a non-negative number"),
        ({"name": "   "}, "name is required"),
        ({"type": True}, "type must be text"),
        ({"price": True}, "price must be numeric"),
    ],
)
def test_create_property_validation(client: FlaskClient, overrides, message):
    response = client.post("/api/properties", json=dict(COTTAGE, **overrides))

    assert response.status_code == 400
    assert message in response.get_json()["detail"]


def test_list_and_get_properties(client: FlaskClient):
    first = _create(client)
    second = _create(client, name="City Loft", price=None)

    listing = client.get("/api/properties").get_json()
    assert listing["count"] == 2
    assert {item["id"] for item in listing["results"]} == {first["id"], second["id"]}

    fetched = client.get(f"/api/properties/{second['id']}").get_json()
    assert fetched["name"] == "City Loft"
    assert fetched["price"] is None


def test_update_property(client: FlaskClient):
    created = _create(client)

    response = client.put(
        f"/api/properties/{created['id']}",
        json=dict(COTTAGE, name="Renovated Cottage", price=150),
    )

    assert response.status_code == 200
    assert response.get_json() == {"message": "Property updated successfully."}
    fetched = client.get(f"/api/properties/{created['id']}").get_json()
    assert fetched["name"] == "Renovated Cottage"
    assert fetched["price"] == 150.0


def test_missing_property_returns_404(client: FlaskClient):
    for response in (
        client.get("/api/properties/99"),
        client.put("/api/properties/99", json=COTTAGE),
        client.delete("/api/properties/99"),
    ):
        assert response.status_code == 404
        assert response.get_json()["detail"] == "Property not found."


def test_delete_property(client: FlaskClient):
    created = _create(client)

    response = client.delete(f"/api/properties/{created['id']}")

    assert response.status_code == 200
    assert client.get(f"/api/properties/{created['id']}").status_code == 404


def test_text_fields_are_stripped(client: FlaskClient):
    created = _create(client, name="  Lake Cottage  ", size=80)

    assert created["name"] == "Lake Cottage"
    assert created["size"] == "80"
