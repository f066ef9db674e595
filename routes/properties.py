"""Properties blueprint with CRUD endpoints."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

from flask import Blueprint, jsonify, request
from sqlalchemy import select
from werkzeug.exceptions import BadRequest

from models import db
from models.property import Property
from utils.request_validation import parse_json_request

properties_bp = Blueprint("properties", __name__)

PROPERTY_FIELDS = ("name", "description", "type", "size", "location")


def _get_property_or_404(property_id: int) -> Property:
    return db.get_or_404(Property, property_id, description="Property not found.")


def _validate_property_payload(data: dict):
    errors = []

    name = data.get("name")
    if name is None or not str(name).strip():
        errors.append("name is required")

    for field in PROPERTY_FIELDS:
        value = data.get(field)
        if value is None:
            continue
        # JSON booleans are ints in Python; they are not text.
        if isinstance(value, bool) or not isinstance(value, (str, int, float)):
            errors.append(f"{field} must be text")

    price = data.get("price")
    price_decimal = None
    if price not in (None, ""):
        try:
            price_decimal = Decimal(str(price))
        except (InvalidOperation, TypeError):
            errors.append("price must be numeric")
        else:
            if not price_decimal.is_finite() or price_decimal < 0:
                errors.append("price must be a non-negative number")

    return errors, price_decimal


def _text(value):
    return None if value is None else str(value).strip()


@properties_bp.route("", methods=["GET"])
def list_properties():
    """Return every property, newest first."""

    properties = db.session.execute(
        select(Property).order_by(Property.created_at.desc(), Property.id.desc())
    ).scalars()
    payload = [item.to_dict() for item in properties]
    return jsonify({"results": payload, "count": len(payload)})


@properties_bp.route("", methods=["POST"])
def create_property():
    data = parse_json_request(request)
    errors, price = _validate_property_payload(data)
    if errors:
        raise BadRequest("; ".join(errors))

    item = Property(
        **{field: _text(data.get(field)) for field in PROPERTY_FIELDS},
        price=price,
    )
    db.session.add(item)
    db.session.commit()

    return jsonify(item.to_dict()), 201


@properties_bp.route("/<int:property_id>", methods=["GET"])
def get_property(property_id: int):
    return jsonify(_get_property_or_404(property_id).to_dict())


@properties_bp.route("/<int:property_id>", methods=["PUT"])
def update_property(property_id: int):
    """Replace all property fields."""

    item = _get_property_or_404(property_id)
    data = parse_json_request(request)
    errors, price = _validate_property_payload(data)
    if errors:
        raise BadRequest("; ".join(errors))

    for field in PROPERTY_FIELDS:
        setattr(item, field, _text(data.get(field)))
    item.price = price

    db.session.commit()
    return jsonify({"message": "Property updated successfully."})


@properties_bp.route("/<int:property_id>", methods=["DELETE"])
def delete_property(property_id: int):
    item = _get_property_or_404(property_id)
    db.session.delete(item)
    db.session.commit()
    return jsonify({"message": "Property deleted successfully."})
