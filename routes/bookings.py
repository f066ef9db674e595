"""Bookings blueprint with CRUD endpoints and per-user listing."""

from __future__ import annotations

from datetime import date

from flask import Blueprint, jsonify, request
from sqlalchemy import select
from werkzeug.exceptions import BadRequest

from models import db
from models.booking import Booking
from models.property import Property
from models.user import User
from utils.request_validation import parse_json_request

bookings_bp = Blueprint("bookings", __name__)


def _get_booking_or_404(booking_id: int) -> Booking:
    return db.get_or_404(Booking, booking_id, description="Booking not found.")


def _parse_date(value):
    if isinstance(value, str):
        try:
            return date.fromisoformat(value)
        except ValueError:
            return None
    return None


def _parse_id(value):
    if isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _validate_booking_payload(data: dict):
    errors = []

    property_id = _parse_id(data.get("property_id"))
    if property_id is None:
        errors.append("property_id is required")
    elif db.session.get(Property, property_id) is None:
        errors.append("property_id does not reference an existing property")

    user_id = _parse_id(data.get("user_id"))
    if user_id is None:
        errors.append("user_id is required")
    elif db.session.get(User, user_id) is None:
        errors.append("user_id does not reference an existing user")

    check_in = _parse_date(data.get("check_in_date"))
    check_out = _parse_date(data.get("check_out_date"))
    if check_in is None:
        errors.append("check_in_date must be an ISO 8601 date")
    if check_out is None:
        errors.append("check_out_date must be an ISO 8601 date")
    if check_in and check_out and check_out <= check_in:
        errors.append("check_out_date must be after check_in_date")

    return errors, property_id, user_id, check_in, check_out


@bookings_bp.route("", methods=["GET"])
def list_bookings():
    bookings = db.session.execute(select(Booking).order_by(Booking.id)).scalars()
    payload = [booking.to_dict() for booking in bookings]
    return jsonify({"results": payload, "count": len(payload)})


@bookings_bp.route("/user/<int:user_id>", methods=["GET"])
def list_user_bookings(user_id: int):
    """Return the bookings made by one user."""

    bookings = db.session.execute(
        select(Booking).where(Booking.user_id == user_id).order_by(Booking.id)
    ).scalars()
    payload = [booking.to_dict() for booking in bookings]
    return jsonify({"results": payload, "count": len(payload)})


@bookings_bp.route("", methods=["POST"])
def create_booking():
    data = parse_json_request(request)
    errors, property_id, user_id, check_in, check_out = _validate_booking_payload(data)
    if errors:
        raise BadRequest("; ".join(errors))

    booking = Booking(
        property_id=property_id,
        user_id=user_id,
        check_in_date=check_in,
        check_out_date=check_out,
    )
    db.session.add(booking)
    db.session.commit()

    return jsonify(booking.to_dict()), 201


@bookings_bp.route("/<int:booking_id>", methods=["GET"])
def get_booking(booking_id: int):
    return jsonify(_get_booking_or_404(booking_id).to_dict())


@bookings_bp.route("/<int:booking_id>", methods=["PUT"])
def update_booking(booking_id: int):
    booking = _get_booking_or_404(booking_id)
    data = parse_json_request(request)
    errors, property_id, user_id, check_in, check_out = _validate_booking_payload(data)
    if errors:
        raise BadRequest("; ".join(errors))

    booking.property_id = property_id
    booking.user_id = user_id
    booking.check_in_date = check_in
    booking.check_out_date = check_out

    db.session.commit()
    return jsonify({"message": "Booking updated successfully."})


@bookings_bp.route("/<int:booking_id>", methods=["DELETE"])
def delete_booking(booking_id: int):
    booking = _get_booking_or_404(booking_id)
    db.session.delete(booking)
    db.session.commit()
    return jsonify({"message": "Booking deleted successfully."})
