"""User management blueprint."""

from __future__ import annotations
from http import HTTPStatus

from flask import Blueprint, jsonify, request

from routes.auth import PROFILE_KEYS, get_auth_service
from utils.request_validation import parse_json_request

users_bp = Blueprint("users", __name__)


@users_bp.route("", methods=["GET"])
def list_users():
    users = get_auth_service().list_users()
    return jsonify({"results": users, "count": len(users)})


@users_bp.route("", methods=["POST"])
def create_user():
    """Create a user account on behalf of an administrator."""
    payload = parse_json_request(request, string_keys=PROFILE_KEYS)
    user = get_auth_service().register(
        name=payload.get("name"),
        email=payload.get("email"),
        phone=payload.get("phone"),
        password=payload.get("password"),
        role=payload.get("role"),
    )
    return jsonify(user), HTTPStatus.CREATED


@users_bp.route("/<int:user_id>", methods=["GET"])
def get_user(user_id: int):
    return jsonify(get_auth_service().get_user(user_id))


@users_bp.route("/<int:user_id>", methods=["PUT"])
def update_user(user_id: int):
    """Update profile fields; a non-empty ``password`` also rotates the credential."""
    payload = parse_json_request(request, string_keys=PROFILE_KEYS)

    get_auth_service().update_profile(
        user_id,
        name=payload.get("name"),
        email=payload.get("email"),
        phone=payload.get("phone"),
        role=payload.get("role"),
        new_password=payload.get("password") or None,
    )
    return jsonify({"message": "User updated successfully."})


@users_bp.route("/<int:user_id>", methods=["DELETE"])
def delete_user(user_id: int):
    get_auth_service().delete_user(user_id)
    return jsonify({"message": "User deleted successfully."})
