"""Authentication blueprint providing register, login and password change endpoints."""

from __future__ import annotations
from http import HTTPStatus

from flask import Blueprint, current_app, jsonify, request
from flask_jwt_extended import create_access_token

from services import AuthService
from utils.request_validation import parse_json_request

auth_bp = Blueprint("auth", __name__)

PROFILE_KEYS = ("name", "email", "phone", "password", "role")


def get_auth_service() -> AuthService:
    """Return the account service built by the application factory."""
    return current_app.extensions["auth_service"]


@auth_bp.route("/register", methods=["POST"])
def register() -> tuple:
    """Register a new user with name, email, phone, password, and optional role."""
    payload = parse_json_request(request, string_keys=PROFILE_KEYS)
    user = get_auth_service().register(
        name=payload.get("name"),
        email=payload.get("email"),
        phone=payload.get("phone"),
        password=payload.get("password"),
        role=payload.get("role"),
    )
    return (
        jsonify({"message": "User registered successfully.", "user": user}),
        HTTPStatus.CREATED,
    )


@auth_bp.route("/login", methods=["POST"])
def login() -> tuple:
    """Authenticate a user and return a JWT access token."""
    payload = parse_json_request(request, string_keys=("email", "password"))
    user = get_auth_service().login(payload.get("email"), payload.get("password"))

    token = create_access_token(
        identity=str(user["id"]), additional_claims={"role": user["role"]}
    )
    return (
        jsonify(
            {
                "message": "Login successful.",
                "access_token": token,
                "user": user,
            }
        ),
        HTTPStatus.OK,
    )


@auth_bp.route("/<int:user_id>/change-password", methods=["POST"])
def change_password(user_id: int) -> tuple:
    """Replace a user's password after checking the current one."""
    payload = parse_json_request(
        request, string_keys=("currentPassword", "newPassword")
    )
    get_auth_service().change_password(
        user_id,
        payload.get("currentPassword"),
        payload.get("newPassword"),
    )
    return jsonify({"message": "Password changed successfully."}), HTTPStatus.OK
