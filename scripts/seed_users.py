"""Seed the sample administrator and renter accounts."""

from __future__ import annotations

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from app import create_app  # noqa: E402
from routes.auth import get_auth_service  # noqa: E402
from services.auth_service import normalize_email  # noqa: E402

SAMPLE_USERS = (
    {
        "name": "Admin User",
        "email": "admin@rental.com",
        "phone": "+1234567890",
        "role": "admin",
        "password": "admin123",
    },
    {
        "name": "John Doe",
        "email": "user@rental.com",
        "phone": "+1234567891",
        "role": "user",
        "password": "user123",
    },
)


def seed_user(data: dict) -> tuple[dict, str]:
    """Create the account, or reset its profile and password if it exists."""

    service = get_auth_service()
    existing = service.directory.find_by_email(normalize_email(data["email"]))
    if existing is None:
        return service.register(**data), "created"

    user = service.update_profile(
        existing.id,
        name=data["name"],
        email=data["email"],
        phone=data["phone"],
        role=data["role"],
        new_password=data["password"],
    )
    return user, "updated"


def main() -> None:
    app = create_app()
    with app.app_context():
        for data in SAMPLE_USERS:
            user, action = seed_user(data)
            print(f"{user['role'].title()} user {action}: {user['email']} / {data['password']}")


if __name__ == "__main__":
    main()
