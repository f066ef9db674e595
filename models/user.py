"""User model definition."""

from datetime import datetime

from . import db


USER_ROLES = ("admin", "user")
DEFAULT_ROLE = "user"
PUBLIC_FIELDS = ("id", "name", "email", "phone", "role")


class User(db.Model):
    """Represents a renter or administrator account."""

    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(120), nullable=False)
    email = db.Column(db.String(255), unique=True, nullable=False)
    phone = db.Column(db.String(32), nullable=False)
    role = db.Column(db.String(32), nullable=False, default=DEFAULT_ROLE)
    password_hash = db.Column(db.String(255), nullable=False)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    bookings = db.relationship(
        "Booking",
        back_populates="user",
        cascade="all, delete-orphan",
    )

    def to_public_dict(self) -> dict:
        """Serialize the user without credential material."""

        return {field: getattr(self, field) for field in PUBLIC_FIELDS}

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return f"<User {self.id}>"
