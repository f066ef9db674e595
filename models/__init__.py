"""Database initialization and model exports."""

from flask_sqlalchemy import SQLAlchemy


db = SQLAlchemy()

# Import models to register them with SQLAlchemy metadata.
from .user import User  # noqa: E402,F401
from .property import Property  # noqa: E402,F401
from .booking import Booking  # noqa: E402,F401

__all__ = [
    "db",
    "User",
    "Property",
    "Booking",
]
