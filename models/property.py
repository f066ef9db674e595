"""Rental property model."""

from datetime import datetime
from decimal import Decimal

from . import db


class Property(db.Model):
    """Represents a property available for rent."""

    __tablename__ = "properties"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=True)
    type = db.Column(db.String(64), nullable=True)
    size = db.Column(db.String(64), nullable=True)
    location = db.Column(db.String(255), nullable=True)
    price = db.Column(db.Numeric(10, 2), nullable=True)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    bookings = db.relationship(
        "Booking",
        back_populates="property",
        cascade="all, delete-orphan",
    )

    def to_dict(self) -> dict:
        """Serialize the property to a dictionary."""

        price = float(self.price) if isinstance(self.price, Decimal) else self.price
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "type": self.type,
            "size": self.size,
            "location": self.location,
            "price": price,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
