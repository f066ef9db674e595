"""Booking model."""

from datetime import datetime

from . import db


class Booking(db.Model):
    """A stay reserved by a user at a property."""

    __tablename__ = "bookings"

    id = db.Column(db.Integer, primary_key=True)
    property_id = db.Column(
        db.Integer, db.ForeignKey("properties.id", ondelete="CASCADE"), nullable=False
    )
    user_id = db.Column(
        db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    check_in_date = db.Column(db.Date, nullable=False)
    check_out_date = db.Column(db.Date, nullable=False)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    property = db.relationship("Property", back_populates="bookings")
    user = db.relationship("User", back_populates="bookings")

    def to_dict(self) -> dict:
        """Serialize the booking along with the joined property and user names."""

        return {
            "id": self.id,
            "property_id": self.property_id,
            "property_name": self.property.name if self.property else None,
            "user_id": self.user_id,
            "user_name": self.user.name if self.user else None,
            "check_in_date": self.check_in_date.isoformat() if self.check_in_date else None,
            "check_out_date": self.check_out_date.isoformat() if self.check_out_date else None,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
