# backend/fieldbook/models/field.py
from sqlalchemy import CheckConstraint, Column, DateTime, Integer, String
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from ..database import Base


class Field(Base):
    """A bookable sports field priced per hour in the smallest currency unit."""

    __tablename__ = "fields"

    id = Column("field_id", Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    price_per_hour = Column(Integer, nullable=False)
    location = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    bookings = relationship("Booking", back_populates="field")

    __table_args__ = (
        CheckConstraint("price_per_hour > 0", name="ck_fields_price_positive"),
    )

    def __repr__(self) -> str:
        return f"<Field {self.id} {self.name!r} {self.price_per_hour}/h>"
