# backend/fieldbook/models/user.py
"""
User model for the field booking API.

Users are created at registration and are immutable afterwards. The role
column holds one of the RoleName values.
"""

from sqlalchemy import CheckConstraint, Column, DateTime, Integer, String
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from ..database import Base


class User(Base):
    """
    Registered account.

    Attributes:
        id: Primary key (column user_id)
        username: Display name, at least 3 characters
        email: Unique login identifier
        hashed_password: Bcrypt hash (column password)
        role: 'user' or 'admin'
        created_at: Registration timestamp
    """

    __tablename__ = "users"

    id = Column("user_id", Integer, primary_key=True, autoincrement=True)
    username = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    hashed_password = Column("password", String(255), nullable=False)
    role = Column(String(20), nullable=False, default="user")
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    bookings = relationship("Booking", back_populates="user")

    __table_args__ = (CheckConstraint("role IN ('user', 'admin')", name="ck_users_role"),)

    def __repr__(self) -> str:
        return f"<User {self.email} ({self.role})>"
