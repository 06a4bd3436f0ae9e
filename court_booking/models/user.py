"""User model."""
from sqlalchemy import Column, String
from sqlalchemy.orm import relationship
from court_booking.core.database import Base


class User(Base):
    """Represents an account that can hold bookings."""

    __tablename__ = "users"

    # Generated on signup, or the external auth provider's uid on sync
    id = Column(String(128), primary_key=True, index=True)
    name = Column(String, nullable=True)
    email = Column(String, unique=True, nullable=False, index=True)
    password = Column(String, nullable=True)  # bcrypt hash, null for external auth
    role = Column(String, nullable=False, default="customer")

    # Relationships
    bookings = relationship("Booking", back_populates="user")
