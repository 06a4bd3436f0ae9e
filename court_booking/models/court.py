"""Court model."""
from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from court_booking.core.database import Base


class Court(Base):
    """Represents a bookable court."""

    __tablename__ = "courts"

    id = Column(Integer, primary_key=True, index=True)
    sport_type = Column(String, nullable=False, index=True)  # e.g., "badminton", "futsal"
    court_no = Column(Integer, nullable=False)

    # Relationships
    bookings = relationship("Booking", back_populates="court")
