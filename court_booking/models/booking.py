"""Booking model."""
from sqlalchemy import Column, Integer, String, ForeignKey, Date, Time, Index, CheckConstraint
from sqlalchemy.orm import relationship
from court_booking.core.database import Base


class Booking(Base):
    """Represents a reservation of one court for a time window on one date."""

    __tablename__ = "bookings"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String(128), ForeignKey("users.id"), nullable=False, index=True)
    court_id = Column(Integer, ForeignKey("courts.id"), nullable=False)
    booking_date = Column(Date, nullable=False)
    start_time = Column(Time, nullable=False)
    end_time = Column(Time, nullable=False)

    # Relationships
    user = relationship("User", back_populates="bookings")
    court = relationship("Court", back_populates="bookings")

    # Overlap lookups always filter on court and date
    __table_args__ = (
        Index("ix_bookings_court_date", "court_id", "booking_date"),
        CheckConstraint("start_time < end_time", name="check_booking_interval"),
    )
