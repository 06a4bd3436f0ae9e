"""Database models."""
from court_booking.models.user import User
from court_booking.models.court import Court
from court_booking.models.booking import Booking

__all__ = ["User", "Court", "Booking"]
