"""Booking schemas."""
from pydantic import BaseModel, ConfigDict, field_validator
from typing import Optional, List
from datetime import date, time


def _reject_aware_time(v: Optional[time]) -> Optional[time]:
    # Stored slots are wall-clock times on the court's calendar
    if v is not None and v.tzinfo is not None:
        raise ValueError("Times must not carry a UTC offset")
    return v


class BookingCreate(BaseModel):
    """Schema for creating a booking.

    Every field is optional here so that absent values reach the service,
    which reports them uniformly as missing fields.
    """

    user_id: Optional[str] = None
    court_id: Optional[int] = None
    booking_date: Optional[date] = None
    start_time: Optional[time] = None
    end_time: Optional[time] = None

    model_config = ConfigDict(coerce_numbers_to_str=True)

    @field_validator("start_time", "end_time")
    def validate_naive_time(cls, v: Optional[time]) -> Optional[time]:
        return _reject_aware_time(v)


class BookingUpdate(BaseModel):
    """Schema for moving a booking to a new date or time."""

    booking_date: Optional[date] = None
    start_time: Optional[time] = None
    end_time: Optional[time] = None

    @field_validator("start_time", "end_time")
    def validate_naive_time(cls, v: Optional[time]) -> Optional[time]:
        return _reject_aware_time(v)


class BookingInDB(BaseModel):
    """Schema for a booking from database."""

    id: int
    user_id: str
    court_id: int
    booking_date: date
    start_time: time
    end_time: time

    model_config = ConfigDict(from_attributes=True)


class BookingListItem(BaseModel):
    """Schema for a booking row in list results."""

    id: int
    user_id: str
    court_id: int
    booking_date: str  # YYYY-MM-DD
    start_time: time
    end_time: time


class BookingUpdated(BaseModel):
    """Schema for the fields returned after an update."""

    id: int
    booking_date: date
    start_time: time
    end_time: time

    model_config = ConfigDict(from_attributes=True)


class UserBooking(BaseModel):
    """Schema for a user's booking joined with court details."""

    id: int
    booking_date: date
    start_time: time
    end_time: time
    sport_type: str
    court_no: int


class BookingResponse(BaseModel):
    """Schema for create and delete responses."""

    message: str
    booking: BookingInDB


class BookingUpdateResponse(BaseModel):
    """Schema for update responses."""

    message: str
    booking: BookingUpdated


class BookingListResponse(BaseModel):
    """Schema for booking list responses."""

    bookings: List[BookingListItem]
