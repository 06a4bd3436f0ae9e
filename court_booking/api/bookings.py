"""Booking endpoints."""
import logging
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from court_booking.core.database import get_db
from court_booking.core.exceptions import ServiceError
from court_booking.schemas.booking import (
    BookingCreate,
    BookingUpdate,
    BookingInDB,
    BookingUpdated,
    BookingResponse,
    BookingUpdateResponse,
    BookingListResponse,
    UserBooking,
)
from court_booking.services.booking_service import booking_service
from court_booking.services.booking_query_service import booking_query_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/bookings", tags=["bookings"])


@router.post("", response_model=BookingResponse, status_code=201)
async def create_booking(
    booking: BookingCreate,
    db: AsyncSession = Depends(get_db),
):
    """
    Book a court for a time slot.

    The user and court must exist and the slot must not overlap another
    booking on the same court and date. Back-to-back slots are allowed.

    Args:
        booking: User, court, date, start and end time
        db: Database session

    Returns:
        Created booking
    """
    try:
        created = await booking_service.create_booking(db, booking)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except SQLAlchemyError:
        logger.exception("Error creating booking")
        raise HTTPException(status_code=500, detail="Internal server error")

    return {"message": "Booking successful", "booking": BookingInDB.model_validate(created)}


@router.get("", response_model=BookingListResponse)
async def list_bookings(
    user_id: Optional[str] = Query(default=None, description="Only this user's bookings"),
    court_id: Optional[int] = Query(default=None, description="Only bookings on this court"),
    db: AsyncSession = Depends(get_db),
):
    """
    List bookings ordered by date.

    Filter by user_id or court_id; if both are given user_id wins.

    Args:
        user_id: Optional user filter
        court_id: Optional court filter
        db: Database session

    Returns:
        Matching bookings
    """
    try:
        bookings = await booking_query_service.list_bookings(db, user_id=user_id, court_id=court_id)
    except SQLAlchemyError:
        logger.exception("Error fetching bookings")
        raise HTTPException(status_code=500, detail="Internal server error")

    return {"bookings": bookings}


@router.get("/currentUser/{user_id}", response_model=List[UserBooking])
async def list_user_bookings(
    user_id: str,
    db: AsyncSession = Depends(get_db),
):
    """
    Get a user's bookings with court details, newest date first.

    Args:
        user_id: User ID
        db: Database session

    Returns:
        The user's bookings
    """
    try:
        return await booking_query_service.bookings_for_user(db, user_id)
    except SQLAlchemyError:
        logger.exception("Error fetching bookings")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.put("/{booking_id}", response_model=BookingUpdateResponse)
async def update_booking(
    booking_id: int,
    update: BookingUpdate,
    db: AsyncSession = Depends(get_db),
):
    """
    Move a booking to a new date and time.

    Args:
        booking_id: Booking ID
        update: New date, start and end time
        db: Database session

    Returns:
        Updated booking
    """
    try:
        booking = await booking_service.update_booking(db, booking_id, update)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except SQLAlchemyError:
        logger.exception("Error updating booking")
        raise HTTPException(status_code=500, detail="Internal server error")

    return {
        "message": "Booking updated successfully",
        "booking": BookingUpdated.model_validate(booking),
    }


@router.delete("/{booking_id}", response_model=BookingResponse)
async def delete_booking(
    booking_id: int,
    db: AsyncSession = Depends(get_db),
):
    """
    Cancel a booking.

    Args:
        booking_id: Booking ID
        db: Database session

    Returns:
        The deleted booking as it was before deletion
    """
    try:
        snapshot = await booking_service.delete_booking(db, booking_id)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except SQLAlchemyError:
        logger.exception("Error deleting booking")
        raise HTTPException(status_code=500, detail="Internal server error")

    return {"message": "Booking deleted successfully", "booking": snapshot}
