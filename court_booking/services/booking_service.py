"""Booking service for validating and writing bookings."""
import logging
from datetime import time as dt_time
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.exc import StaleDataError

from court_booking.core.exceptions import ConflictError, NotFoundError, ValidationError
from court_booking.models.booking import Booking
from court_booking.models.court import Court
from court_booking.models.user import User
from court_booking.schemas.booking import BookingCreate, BookingInDB, BookingUpdate
from court_booking.services.overlap_detector import overlap_detector
from court_booking.services.slot_locks import slot_locks

logger = logging.getLogger(__name__)


class BookingService:
    """Service for creating, moving and cancelling bookings."""

    async def create_booking(self, db: AsyncSession, booking: BookingCreate) -> Booking:
        """
        Create a booking after checking references and the slot.

        Checks run in this order and stop at the first failure: required
        fields, interval sanity, user exists, court exists, no overlap.

        Args:
            db: Database session
            booking: Requested booking

        Returns:
            The stored booking with its generated ID

        Raises:
            ValidationError: A field is missing or the interval is inverted
            NotFoundError: The user or court does not exist
            ConflictError: The slot overlaps an existing booking
        """
        self._require_fields(
            booking.user_id,
            booking.court_id,
            booking.booking_date,
            booking.start_time,
            booking.end_time,
        )
        self._check_interval(booking.start_time, booking.end_time)

        result = await db.execute(select(User.id).where(User.id == booking.user_id))
        if result.scalar_one_or_none() is None:
            raise NotFoundError("user")

        result = await db.execute(select(Court.id).where(Court.id == booking.court_id))
        if result.scalar_one_or_none() is None:
            raise NotFoundError("court")

        async with slot_locks.hold(db, booking.court_id, booking.booking_date):
            if await overlap_detector.has_conflict(
                db,
                booking.court_id,
                booking.booking_date,
                booking.start_time,
                booking.end_time,
            ):
                await db.rollback()
                logger.warning(
                    f"Rejected booking on court {booking.court_id} for "
                    f"{booking.booking_date} {booking.start_time}-{booking.end_time}: slot taken"
                )
                raise ConflictError()

            db_booking = Booking(**booking.model_dump())
            db.add(db_booking)
            await db.commit()
            await db.refresh(db_booking)

        logger.info(
            f"Created booking {db_booking.id} for user {db_booking.user_id} on court "
            f"{db_booking.court_id} ({db_booking.booking_date} "
            f"{db_booking.start_time}-{db_booking.end_time})"
        )
        return db_booking

    async def update_booking(
        self, db: AsyncSession, booking_id: int, update: BookingUpdate
    ) -> Booking:
        """
        Move a booking to a new date and time.

        The new slot is checked against every other booking on the same
        court, so a booking never conflicts with itself and repeating an
        update leaves the stored state unchanged.

        Args:
            db: Database session
            booking_id: Booking ID
            update: New date and times

        Returns:
            The updated booking

        Raises:
            ValidationError: A field is missing or the interval is inverted
            NotFoundError: The booking does not exist
            ConflictError: The new slot overlaps another booking
        """
        self._require_fields(update.booking_date, update.start_time, update.end_time)
        self._check_interval(update.start_time, update.end_time)

        result = await db.execute(select(Booking).where(Booking.id == booking_id))
        booking = result.scalar_one_or_none()

        if not booking:
            raise NotFoundError("booking")

        async with slot_locks.hold(db, booking.court_id, update.booking_date):
            # A delete may have committed while this request waited for the lock
            result = await db.execute(
                select(Booking)
                .where(Booking.id == booking_id)
                .execution_options(populate_existing=True)
            )
            if result.scalar_one_or_none() is None:
                await db.rollback()
                raise NotFoundError("booking")

            if await overlap_detector.has_conflict(
                db,
                booking.court_id,
                update.booking_date,
                update.start_time,
                update.end_time,
                exclude_booking_id=booking.id,
            ):
                await db.rollback()
                logger.warning(
                    f"Rejected move of booking {booking_id} to {update.booking_date} "
                    f"{update.start_time}-{update.end_time}: slot taken"
                )
                raise ConflictError()

            for field, value in update.model_dump().items():
                setattr(booking, field, value)

            try:
                await db.commit()
            except StaleDataError:
                await db.rollback()
                logger.warning(f"Booking {booking_id} was deleted before its update committed")
                raise NotFoundError("booking")
            await db.refresh(booking)

        logger.info(f"Updated booking {booking.id}")
        return booking

    async def delete_booking(self, db: AsyncSession, booking_id: int) -> BookingInDB:
        """
        Delete a booking.

        Args:
            db: Database session
            booking_id: Booking ID

        Returns:
            Snapshot of the booking as it was before deletion

        Raises:
            NotFoundError: The booking does not exist
        """
        result = await db.execute(select(Booking).where(Booking.id == booking_id))
        booking = result.scalar_one_or_none()

        if not booking:
            raise NotFoundError("booking")

        snapshot = BookingInDB.model_validate(booking)

        await db.delete(booking)
        await db.commit()

        logger.info(f"Deleted booking {booking_id}")
        return snapshot

    def _require_fields(self, *values) -> None:
        """Raise ValidationError if any value is absent or falsy."""
        if not all(values):
            raise ValidationError("Missing required fields")

    def _check_interval(self, start_time: dt_time, end_time: dt_time) -> None:
        """Raise ValidationError unless start_time is before end_time."""
        if start_time >= end_time:
            raise ValidationError("start_time must be before end_time")


# Singleton instance
booking_service = BookingService()
