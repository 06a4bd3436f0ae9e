"""Read paths over bookings."""
import logging
from typing import List, Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from court_booking.models.booking import Booking
from court_booking.models.court import Court
from court_booking.schemas.booking import BookingListItem, UserBooking

logger = logging.getLogger(__name__)


class BookingQueryService:
    """Service for listing bookings."""

    async def list_bookings(
        self,
        db: AsyncSession,
        user_id: Optional[str] = None,
        court_id: Optional[int] = None,
    ) -> List[BookingListItem]:
        """
        List bookings, optionally filtered by user or by court.

        The filters are exclusive: when both are given only user_id is
        applied.

        Args:
            db: Database session
            user_id: Only return this user's bookings
            court_id: Only return bookings on this court

        Returns:
            Bookings ordered by date ascending
        """
        query = select(Booking)

        if user_id:
            query = query.where(Booking.user_id == user_id)
        elif court_id:
            query = query.where(Booking.court_id == court_id)

        query = query.order_by(Booking.booking_date.asc(), Booking.start_time.asc(), Booking.id.asc())

        result = await db.execute(query)
        bookings = result.scalars().all()

        return [
            BookingListItem(
                id=b.id,
                user_id=b.user_id,
                court_id=b.court_id,
                booking_date=b.booking_date.strftime("%Y-%m-%d"),
                start_time=b.start_time,
                end_time=b.end_time,
            )
            for b in bookings
        ]

    async def bookings_for_user(self, db: AsyncSession, user_id: str) -> List[UserBooking]:
        """
        Get one user's bookings with the sport type and number of each court.

        Args:
            db: Database session
            user_id: User ID

        Returns:
            Bookings ordered by date descending, then start time ascending
        """
        logger.info(f"Fetching bookings for user {user_id}")

        result = await db.execute(
            select(
                Booking.id,
                Booking.booking_date,
                Booking.start_time,
                Booking.end_time,
                Court.sport_type,
                Court.court_no,
            )
            .join(Court, Booking.court_id == Court.id)
            .where(Booking.user_id == user_id)
            .order_by(Booking.booking_date.desc(), Booking.start_time.asc())
        )

        return [UserBooking(**row._mapping) for row in result.all()]


# Singleton instance
booking_query_service = BookingQueryService()
