"""Overlap detection for court bookings.

Intervals are half-open: a booking ending at 10:00 and another starting at
10:00 on the same court do not conflict.
"""
import logging
from typing import List, Optional
from datetime import date, time as dt_time
from sqlalchemy import select, and_, or_, not_
from sqlalchemy.ext.asyncio import AsyncSession

from court_booking.models.booking import Booking

logger = logging.getLogger(__name__)


def slots_overlap(
    existing_start: dt_time,
    existing_end: dt_time,
    start: dt_time,
    end: dt_time,
) -> bool:
    """
    Check whether two [start, end) intervals on the same day intersect.

    Args:
        existing_start: Start of the booked interval
        existing_end: End of the booked interval
        start: Start of the candidate interval
        end: End of the candidate interval

    Returns:
        True if the intervals intersect, False otherwise
    """
    return not (existing_end <= start or existing_start >= end)


class OverlapDetector:
    """Finds bookings that conflict with a candidate slot."""

    async def find_conflicts(
        self,
        db: AsyncSession,
        court_id: int,
        booking_date: date,
        start_time: dt_time,
        end_time: dt_time,
        exclude_booking_id: Optional[int] = None,
    ) -> List[Booking]:
        """
        Find bookings on the same court and date whose interval intersects
        [start_time, end_time).

        Args:
            db: Database session
            court_id: Court ID
            booking_date: Date of the candidate slot
            start_time: Candidate start
            end_time: Candidate end
            exclude_booking_id: Booking to ignore, used when moving a booking

        Returns:
            Conflicting bookings ordered by start time
        """
        conditions = [
            Booking.court_id == court_id,
            Booking.booking_date == booking_date,
            not_(
                or_(
                    Booking.end_time <= start_time,
                    Booking.start_time >= end_time,
                )
            ),
        ]
        if exclude_booking_id is not None:
            conditions.append(Booking.id != exclude_booking_id)

        result = await db.execute(
            select(Booking).where(and_(*conditions)).order_by(Booking.start_time)
        )
        return list(result.scalars().all())

    async def has_conflict(
        self,
        db: AsyncSession,
        court_id: int,
        booking_date: date,
        start_time: dt_time,
        end_time: dt_time,
        exclude_booking_id: Optional[int] = None,
    ) -> bool:
        """Return True if any booking conflicts with the candidate slot."""
        conflicts = await self.find_conflicts(
            db, court_id, booking_date, start_time, end_time, exclude_booking_id
        )
        if conflicts:
            logger.debug(
                f"Slot {booking_date} {start_time}-{end_time} on court {court_id} "
                f"conflicts with booking(s) {[b.id for b in conflicts]}"
            )
        return bool(conflicts)


# Singleton instance
overlap_detector = OverlapDetector()
