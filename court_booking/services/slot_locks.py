"""Per-slot locking around the overlap check and the write that follows it.

The overlap check and the insert are separate statements, so two requests
for the same court and date could both pass the check before either writes.
Holding a lock keyed on (court, date) until the transaction commits closes
that window. Within one process an asyncio lock does it; on PostgreSQL a
transaction-scoped advisory lock extends it across worker processes.
"""
import asyncio
import logging
import weakref
from contextlib import asynccontextmanager
from datetime import date
from typing import AsyncIterator, Tuple
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

logger = logging.getLogger(__name__)


class SlotLockRegistry:
    """Hands out one lock per (court, date) key."""

    def __init__(self):
        """Initialize the registry."""
        # Entries disappear once no task holds or waits on the lock
        self._locks: "weakref.WeakValueDictionary[Tuple[int, date], asyncio.Lock]" = (
            weakref.WeakValueDictionary()
        )

    def _lock_for(self, court_id: int, booking_date: date) -> asyncio.Lock:
        key = (court_id, booking_date)
        lock = self._locks.get(key)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[key] = lock
        return lock

    @asynccontextmanager
    async def hold(
        self, db: AsyncSession, court_id: int, booking_date: date
    ) -> AsyncIterator[None]:
        """
        Hold the slot lock for a court and date.

        The caller must commit inside the block; the advisory lock is
        released by PostgreSQL when that transaction ends.

        Args:
            db: Database session the check and write run in
            court_id: Court ID
            booking_date: Date being booked
        """
        lock = self._lock_for(court_id, booking_date)
        async with lock:
            if db.get_bind().dialect.name == "postgresql":
                await db.execute(
                    text("SELECT pg_advisory_xact_lock(:court_id, :day)"),
                    {"court_id": int(court_id), "day": booking_date.toordinal()},
                )
            yield

    def __len__(self) -> int:
        return len(self._locks)


# Singleton instance
slot_locks = SlotLockRegistry()
