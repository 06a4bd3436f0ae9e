"""Court endpoints."""
import logging
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from court_booking.core.database import get_db
from court_booking.models.court import Court
from court_booking.schemas.court import CourtInDB, CourtListResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/courts", tags=["courts"])


@router.get("", response_model=CourtListResponse)
async def list_courts(
    sport_type: Optional[str] = Query(default=None, description="Only courts for this sport"),
    db: AsyncSession = Depends(get_db),
):
    """
    List courts ordered by court number.

    Args:
        sport_type: Optional sport filter, e.g. "badminton"
        db: Database session

    Returns:
        Courts
    """
    query = select(Court)
    if sport_type:
        query = query.where(Court.sport_type == sport_type)
    query = query.order_by(Court.court_no.asc(), Court.id.asc())

    try:
        result = await db.execute(query)
    except SQLAlchemyError:
        logger.exception("Error fetching courts")
        raise HTTPException(status_code=500, detail="Internal server error")

    courts = result.scalars().all()
    return {"courts": [CourtInDB.model_validate(c) for c in courts]}
