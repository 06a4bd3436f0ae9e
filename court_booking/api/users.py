"""User provisioning endpoints."""
import logging
from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from court_booking.core.database import get_db
from court_booking.core.exceptions import ServiceError
from court_booking.schemas.user import UserInDB, UserSync, UserSyncResponse
from court_booking.services.auth_service import auth_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", response_model=UserSyncResponse, status_code=201)
async def sync_user(
    request: UserSync,
    response: Response,
    db: AsyncSession = Depends(get_db),
):
    """
    Create a user signed in through an external auth provider.

    Returns 201 when the user is created and 200 when it already exists.

    Args:
        request: Provider uid, name and email
        response: Outgoing response, used to set the status code
        db: Database session
    """
    try:
        user, created = await auth_service.sync_user(db, request)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except SQLAlchemyError:
        logger.exception("Error adding user")
        raise HTTPException(status_code=500, detail="Internal server error")

    if not created:
        response.status_code = 200
        return {"message": "User already exists", "user": UserInDB.model_validate(user)}

    return {"message": "User added", "user": UserInDB.model_validate(user)}
