"""Stream Chat token endpoint."""
from typing import Optional
from fastapi import APIRouter, HTTPException, Query

from court_booking.core.exceptions import ServiceError
from court_booking.services.stream_client import stream_token_client

router = APIRouter(tags=["chat"])


@router.get("/stream-token")
async def get_stream_token(
    user_id: Optional[str] = Query(default=None, alias="userId"),
):
    """
    Issue a Stream Chat token for a user.

    Args:
        user_id: Chat user ID, passed as ``userId``
    """
    try:
        token = stream_token_client.get_token(user_id)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)

    return {"token": token}
