"""Signup, login and profile endpoints."""
import logging
from typing import Optional
from fastapi import APIRouter, Depends, Header, HTTPException
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from court_booking.core.database import get_db
from court_booking.core.exceptions import AuthError, ServiceError
from court_booking.schemas.user import (
    SignupRequest,
    LoginRequest,
    TokenResponse,
    ProfileResponse,
    MessageResponse,
)
from court_booking.services.auth_service import auth_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


@router.post("/signup", response_model=MessageResponse, status_code=201)
async def signup(
    request: SignupRequest,
    db: AsyncSession = Depends(get_db),
):
    """
    Register a new customer account.

    Args:
        request: Name, email and password
        db: Database session
    """
    try:
        await auth_service.signup(db, request)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except SQLAlchemyError:
        logger.exception("Error registering user")
        raise HTTPException(status_code=500, detail="Internal server error")

    return {"message": "User registered successfully"}


@router.post("/login", response_model=TokenResponse)
async def login(
    request: LoginRequest,
    db: AsyncSession = Depends(get_db),
):
    """
    Log in with email and password.

    Returns a token valid for 24 hours. A wrong password yields 401 with
    ``{"auth": false, "token": null}``.

    Args:
        request: Email and password
        db: Database session
    """
    try:
        token = await auth_service.login(db, request)
    except AuthError:
        return JSONResponse(status_code=401, content={"auth": False, "token": None})
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except SQLAlchemyError:
        logger.exception("Error logging in")
        raise HTTPException(status_code=500, detail="Internal server error")

    return {"auth": True, "token": token}


@router.get("/profile", response_model=ProfileResponse)
async def profile(authorization: Optional[str] = Header(default=None)):
    """
    Get the identity carried by the caller's token.

    The token is taken from the Authorization header, with or without a
    ``Bearer`` prefix. A missing token yields 401 and an invalid or expired
    one yields 400.
    """
    try:
        return auth_service.profile(authorization)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
