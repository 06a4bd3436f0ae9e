"""Account registration, login and external-auth provisioning."""
import logging
import uuid
from typing import Any, Dict, Optional, Tuple
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from court_booking.core.exceptions import AuthError, ValidationError
from court_booking.core.security import (
    create_access_token,
    decode_access_token,
    extract_token,
    hash_password,
    verify_password,
)
from court_booking.models.user import User
from court_booking.schemas.user import LoginRequest, SignupRequest, UserSync

logger = logging.getLogger(__name__)

DEFAULT_ROLE = "customer"


class AuthService:
    """Service for user accounts and session tokens."""

    async def signup(self, db: AsyncSession, request: SignupRequest) -> User:
        """
        Register a user with an email and password.

        Args:
            db: Database session
            request: Name, email and password

        Returns:
            Created user

        Raises:
            ValidationError: A field is missing or the email is taken
        """
        if not request.name or not request.email or not request.password:
            raise ValidationError("All fields are required")

        result = await db.execute(select(User.id).where(User.email == request.email))
        if result.scalar_one_or_none() is not None:
            raise ValidationError("Email already registered.")

        user = User(
            id=uuid.uuid4().hex,
            name=request.name,
            email=request.email,
            password=await hash_password(request.password),
            role=DEFAULT_ROLE,
        )
        db.add(user)
        await db.commit()

        logger.info(f"Registered user {user.id}")
        return user

    async def login(self, db: AsyncSession, request: LoginRequest) -> str:
        """
        Check credentials and issue a session token.

        Args:
            db: Database session
            request: Email and password

        Returns:
            Signed token with the user's id, name, email and role

        Raises:
            ValidationError: No account uses that email
            AuthError: The password does not match
        """
        result = await db.execute(select(User).where(User.email == request.email))
        user = result.scalar_one_or_none()

        if not user:
            raise ValidationError("Email or password incorrect")

        if not await verify_password(request.password or "", user.password):
            logger.info(f"Failed login for user {user.id}")
            raise AuthError("Email or password incorrect")

        return create_access_token(
            {"id": user.id, "name": user.name, "email": user.email, "role": user.role}
        )

    def profile(self, authorization: Optional[str]) -> Dict[str, Any]:
        """
        Read the identity claims from a verified token.

        Raises:
            AuthError: No token was supplied
            InvalidTokenError: The token failed verification
        """
        claims = decode_access_token(extract_token(authorization))
        return {
            "name": claims.get("name"),
            "email": claims.get("email"),
            "role": claims.get("role"),
        }

    async def sync_user(self, db: AsyncSession, request: UserSync) -> Tuple[User, bool]:
        """
        Create a user provisioned by an external auth provider if not present.

        Args:
            db: Database session
            request: Provider uid, name and email

        Returns:
            The user and whether it was created by this call

        Raises:
            ValidationError: id or email is missing
        """
        if not request.id or not request.email:
            raise ValidationError("Missing required fields (id, email)")

        result = await db.execute(select(User).where(User.id == request.id))
        existing_user = result.scalar_one_or_none()

        if existing_user:
            return existing_user, False

        user = User(id=request.id, name=request.name, email=request.email, role=DEFAULT_ROLE)
        db.add(user)
        await db.commit()
        await db.refresh(user)

        logger.info(f"Provisioned external user {user.id}")
        return user, True


# Singleton instance
auth_service = AuthService()
