"""Password hashing and signed session tokens."""
import asyncio
import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt
from passlib.context import CryptContext

from court_booking.core.config import settings
from court_booking.core.exceptions import AuthError, InvalidTokenError

logger = logging.getLogger(__name__)

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)


async def hash_password(password: str) -> str:
    """Hash a password with bcrypt without blocking the event loop."""
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, pwd_context.hash, password)


async def verify_password(plain_password: str, hashed_password: Optional[str]) -> bool:
    """
    Check a plain password against a stored bcrypt hash.

    Accounts provisioned through external auth have no stored hash and
    never match.
    """
    if not hashed_password:
        return False

    loop = asyncio.get_running_loop()
    try:
        return bool(
            await loop.run_in_executor(
                None, pwd_context.verify, plain_password, hashed_password
            )
        )
    except ValueError as e:
        logger.error(f"Error verifying password: {e}")
        return False


def create_access_token(claims: Dict[str, Any], expires_in: Optional[int] = None) -> str:
    """
    Issue a signed token carrying the given claims.

    Args:
        claims: Identity claims to embed (id, name, email, role)
        expires_in: Lifetime in seconds, defaults to ACCESS_TOKEN_EXPIRE_SECONDS

    Returns:
        Encoded JWT
    """
    lifetime = expires_in if expires_in is not None else settings.ACCESS_TOKEN_EXPIRE_SECONDS
    now = datetime.now(timezone.utc)
    payload = dict(claims)
    payload["iat"] = now
    payload["exp"] = now + timedelta(seconds=lifetime)
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> Dict[str, Any]:
    """
    Verify signature and expiry and return the claims.

    Raises:
        InvalidTokenError: If the token is malformed, tampered with or expired
    """
    try:
        return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    except jwt.PyJWTError as e:
        logger.info(f"Rejected token: {e}")
        raise InvalidTokenError()


def extract_token(authorization: Optional[str]) -> str:
    """
    Pull the raw token out of an Authorization header value.

    Both ``Bearer <token>`` and a bare token are accepted.

    Raises:
        AuthError: If no token was supplied
    """
    if not authorization or not authorization.strip():
        raise AuthError()

    value = authorization.strip()
    scheme, _, credentials = value.partition(" ")
    if credentials and scheme.lower() == "bearer":
        value = credentials.strip()

    if not value:
        raise AuthError()
    return value
