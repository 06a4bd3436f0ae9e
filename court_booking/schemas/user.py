"""User and auth schemas."""
from pydantic import BaseModel, ConfigDict
from typing import Optional


class SignupRequest(BaseModel):
    """Schema for registering with email and password."""

    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class LoginRequest(BaseModel):
    """Schema for logging in."""

    email: Optional[str] = None
    password: Optional[str] = None


class TokenResponse(BaseModel):
    """Schema for login responses."""

    auth: bool
    token: Optional[str] = None


class ProfileResponse(BaseModel):
    """Schema for the identity carried by a session token."""

    name: Optional[str] = None
    email: str
    role: Optional[str] = None


class UserSync(BaseModel):
    """Schema for provisioning a user from an external auth provider."""

    id: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None

    model_config = ConfigDict(coerce_numbers_to_str=True)


class UserInDB(BaseModel):
    """Schema for user from database. The password hash is never exposed."""

    id: str
    name: Optional[str] = None
    email: str
    role: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class UserSyncResponse(BaseModel):
    """Schema for user sync responses."""

    message: str
    user: UserInDB


class MessageResponse(BaseModel):
    """Schema for plain acknowledgement responses."""

    message: str
