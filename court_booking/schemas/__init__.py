"""API schemas."""
from court_booking.schemas.booking import (
    BookingCreate,
    BookingUpdate,
    BookingInDB,
    BookingListItem,
    BookingUpdated,
    UserBooking,
    BookingResponse,
    BookingUpdateResponse,
    BookingListResponse,
)
from court_booking.schemas.court import (
    CourtInDB,
    CourtListResponse,
)
from court_booking.schemas.user import (
    SignupRequest,
    LoginRequest,
    TokenResponse,
    ProfileResponse,
    UserSync,
    UserInDB,
    UserSyncResponse,
    MessageResponse,
)

__all__ = [
    "BookingCreate",
    "BookingUpdate",
    "BookingInDB",
    "BookingListItem",
    "BookingUpdated",
    "UserBooking",
    "BookingResponse",
    "BookingUpdateResponse",
    "BookingListResponse",
    "CourtInDB",
    "CourtListResponse",
    "SignupRequest",
    "LoginRequest",
    "TokenResponse",
    "ProfileResponse",
    "UserSync",
    "UserInDB",
    "UserSyncResponse",
    "MessageResponse",
]
