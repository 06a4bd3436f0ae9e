"""Service-level errors and the HTTP status each one maps to."""


class ServiceError(Exception):
    """Base class for errors raised by the service layer."""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(ServiceError):
    """Missing or malformed input."""

    status_code = 400
    default_message = "Missing required fields"


class NotFoundError(ServiceError):
    """A referenced entity does not exist."""

    status_code = 404

    MESSAGES = {
        "user": "User does not exist.",
        "court": "Court not found",
        "booking": "Booking not found",
    }

    def __init__(self, entity: str, message: str = None):
        self.entity = entity
        super().__init__(message or self.MESSAGES.get(entity, f"{entity.capitalize()} not found"))


class ConflictError(ServiceError):
    """The requested slot overlaps an existing booking.

    Reported as 400 rather than 409; existing clients check for 400.
    """

    status_code = 400
    default_message = "Court already booked for this time slot."


class AuthError(ServiceError):
    """Missing or rejected credentials."""

    status_code = 401
    default_message = "Access Denied"


class InvalidTokenError(AuthError):
    """A token was supplied but failed signature or expiry checks."""

    status_code = 400
    default_message = "Invalid Token"


class InternalError(ServiceError):
    """Unexpected failure; the message shown to clients is always generic."""
