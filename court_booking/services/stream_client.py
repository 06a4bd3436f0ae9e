"""Stream Chat token client.

Chat itself runs on Stream; this service only mints the user tokens the
frontend needs to connect.
"""
import logging
from typing import Optional
from stream_chat import StreamChat

from court_booking.core.config import settings
from court_booking.core.exceptions import ValidationError

logger = logging.getLogger(__name__)


class StreamTokenClient:
    """Client for issuing Stream Chat user tokens."""

    def __init__(self):
        """Initialize the client."""
        self._client: Optional[StreamChat] = None

    @property
    def client(self) -> StreamChat:
        """Server SDK client, created on first use."""
        if self._client is None:
            self._client = StreamChat(
                api_key=settings.STREAM_API_KEY,
                api_secret=settings.STREAM_API_SECRET,
            )
        return self._client

    def get_token(self, user_id: Optional[str]) -> str:
        """
        Create a chat token for a user.

        Args:
            user_id: ID the chat user is keyed by

        Returns:
            Token string

        Raises:
            ValidationError: user_id is missing
        """
        if not user_id:
            raise ValidationError("Missing userId")

        logger.debug(f"Issuing chat token for user {user_id}")
        return self.client.create_token(user_id)


# Singleton instance
stream_token_client = StreamTokenClient()
