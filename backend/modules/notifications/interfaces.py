"""
Notification module interface.
"""

from typing import Protocol, runtime_checkable

from .models import OutgoingEmail


@runtime_checkable
class INotificationDispatcher(Protocol):
    """Sends transactional email."""

    async def send(self, message: OutgoingEmail) -> None:
        """
        Deliver a message.

        Raises:
            ExternalServiceError: If the relay refuses or cannot be reached
        """
        ...

    async def dispatch(self, message: OutgoingEmail) -> bool:
        """
        Fire-and-forget delivery: failures are logged, never raised.

        Returns:
            True if the message was handed to the relay
        """
        ...
