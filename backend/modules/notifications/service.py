"""
SMTP email dispatcher.

smtplib is blocking, so each send runs in a worker thread to keep the
event loop free.
"""

import asyncio
import logging
import smtplib
from email.message import EmailMessage

from shared.exceptions import ExternalServiceError

from .interfaces import INotificationDispatcher
from .models import OutgoingEmail

logger = logging.getLogger(__name__)


class SmtpEmailDispatcher(INotificationDispatcher):
    """Delivers OutgoingEmail through an SMTP relay."""

    def __init__(
        self,
        host: str,
        port: int = 587,
        username: str = "",
        password: str = "",
        use_tls: bool = True,
        sender: str = "",
        timeout: float = 10.0,
    ):
        self._host = host
        self._port = port
        self._username = username
        self._password = password
        self._use_tls = use_tls
        self._sender = sender or username
        self._timeout = timeout

    @property
    def configured(self) -> bool:
        return bool(self._host and self._sender)

    def _build(self, message: OutgoingEmail) -> EmailMessage:
        mail = EmailMessage()
        mail["From"] = self._sender
        mail["To"] = message.to
        mail["Subject"] = message.subject
        mail.set_content("This message requires an HTML-capable email client.")
        mail.add_alternative(message.html, subtype="html")
        return mail

    def _send_blocking(self, mail: EmailMessage) -> None:
        with smtplib.SMTP(self._host, self._port, timeout=self._timeout) as smtp:
            if self._use_tls:
                smtp.starttls()
            if self._username:
                smtp.login(self._username, self._password)
            smtp.send_message(mail)

    async def send(self, message: OutgoingEmail) -> None:
        if not self.configured:
            raise ExternalServiceError(
                "SMTP relay is not configured",
                service="smtp",
                code="EMAIL_NOT_CONFIGURED",
            )

        try:
            await asyncio.to_thread(self._send_blocking, self._build(message))
        except (smtplib.SMTPException, OSError) as e:
            raise ExternalServiceError(
                f"Failed to send email: {e}",
                service="smtp",
                code="EMAIL_DELIVERY_FAILED",
                details={"subject": message.subject},
            )

    async def dispatch(self, message: OutgoingEmail) -> bool:
        if not self.configured:
            logger.warning("SMTP not configured; skipping email %r to %s", message.subject, message.to)
            return False

        try:
            await self.send(message)
        except ExternalServiceError as e:
            logger.error("Error sending email %r to %s: %s", message.subject, message.to, e.message)
            return False

        logger.info("Email %r sent to %s", message.subject, message.to)
        return True
