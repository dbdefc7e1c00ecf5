"""Tests for the SMTP email dispatcher."""

import smtplib
from unittest.mock import MagicMock, patch

import pytest

from shared.exceptions import ExternalServiceError
from modules.notifications.models import OutgoingEmail
from modules.notifications.service import SmtpEmailDispatcher

MESSAGE = OutgoingEmail(to="asha@example.com", subject="Hello", html="<p>Hi</p>")


@pytest.fixture
def dispatcher() -> SmtpEmailDispatcher:
    return SmtpEmailDispatcher(
        host="smtp.example.com",
        port=587,
        username="mailer@example.com",
        password="app-password",
        use_tls=True,
        sender="NoDevBuild <mailer@example.com>",
    )


@pytest.fixture
def mock_smtp():
    with patch("modules.notifications.service.smtplib.SMTP") as smtp_class:
        yield smtp_class.return_value.__enter__.return_value, smtp_class


class TestSend:
    @pytest.mark.asyncio
    async def test_sends_over_starttls_with_login(self, dispatcher, mock_smtp):
        smtp, smtp_class = mock_smtp

        await dispatcher.send(MESSAGE)

        smtp_class.assert_called_once_with("smtp.example.com", 587, timeout=10.0)
        smtp.starttls.assert_called_once()
        smtp.login.assert_called_once_with("mailer@example.com", "app-password")
        sent = smtp.send_message.call_args.args[0]
        assert sent["To"] == "asha@example.com"
        assert sent["Subject"] == "Hello"
        assert sent["From"] == "NoDevBuild <mailer@example.com>"

    @pytest.mark.asyncio
    async def test_skips_tls_and_login_when_disabled(self, mock_smtp):
        smtp, _ = mock_smtp
        dispatcher = SmtpEmailDispatcher(host="localhost", port=25, use_tls=False, sender="a@example.com")

        await dispatcher.send(MESSAGE)

        smtp.starttls.assert_not_called()
        smtp.login.assert_not_called()
        smtp.send_message.assert_called_once()

    @pytest.mark.asyncio
    async def test_delivery_failure_raises(self, dispatcher, mock_smtp):
        smtp, _ = mock_smtp
        smtp.send_message.side_effect = smtplib.SMTPRecipientsRefused({})

        with pytest.raises(ExternalServiceError) as exc_info:
            await dispatcher.send(MESSAGE)

        assert exc_info.value.code == "EMAIL_DELIVERY_FAILED"
        assert exc_info.value.service == "smtp"

    @pytest.mark.asyncio
    async def test_unconfigured_raises(self):
        with pytest.raises(ExternalServiceError) as exc_info:
            await SmtpEmailDispatcher(host="").send(MESSAGE)
        assert exc_info.value.code == "EMAIL_NOT_CONFIGURED"


class TestDispatch:
    @pytest.mark.asyncio
    async def test_returns_true_on_success(self, dispatcher, mock_smtp):
        assert await dispatcher.dispatch(MESSAGE) is True

    @pytest.mark.asyncio
    async def test_swallows_delivery_failure(self, dispatcher, mock_smtp):
        smtp, _ = mock_smtp
        smtp.send_message.side_effect = OSError("connection reset")

        assert await dispatcher.dispatch(MESSAGE) is False

    @pytest.mark.asyncio
    async def test_skips_when_unconfigured(self):
        with patch("modules.notifications.service.smtplib.SMTP") as smtp_class:
            assert await SmtpEmailDispatcher(host="").dispatch(MESSAGE) is False
            smtp_class.assert_not_called()

    def test_sender_defaults_to_username(self):
        dispatcher = SmtpEmailDispatcher(host="smtp.example.com", username="mailer@example.com")
        assert dispatcher.configured is True
