"""
Notifications module.

Renders and delivers transactional email (welcome, password reset,
login notification) over SMTP.

Public API:
- INotificationDispatcher: Interface for email delivery
- SmtpEmailDispatcher: SMTP implementation
- OutgoingEmail: Rendered message
- welcome_email, password_reset_email, login_notification_email: Templates
"""

from .interfaces import INotificationDispatcher
from .models import OutgoingEmail
from .service import SmtpEmailDispatcher
from .templates import login_notification_email, password_reset_email, welcome_email

__all__ = [
    "INotificationDispatcher",
    "OutgoingEmail",
    "SmtpEmailDispatcher",
    "login_notification_email",
    "password_reset_email",
    "welcome_email",
]
