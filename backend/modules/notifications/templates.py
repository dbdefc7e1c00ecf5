"""
Transactional email templates.

Each function renders one message. Display names are escaped because they
come straight from user input.
"""

from html import escape
from typing import Optional

from .models import OutgoingEmail

BRAND = "NoDevBuild"


def _greeting_name(display_name: Optional[str]) -> str:
    return escape(display_name) if display_name else "there"


def welcome_email(
    email: str,
    display_name: Optional[str],
    verification_link: Optional[str] = None,
) -> OutgoingEmail:
    verify_block = ""
    if verification_link:
        verify_block = (
            "<p>Please confirm your email address to activate your account:</p>"
            f'<p><a href="{escape(verification_link, quote=True)}">Verify my email</a></p>'
        )

    return OutgoingEmail(
        to=email,
        subject=f"Welcome to {BRAND}!",
        html=f"""
        <h1>Welcome to {BRAND}, {_greeting_name(display_name)}!</h1>
        <p>Thank you for joining {BRAND}. We're excited to have you on board!</p>
        {verify_block}
        <p>If you have any questions, feel free to reach out to our support team.</p>
        <p>Best regards,<br>The {BRAND} Team</p>
        """,
    )


def password_reset_email(email: str, reset_link: str) -> OutgoingEmail:
    return OutgoingEmail(
        to=email,
        subject=f"Reset your {BRAND} password",
        html=f"""
        <h1>Password reset requested</h1>
        <p>We received a request to reset the password for your {BRAND} account.</p>
        <p><a href="{escape(reset_link, quote=True)}">Choose a new password</a></p>
        <p>If you didn't ask for this, you can safely ignore this email.</p>
        <p>Best regards,<br>The {BRAND} Team</p>
        """,
    )


def login_notification_email(email: str, display_name: Optional[str]) -> OutgoingEmail:
    return OutgoingEmail(
        to=email,
        subject=f"New Login to Your {BRAND} Account",
        html=f"""
        <h1>New Login Detected</h1>
        <p>Hello {_greeting_name(display_name)},</p>
        <p>We detected a new login to your {BRAND} account.</p>
        <p>If this was you, you can safely ignore this email.</p>
        <p>If this wasn't you, please contact our support team immediately.</p>
        <p>Best regards,<br>The {BRAND} Team</p>
        """,
    )
