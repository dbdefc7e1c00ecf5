"""
Notification module data models.
"""

from pydantic import BaseModel, EmailStr


class OutgoingEmail(BaseModel):
    """A rendered email ready for delivery."""

    to: EmailStr
    subject: str
    html: str

    model_config = {"frozen": True}
