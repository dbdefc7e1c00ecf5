"""
Outreach module data models.

Collaboration enquiries, contact-form queries and newsletter signups.
"""

from datetime import datetime
from enum import Enum

from pydantic import EmailStr, Field

from shared.models import CamelModel


class EnquiryStatus(str, Enum):
    PENDING = "pending"


class QueryStatus(str, Enum):
    NEW = "new"


class CollaborationEnquiry(CamelModel):
    id: str
    email: EmailStr
    user_id: str
    enquiry_date: datetime
    status: EnquiryStatus = EnquiryStatus.PENDING

    model_config = {"extra": "ignore"}


class ContactQuery(CamelModel):
    id: str
    name: str
    email: EmailStr
    subject: str
    message: str
    status: QueryStatus = QueryStatus.NEW
    created_at: datetime

    model_config = {"extra": "ignore"}


class NewsletterSubscriber(CamelModel):
    id: str
    email: EmailStr
    subscribed_at: datetime

    model_config = {"extra": "ignore"}


# -----------------------------------------------------------------------------
# API request bodies
# -----------------------------------------------------------------------------


class EnquiryRequest(CamelModel):
    email: EmailStr


class ContactRequest(CamelModel):
    name: str = Field(..., min_length=1, max_length=200)
    email: EmailStr
    subject: str = Field(..., min_length=1, max_length=200)
    message: str = Field(..., min_length=1, max_length=5000)


class SubscribeRequest(CamelModel):
    email: EmailStr


class SubscribeResponse(CamelModel):
    subscriber: NewsletterSubscriber
    already_subscribed: bool = False
