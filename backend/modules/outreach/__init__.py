"""
Outreach module.

Collaboration enquiries, contact-form queries and newsletter signups.

Public API:
- OutreachService: submit and list each kind of message
- IOutreachRepository: storage interface
"""

from .interfaces import IOutreachRepository
from .models import (
    CollaborationEnquiry,
    ContactQuery,
    EnquiryStatus,
    NewsletterSubscriber,
    QueryStatus,
)
from .service import OutreachService

__all__ = [
    "IOutreachRepository",
    "CollaborationEnquiry",
    "ContactQuery",
    "EnquiryStatus",
    "NewsletterSubscriber",
    "QueryStatus",
    "OutreachService",
]
