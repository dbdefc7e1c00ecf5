"""
Outreach module interfaces.
"""

from typing import Any, Optional, Protocol, runtime_checkable

from .models import CollaborationEnquiry, ContactQuery, NewsletterSubscriber


@runtime_checkable
class IOutreachRepository(Protocol):
    """Persistence for the three outreach tables."""

    def add_enquiry(self, data: dict[str, Any]) -> CollaborationEnquiry:
        ...

    def list_enquiries(self) -> list[CollaborationEnquiry]:
        ...

    def add_contact_query(self, data: dict[str, Any]) -> ContactQuery:
        ...

    def list_contact_queries(self) -> list[ContactQuery]:
        ...

    def find_subscriber(self, email: str) -> Optional[NewsletterSubscriber]:
        ...

    def add_subscriber(self, data: dict[str, Any]) -> NewsletterSubscriber:
        ...

    def list_subscribers(self) -> list[NewsletterSubscriber]:
        ...
