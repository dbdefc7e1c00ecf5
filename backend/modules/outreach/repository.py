"""
Outreach repository.

Tables:
- collaboration_enquiries
- contact_queries
- newsletter_subscribers
"""

from typing import Any, Optional

from shared.repository import BaseRepository

from .interfaces import IOutreachRepository
from .models import CollaborationEnquiry, ContactQuery, NewsletterSubscriber


class OutreachRepository(BaseRepository[ContactQuery], IOutreachRepository):
    """Supabase-backed storage for enquiries, queries and subscribers."""

    def add_enquiry(self, data: dict[str, Any]) -> CollaborationEnquiry:
        result = self._db.table("collaboration_enquiries").insert(data).execute()
        return CollaborationEnquiry(**result.data[0])

    def list_enquiries(self) -> list[CollaborationEnquiry]:
        result = (
            self._db.table("collaboration_enquiries")
            .select("*")
            .order("enquiry_date", desc=True)
            .execute()
        )
        return [CollaborationEnquiry(**row) for row in result.data]

    def add_contact_query(self, data: dict[str, Any]) -> ContactQuery:
        result = self._db.table("contact_queries").insert(data).execute()
        return ContactQuery(**result.data[0])

    def list_contact_queries(self) -> list[ContactQuery]:
        result = (
            self._db.table("contact_queries")
            .select("*")
            .order("created_at", desc=True)
            .execute()
        )
        return [ContactQuery(**row) for row in result.data]

    def find_subscriber(self, email: str) -> Optional[NewsletterSubscriber]:
        result = (
            self._db.table("newsletter_subscribers")
            .select("*")
            .eq("email", email)
            .limit(1)
            .execute()
        )
        if not result.data:
            return None
        return NewsletterSubscriber(**result.data[0])

    def add_subscriber(self, data: dict[str, Any]) -> NewsletterSubscriber:
        result = self._db.table("newsletter_subscribers").insert(data).execute()
        return NewsletterSubscriber(**result.data[0])

    def list_subscribers(self) -> list[NewsletterSubscriber]:
        result = (
            self._db.table("newsletter_subscribers")
            .select("*")
            .order("subscribed_at", desc=True)
            .execute()
        )
        return [NewsletterSubscriber(**row) for row in result.data]
