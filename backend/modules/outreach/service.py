"""
Outreach service: collaboration enquiries, contact queries, newsletter.

Repository calls are blocking Supabase requests and run in worker threads.
"""

import asyncio
import logging

from shared.repository import utc_now_iso

from .interfaces import IOutreachRepository
from .models import (
    CollaborationEnquiry,
    ContactQuery,
    ContactRequest,
    EnquiryStatus,
    NewsletterSubscriber,
    QueryStatus,
)

logger = logging.getLogger(__name__)


class OutreachService:
    """Stores inbound messages and signups and lists them for admins."""

    def __init__(self, repository: IOutreachRepository):
        self._repository = repository

    async def submit_enquiry(self, user_id: str, email: str) -> CollaborationEnquiry:
        enquiry = await asyncio.to_thread(self._repository.add_enquiry, {
            "email": email,
            "user_id": user_id,
            "enquiry_date": utc_now_iso(),
            "status": EnquiryStatus.PENDING.value,
        })
        logger.info("Collaboration enquiry %s from user %s", enquiry.id, user_id)
        return enquiry

    async def list_enquiries(self) -> list[CollaborationEnquiry]:
        return await asyncio.to_thread(self._repository.list_enquiries)

    async def submit_contact_query(self, request: ContactRequest) -> ContactQuery:
        query = await asyncio.to_thread(self._repository.add_contact_query, {
            **request.model_dump(),
            "created_at": utc_now_iso(),
            "status": QueryStatus.NEW.value,
        })
        logger.info("Contact query %s received", query.id)
        return query

    async def list_contact_queries(self) -> list[ContactQuery]:
        return await asyncio.to_thread(self._repository.list_contact_queries)

    async def subscribe(self, email: str) -> tuple[NewsletterSubscriber, bool]:
        """
        Add an address to the newsletter.

        Returns:
            Tuple of (subscriber, already_subscribed). Subscribing twice
            returns the existing row instead of creating a duplicate.
        """
        email = email.lower()
        existing = await asyncio.to_thread(self._repository.find_subscriber, email)
        if existing is not None:
            return existing, True

        subscriber = await asyncio.to_thread(self._repository.add_subscriber, {
            "email": email,
            "subscribed_at": utc_now_iso(),
        })
        return subscriber, False

    async def list_subscribers(self) -> list[NewsletterSubscriber]:
        return await asyncio.to_thread(self._repository.list_subscribers)
