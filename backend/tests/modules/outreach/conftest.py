"""
Pytest fixtures for outreach module tests.
"""

import itertools
from typing import Any, Optional

import pytest

from modules.outreach.interfaces import IOutreachRepository
from modules.outreach.models import CollaborationEnquiry, ContactQuery, NewsletterSubscriber
from modules.outreach.service import OutreachService


class InMemoryOutreachRepository(IOutreachRepository):
    def __init__(self):
        self.enquiries: list[CollaborationEnquiry] = []
        self.queries: list[ContactQuery] = []
        self.subscribers: list[NewsletterSubscriber] = []
        self._ids = itertools.count(1)

    def _id(self) -> str:
        return f"row-{next(self._ids)}"

    def add_enquiry(self, data: dict[str, Any]) -> CollaborationEnquiry:
        enquiry = CollaborationEnquiry(id=self._id(), **data)
        self.enquiries.append(enquiry)
        return enquiry

    def list_enquiries(self) -> list[CollaborationEnquiry]:
        return list(reversed(self.enquiries))

    def add_contact_query(self, data: dict[str, Any]) -> ContactQuery:
        query = ContactQuery(id=self._id(), **data)
        self.queries.append(query)
        return query

    def list_contact_queries(self) -> list[ContactQuery]:
        return list(reversed(self.queries))

    def find_subscriber(self, email: str) -> Optional[NewsletterSubscriber]:
        return next((s for s in self.subscribers if s.email == email), None)

    def add_subscriber(self, data: dict[str, Any]) -> NewsletterSubscriber:
        subscriber = NewsletterSubscriber(id=self._id(), **data)
        self.subscribers.append(subscriber)
        return subscriber

    def list_subscribers(self) -> list[NewsletterSubscriber]:
        return list(reversed(self.subscribers))


@pytest.fixture
def repository() -> InMemoryOutreachRepository:
    return InMemoryOutreachRepository()


@pytest.fixture
def outreach(repository) -> OutreachService:
    return OutreachService(repository)
