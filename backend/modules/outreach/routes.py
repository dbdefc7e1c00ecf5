"""
Outreach endpoints.

Three routers, mounted under /api/collaboration, /api/contact and
/api/newsletter. Submissions are open (enquiries need a signed-in user);
listings are admin-only.
"""

from fastapi import APIRouter, Depends, status

from api.middleware.auth import get_admin_user, get_current_user
from api.dependencies import get_outreach_service
from shared.models import CallerIdentity

from .service import OutreachService
from .models import (
    CollaborationEnquiry,
    ContactQuery,
    ContactRequest,
    EnquiryRequest,
    NewsletterSubscriber,
    SubscribeRequest,
    SubscribeResponse,
)

collaboration_router = APIRouter()
contact_router = APIRouter()
newsletter_router = APIRouter()


# =============================================================================
# Collaboration
# =============================================================================


@collaboration_router.post(
    "/enquiries",
    response_model=CollaborationEnquiry,
    status_code=status.HTTP_201_CREATED,
)
async def submit_enquiry(
    request: EnquiryRequest,
    user: CallerIdentity = Depends(get_current_user),
    outreach: OutreachService = Depends(get_outreach_service),
) -> CollaborationEnquiry:
    return await outreach.submit_enquiry(user.id, request.email)


@collaboration_router.get("/enquiries", response_model=list[CollaborationEnquiry])
async def list_enquiries(
    admin: CallerIdentity = Depends(get_admin_user),
    outreach: OutreachService = Depends(get_outreach_service),
) -> list[CollaborationEnquiry]:
    return await outreach.list_enquiries()


# =============================================================================
# Contact
# =============================================================================


@contact_router.post("/submit", response_model=ContactQuery, status_code=status.HTTP_201_CREATED)
async def submit_contact_query(
    request: ContactRequest,
    outreach: OutreachService = Depends(get_outreach_service),
) -> ContactQuery:
    return await outreach.submit_contact_query(request)


@contact_router.get("/queries", response_model=list[ContactQuery])
async def list_contact_queries(
    admin: CallerIdentity = Depends(get_admin_user),
    outreach: OutreachService = Depends(get_outreach_service),
) -> list[ContactQuery]:
    return await outreach.list_contact_queries()


# =============================================================================
# Newsletter
# =============================================================================


@newsletter_router.post(
    "/subscribe",
    response_model=SubscribeResponse,
    status_code=status.HTTP_201_CREATED,
)
async def subscribe(
    request: SubscribeRequest,
    outreach: OutreachService = Depends(get_outreach_service),
) -> SubscribeResponse:
    subscriber, already_subscribed = await outreach.subscribe(request.email)
    return SubscribeResponse(subscriber=subscriber, already_subscribed=already_subscribed)


@newsletter_router.get("/subscribers", response_model=list[NewsletterSubscriber])
async def list_subscribers(
    admin: CallerIdentity = Depends(get_admin_user),
    outreach: OutreachService = Depends(get_outreach_service),
) -> list[NewsletterSubscriber]:
    return await outreach.list_subscribers()
