"""Tests for collaboration, contact and newsletter endpoints."""

import pytest

from api.dependencies import get_outreach_service
from modules.outreach.service import OutreachService

from tests.modules.outreach.conftest import InMemoryOutreachRepository


@pytest.fixture
def outreach_app(app):
    outreach = OutreachService(InMemoryOutreachRepository())
    app.dependency_overrides[get_outreach_service] = lambda: outreach
    return app


class TestCollaboration:
    def test_submit_requires_auth(self, outreach_app, client):
        response = client.post("/api/collaboration/enquiries", json={"email": "partner@example.com"})
        assert response.status_code == 401

    def test_submit_and_admin_list(self, outreach_app, client, auth_headers, admin_headers, test_user_id):
        created = client.post(
            "/api/collaboration/enquiries", json={"email": "partner@example.com"}, headers=auth_headers
        )

        assert created.status_code == 201
        assert created.json()["userId"] == test_user_id
        assert created.json()["status"] == "pending"

        listed = client.get("/api/collaboration/enquiries", headers=admin_headers)
        assert [e["email"] for e in listed.json()] == ["partner@example.com"]

    def test_listing_is_admin_only(self, outreach_app, client, auth_headers):
        assert client.get("/api/collaboration/enquiries", headers=auth_headers).status_code == 403


class TestContact:
    def test_public_submit(self, outreach_app, client):
        response = client.post("/api/contact/submit", json={
            "name": "Ravi",
            "email": "ravi@example.com",
            "subject": "Pricing",
            "message": "Do you offer team plans?",
        })

        assert response.status_code == 201
        assert response.json()["status"] == "new"

    def test_missing_fields(self, outreach_app, client):
        response = client.post("/api/contact/submit", json={"name": "Ravi"})
        assert response.status_code == 400

    def test_listing_is_admin_only(self, outreach_app, client, auth_headers, admin_headers):
        assert client.get("/api/contact/queries", headers=auth_headers).status_code == 403
        assert client.get("/api/contact/queries", headers=admin_headers).status_code == 200


class TestNewsletter:
    def test_subscribe_twice(self, outreach_app, client, admin_headers):
        first = client.post("/api/newsletter/subscribe", json={"email": "reader@example.com"})
        second = client.post("/api/newsletter/subscribe", json={"email": "reader@example.com"})

        assert first.json()["alreadySubscribed"] is False
        assert second.json()["alreadySubscribed"] is True
        assert len(client.get("/api/newsletter/subscribers", headers=admin_headers).json()) == 1

    def test_invalid_email(self, outreach_app, client):
        assert client.post("/api/newsletter/subscribe", json={"email": "nope"}).status_code == 400
