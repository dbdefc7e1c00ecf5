"""
Pytest fixtures for API tests.

The app is created fresh per test. Credentials are checked by a verifier
that only knows self-issued test tokens, so no Supabase client is needed.
"""

import pytest
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import get_credential_verifier
from shared.config import Settings, get_settings
from modules.auth.service import CredentialVerifier
from modules.auth.strategies import SelfIssuedTokenStrategy

from tests.conftest import TEST_JWT_SECRET, create_test_token

ADMIN_USER_ID = "admin-1"


@pytest.fixture
def app():
    """Create a fresh app for each test."""
    app = create_app()
    app.dependency_overrides[get_credential_verifier] = lambda: CredentialVerifier(
        [SelfIssuedTokenStrategy(secret=TEST_JWT_SECRET)]
    )
    app.dependency_overrides[get_settings] = lambda: Settings(
        _env_file=None, admin_user_ids=[ADMIN_USER_ID]
    )
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def admin_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {create_test_token(user_id=ADMIN_USER_ID)}"}
