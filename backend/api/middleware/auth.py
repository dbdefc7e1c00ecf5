"""
Bearer authentication dependencies.

Every protected route depends on get_current_user, which hands the raw
Authorization header to the credential verifier. Rejections raise
AuthenticationError subclasses and are turned into 401s by the app's
exception handler.
"""

from typing import Optional

from fastapi import Depends, Header

from shared.config import Settings, get_settings
from shared.models import CallerIdentity
from modules.auth.exceptions import ForbiddenError
from modules.auth.interfaces import ICredentialVerifier

from ..dependencies import get_credential_verifier


async def get_current_user(
    authorization: Optional[str] = Header(None),
    verifier: ICredentialVerifier = Depends(get_credential_verifier),
) -> CallerIdentity:
    """
    Dependency that requires authentication.

    Usage:
        @router.get("/protected")
        async def protected_route(user: CallerIdentity = Depends(get_current_user)):
            return {"user_id": user.id}
    """
    return await verifier.verify_header(authorization)


async def get_admin_user(
    user: CallerIdentity = Depends(get_current_user),
    settings: Settings = Depends(get_settings),
) -> CallerIdentity:
    """Dependency that requires an authenticated caller listed in ADMIN_USER_IDS."""
    if user.id not in settings.admin_user_ids:
        raise ForbiddenError("Admin access required")
    return user


# Type aliases for cleaner route definitions
RequireAuth = Depends(get_current_user)
RequireAdmin = Depends(get_admin_user)
