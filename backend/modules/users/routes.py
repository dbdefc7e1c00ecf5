"""
Account API endpoints.

Login, signup and password reset are public. Profile endpoints require a
verified credential whose subject matches the user ID in the path.
"""

from fastapi import APIRouter, BackgroundTasks, Depends, status

from api.middleware.auth import get_current_user
from api.dependencies import get_account_service
from shared.models import CallerIdentity

from .service import AccountService
from .models import (
    AuthResponse,
    LoginRequest,
    MessageResponse,
    PasswordResetRequest,
    SignupRequest,
    UpdateProfileRequest,
    UserProfile,
)

router = APIRouter()


@router.post("/login", response_model=AuthResponse)
async def login(
    request: LoginRequest,
    background_tasks: BackgroundTasks,
    accounts: AccountService = Depends(get_account_service),
) -> AuthResponse:
    """Sign in with email and password."""
    return await accounts.login(request.email, request.password, background=background_tasks)


@router.post("/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def signup(
    request: SignupRequest,
    background_tasks: BackgroundTasks,
    accounts: AccountService = Depends(get_account_service),
) -> AuthResponse:
    """
    Create an account.

    The address must be well formed and its domain must accept mail. A
    verification link is emailed after the response is sent; the returned
    token is usable right away.
    """
    return await accounts.signup(
        request.email, request.password, request.display_name, background=background_tasks
    )


@router.post("/reset-password", response_model=MessageResponse)
async def reset_password(
    request: PasswordResetRequest,
    background_tasks: BackgroundTasks,
    accounts: AccountService = Depends(get_account_service),
) -> MessageResponse:
    message = await accounts.request_password_reset(request.email, background=background_tasks)
    return MessageResponse(message=message)


@router.get("/users/{user_id}", response_model=UserProfile)
async def get_user(
    user_id: str,
    user: CallerIdentity = Depends(get_current_user),
    accounts: AccountService = Depends(get_account_service),
) -> UserProfile:
    return await accounts.get_profile(user.id, user_id)


@router.put("/users/{user_id}", response_model=UserProfile)
async def update_user(
    user_id: str,
    request: UpdateProfileRequest,
    user: CallerIdentity = Depends(get_current_user),
    accounts: AccountService = Depends(get_account_service),
) -> UserProfile:
    return await accounts.update_profile(
        user.id,
        user_id,
        display_name=request.display_name,
        photo_url=request.photo_url,
    )


@router.delete("/users/{user_id}", response_model=MessageResponse)
async def delete_user(
    user_id: str,
    user: CallerIdentity = Depends(get_current_user),
    accounts: AccountService = Depends(get_account_service),
) -> MessageResponse:
    await accounts.delete_account(user.id, user_id)
    return MessageResponse(message="User deleted successfully")
