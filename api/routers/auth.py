"""
Auth router for the login surface.

Provides sign-in, sign-up and sign-out actions plus the session probe used
by the app shell. Auth failures are reported in the response body next to
the form, not raised; only a missing gateway configuration is an HTTP error.

Endpoints:
- GET /login - Login view (notice when unconfigured, redirect when signed in)
- GET /auth/session - Current session state
- POST /auth/sign-in - Email/password sign-in
- POST /auth/sign-up - Email/password registration
- POST /auth/sign-out - Sign out
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from api.deps import (
    CONFIG_NOTICE,
    get_authenticate_use_case,
    get_session_guard,
)
from api.schemas.views import UserView
from application.services import SessionGuard
from application.use_cases import AuthenticateUseCase, AuthOutcome

logger = logging.getLogger(__name__)

AFTER_SIGN_IN_PATH = "/dashboard"

router = APIRouter(
    tags=["Auth"],
)


# =============================================================================
# Request/Response Models
# =============================================================================


class CredentialsRequest(BaseModel):
    """Email and password from the login form."""
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


class AuthActionResponse(BaseModel):
    """Inline message for the login form."""
    success: bool
    message: str
    redirect_to: Optional[str] = Field(
        default=None,
        description="Where the client should navigate after the action",
    )
    user: Optional[UserView] = None


class SessionResponse(BaseModel):
    """Session state for the app shell."""
    has_config: bool
    authenticated: bool
    user: Optional[UserView] = None


class LoginViewResponse(BaseModel):
    """Login page state."""
    has_config: bool
    notice: Optional[str] = None
    redirect_to: Optional[str] = None


def _to_response(outcome: AuthOutcome, redirect_to: Optional[str] = None) -> AuthActionResponse:
    return AuthActionResponse(
        success=outcome.success,
        message=outcome.message,
        redirect_to=redirect_to if outcome.success else None,
        user=UserView.from_session(outcome.session) if outcome.session else None,
    )


# =============================================================================
# Endpoints
# =============================================================================


@router.get("/login", response_model=LoginViewResponse)
async def login_view(guard: SessionGuard = Depends(get_session_guard)):
    """
    Login page state.

    A visitor who is already signed in is sent on to the dashboard.
    """
    if not guard.has_config:
        return LoginViewResponse(has_config=False, notice=CONFIG_NOTICE)
    return LoginViewResponse(
        has_config=True,
        redirect_to=AFTER_SIGN_IN_PATH if guard.is_authenticated else None,
    )


@router.get("/auth/session", response_model=SessionResponse)
async def current_session(guard: SessionGuard = Depends(get_session_guard)):
    session = guard.session
    return SessionResponse(
        has_config=guard.has_config,
        authenticated=session is not None,
        user=UserView.from_session(session) if session else None,
    )


@router.post("/auth/sign-in", response_model=AuthActionResponse)
async def sign_in(
    request: CredentialsRequest,
    use_case: AuthenticateUseCase = Depends(get_authenticate_use_case),
):
    """
    Sign in with email and password.

    On success the client is directed to the dashboard; on failure the
    gateway's message is returned for display.
    """
    outcome = await use_case.sign_in(request.email, request.password)
    if not outcome.success:
        logger.info(f"Sign-in failed for {request.email}: {outcome.message}")
    return _to_response(outcome, redirect_to=AFTER_SIGN_IN_PATH)


@router.post("/auth/sign-up", response_model=AuthActionResponse)
async def sign_up(
    request: CredentialsRequest,
    use_case: AuthenticateUseCase = Depends(get_authenticate_use_case),
):
    """Register a new account; confirmation happens by email."""
    outcome = await use_case.sign_up(request.email, request.password)
    return _to_response(outcome)


@router.post("/auth/sign-out", response_model=AuthActionResponse)
async def sign_out(
    use_case: AuthenticateUseCase = Depends(get_authenticate_use_case),
    guard: SessionGuard = Depends(get_session_guard),
):
    outcome = await use_case.sign_out()
    return _to_response(outcome, redirect_to=guard.redirect_to)
