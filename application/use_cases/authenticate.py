"""
Authenticate Use Case.

Sign-in, sign-up and sign-out actions. Each returns the message to show
inline next to the form; gateway errors are reported, never raised.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from application.ports import AuthResult, Gateway
from domain.models import Session

logger = logging.getLogger(__name__)

SIGNED_IN_MESSAGE = "Signed in successfully."
SIGNED_UP_MESSAGE = "Check your inbox to confirm your account."
SIGNED_OUT_MESSAGE = "Signed out."


@dataclass
class AuthOutcome:
    """Settled state of an auth action."""

    success: bool
    message: str
    session: Optional[Session] = None


class AuthenticateUseCase:
    """
    Use case wrapping the gateway's auth actions.

    Usage:
        >>> use_case = AuthenticateUseCase(gateway=gateway)
        >>> outcome = await use_case.sign_in("you@fitness.com", "secret")
        >>> outcome.message
        'Signed in successfully.'
    """

    def __init__(self, gateway: Gateway) -> None:
        self._gateway = gateway

    async def sign_in(self, email: str, password: str) -> AuthOutcome:
        result = await self._gateway.auth.sign_in_with_password(email, password)
        return self._outcome(result, SIGNED_IN_MESSAGE)

    async def sign_up(self, email: str, password: str) -> AuthOutcome:
        result = await self._gateway.auth.sign_up(email, password)
        return self._outcome(result, SIGNED_UP_MESSAGE)

    async def sign_out(self) -> AuthOutcome:
        result = await self._gateway.auth.sign_out()
        return self._outcome(result, SIGNED_OUT_MESSAGE)

    @staticmethod
    def _outcome(result: AuthResult, success_message: str) -> AuthOutcome:
        if result.error is not None:
            return AuthOutcome(success=False, message=result.error)
        return AuthOutcome(success=True, message=success_message, session=result.session)
