"""
Session Guard.

Wraps the gateway's auth subsystem for one view: resolves the current
session once, follows the auth change stream while the view is alive, and
requests a redirect to the login surface whenever there is no session.

Usage:
    async with SessionGuard(gateway, redirect_to="/login") as guard:
        if guard.session is None:
            ...  # guard.redirected_to == "/login"
"""
import logging
from typing import Callable, Optional

from application.ports import Gateway, Unsubscribe
from domain.models import Session

logger = logging.getLogger(__name__)

DEFAULT_LOGIN_PATH = "/login"

RedirectCallback = Callable[[str], None]


class SessionGuard:
    """
    Mirrors the gateway session for the lifetime of a view.

    A guard owns exactly one auth subscription, opened by start() and
    released by close(). State changes after close() are dropped: the
    generation counter captured before the initial resolution is compared
    on resume.

    Attributes:
        redirect_to: Target passed to the redirect callback
        redirected_to: Last redirect target requested, or None
    """

    def __init__(
        self,
        gateway: Optional[Gateway],
        *,
        redirect_to: str = DEFAULT_LOGIN_PATH,
        on_redirect: Optional[RedirectCallback] = None,
    ) -> None:
        """
        Args:
            gateway: Gateway handle, or None when the gateway is unconfigured
            redirect_to: Login surface to redirect to when signed out
            on_redirect: Fire-and-forget navigation callback
        """
        self._gateway = gateway
        self.redirect_to = redirect_to
        self._on_redirect = on_redirect
        self._session: Optional[Session] = None
        self._is_loading = gateway is not None
        self._generation = 0
        self._unsubscribe: Optional[Unsubscribe] = None
        self._started = False
        self._closed = False
        self.redirected_to: Optional[str] = None

    @property
    def gateway(self) -> Optional[Gateway]:
        return self._gateway

    @property
    def session(self) -> Optional[Session]:
        return self._session

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    @property
    def has_config(self) -> bool:
        return self._gateway is not None

    @property
    def is_authenticated(self) -> bool:
        return self._session is not None

    async def start(self) -> None:
        """
        Subscribe to auth changes and resolve the current session.

        Does no network access when the gateway is unconfigured.

        Raises:
            RuntimeError: If the guard was already started
        """
        if self._started:
            raise RuntimeError("SessionGuard already started")
        self._started = True

        if self._gateway is None:
            self._is_loading = False
            return

        self._unsubscribe = self._gateway.auth.on_session_change(self._handle_change)

        generation = self._generation
        session = await self._gateway.auth.get_current_session()
        if generation != self._generation:
            logger.debug("Dropping session resolved after guard teardown")
            return

        self._session = session
        self._is_loading = False
        if session is None:
            self._redirect()

    def close(self) -> None:
        """Unsubscribe and ignore any resolution still in flight."""
        if self._closed:
            return
        self._closed = True
        self._generation += 1
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    async def __aenter__(self) -> "SessionGuard":
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _handle_change(self, event: str, session: Optional[Session]) -> None:
        if self._closed:
            return
        logger.info(f"Auth state changed: {event}")
        self._session = session
        if session is None:
            self._redirect()

    def _redirect(self) -> None:
        self.redirected_to = self.redirect_to
        logger.info(f"No session, redirecting to {self.redirect_to}")
        if self._on_redirect is not None:
            self._on_redirect(self.redirect_to)
