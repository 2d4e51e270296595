"""
FastAPI Dependency Providers for the Fitness Dashboard.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations. This
enables clean separation of concerns and easy testing with fake
implementations.

Architecture:
- Settings, the gateway handle and the local key-value store are cached
  per-process (lru_cache)
- Session guards, settings stores and use cases are created per-request;
  a request is one "mount" of a view and its teardown closes them

Usage in routers:
    from api.deps import require_session

    @router.get("/dashboard")
    async def dashboard(guard: SessionGuard = Depends(require_session)):
        ...

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_gateway] = lambda: FakeGateway()
"""

import logging
from functools import lru_cache
from typing import AsyncIterator, Iterator, Optional

from fastapi import Depends, HTTPException, status
from supabase import create_client

from application.ports import Gateway, KeyValueStore
from application.services import SessionGuard, SettingsStore, ThemeStore
from application.use_cases import AuthenticateUseCase, LogWorkoutUseCase
from backend.settings import Settings, get_settings as _get_settings
from infrastructure import SupabaseGateway, YamlFileKeyValueStore

logger = logging.getLogger(__name__)

CONFIG_NOTICE = (
    "Supabase config required. Add SUPABASE_URL and SUPABASE_ANON_KEY to .env, "
    "then sign in on the login page."
)


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings() -> Settings:
    """
    Get application settings.

    Returns cached Settings instance from backend.settings.

    Returns:
        Settings: Application settings instance
    """
    return _get_settings()


# =============================================================================
# Gateway Provider
# =============================================================================


@lru_cache
def get_gateway() -> Optional[Gateway]:
    """
    Get the gateway handle (cached).

    Creates a Supabase client from settings. Returns None if the connection
    parameters are not configured; no network access happens in that case.

    Returns:
        Gateway, or None if not configured
    """
    settings = _get_settings()

    if not settings.is_configured:
        logger.warning("Supabase credentials not configured. Dashboard data is disabled.")
        return None

    return SupabaseGateway(create_client(settings.supabase_url, settings.supabase_anon_key))


def get_gateway_required(
    gateway: Optional[Gateway] = Depends(get_gateway),
) -> Gateway:
    """
    Get the gateway handle, raising if not configured.

    Raises:
        HTTPException: 503 with the configuration notice
    """
    if gateway is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=CONFIG_NOTICE,
        )
    return gateway


# =============================================================================
# Session Providers
# =============================================================================


async def get_session_guard(
    gateway: Optional[Gateway] = Depends(get_gateway),
    settings: Settings = Depends(get_settings),
) -> AsyncIterator[SessionGuard]:
    """
    Session guard for the current request.

    Resolved before the handler runs and closed (unsubscribed) when the
    request is torn down.
    """
    async with SessionGuard(gateway, redirect_to=settings.login_path) as guard:
        yield guard


def require_session(
    guard: SessionGuard = Depends(get_session_guard),
) -> SessionGuard:
    """
    Session guard that is known to hold a session.

    Raises:
        HTTPException: 503 when the gateway is unconfigured,
            307 to the login path when there is no session
    """
    if not guard.has_config:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=CONFIG_NOTICE,
        )
    if guard.session is None:
        raise HTTPException(
            status_code=status.HTTP_307_TEMPORARY_REDIRECT,
            detail="Sign in required",
            headers={"Location": guard.redirected_to or guard.redirect_to},
        )
    return guard


# =============================================================================
# Local Storage Providers
# =============================================================================


@lru_cache
def get_key_value_store() -> KeyValueStore:
    """
    Get the durable local key-value store (cached).

    Returns:
        KeyValueStore backed by the file at settings.local_store_path
    """
    return YamlFileKeyValueStore(_get_settings().local_store_path)


def get_settings_store(
    store: KeyValueStore = Depends(get_key_value_store),
) -> Iterator[SettingsStore]:
    """Preferences record, loaded for the current request."""
    settings_store = SettingsStore(store)
    settings_store.load()
    try:
        yield settings_store
    finally:
        settings_store.close()


def get_theme_store(
    store: KeyValueStore = Depends(get_key_value_store),
) -> ThemeStore:
    """Theme preference, loaded for the current request."""
    theme_store = ThemeStore(store)
    theme_store.load()
    return theme_store


# =============================================================================
# Use Case Providers
# =============================================================================


def get_log_workout_use_case(
    gateway: Gateway = Depends(get_gateway_required),
) -> LogWorkoutUseCase:
    return LogWorkoutUseCase(gateway=gateway)


def get_authenticate_use_case(
    gateway: Gateway = Depends(get_gateway_required),
) -> AuthenticateUseCase:
    return AuthenticateUseCase(gateway=gateway)


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    "CONFIG_NOTICE",
    # Settings
    "get_settings",
    # Gateway
    "get_gateway",
    "get_gateway_required",
    # Session
    "get_session_guard",
    "require_session",
    # Local storage
    "get_key_value_store",
    "get_settings_store",
    "get_theme_store",
    # Use cases
    "get_log_workout_use_case",
    "get_authenticate_use_case",
]
