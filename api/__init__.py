"""
API package for the Fitness Dashboard.

This package contains:
- deps.py: FastAPI dependency providers for DI
- routers/: API route handlers, one per page
- schemas/: View models shared by the routers
"""

# Re-export dependency providers for convenient access
from api.deps import (
    get_settings,
    get_gateway,
    get_gateway_required,
    get_session_guard,
    require_session,
    get_key_value_store,
    get_settings_store,
    get_theme_store,
    get_log_workout_use_case,
    get_authenticate_use_case,
)

__all__ = [
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
