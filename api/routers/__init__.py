"""
Router package for the Fitness Dashboard API.

This package contains all API routers organized by page:
- health: Liveness endpoint
- auth: Login view, session probe and auth actions
- dashboard: Overview stats, tables and data checks
- workouts: Workout log and workout logging
- profiles: Profiles listing
- settings: Local preferences and theme
"""

from api.routers.auth import router as auth_router
from api.routers.dashboard import router as dashboard_router
from api.routers.health import router as health_router
from api.routers.profiles import router as profiles_router
from api.routers.settings import router as settings_router
from api.routers.workouts import router as workouts_router

__all__ = [
    "auth_router",
    "dashboard_router",
    "health_router",
    "profiles_router",
    "settings_router",
    "workouts_router",
]
