"""
Application services for the dashboard views.

- session_guard: SessionGuard (auth state for one view)
- table_loader: TableDataLoader and typed loaders per table
- settings_store: SettingsStore / ThemeStore over a KeyValueStore
"""

from application.services.session_guard import DEFAULT_LOGIN_PATH, SessionGuard
from application.services.settings_store import (
    SETTINGS_STORAGE_KEY,
    THEME_STORAGE_KEY,
    SettingsStore,
    ThemeStore,
    parse_settings,
    serialize_settings,
)
from application.services.table_loader import (
    PROFILES_TABLE,
    WORKOUT_EXERCISES_TABLE,
    WORKOUTS_TABLE,
    LoadState,
    TableDataLoader,
    mount_loaders,
    profiles_loader,
    workout_exercises_loader,
    workouts_loader,
)

__all__ = [
    "SessionGuard",
    "DEFAULT_LOGIN_PATH",
    "TableDataLoader",
    "LoadState",
    "mount_loaders",
    "profiles_loader",
    "workouts_loader",
    "workout_exercises_loader",
    "PROFILES_TABLE",
    "WORKOUTS_TABLE",
    "WORKOUT_EXERCISES_TABLE",
    "SettingsStore",
    "ThemeStore",
    "parse_settings",
    "serialize_settings",
    "SETTINGS_STORAGE_KEY",
    "THEME_STORAGE_KEY",
]
