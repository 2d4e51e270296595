"""
Local Settings Store.

Keeps the UserSettings record and the theme preference in an injected
KeyValueStore, independent of the remote gateway. Records are stored as JSON
strings under fixed keys.
"""
import json
import logging
from typing import Any, Callable, Dict, Optional

from pydantic import ValidationError

from application.ports import KeyValueStore
from domain.models import DEFAULT_SETTINGS, DEFAULT_THEME, Theme, UserSettings

logger = logging.getLogger(__name__)

SETTINGS_STORAGE_KEY = "fitness-settings"
THEME_STORAGE_KEY = "fitness-theme"


def parse_settings(raw: str) -> UserSettings:
    """
    Parse a stored settings record.

    Unparseable JSON (or JSON that is not an object) yields the defaults.
    An object is merged field by field over the defaults: unknown keys are
    ignored, and a missing or invalid field keeps its default while the
    valid fields are kept.

    Args:
        raw: Serialized record

    Returns:
        UserSettings
    """
    try:
        parsed = json.loads(raw)
    except ValueError as e:
        logger.warning(f"Discarding unparseable settings record: {e}")
        return DEFAULT_SETTINGS.model_copy()

    if not isinstance(parsed, dict):
        return DEFAULT_SETTINGS.model_copy()

    values: Dict[str, Any] = {}
    for name, field_info in UserSettings.model_fields.items():
        key = field_info.alias or name
        if key not in parsed:
            continue
        try:
            candidate = UserSettings.model_validate({key: parsed[key]})
        except ValidationError:
            logger.info(f"Ignoring invalid stored value for {key}")
            continue
        values[name] = getattr(candidate, name)
    return DEFAULT_SETTINGS.model_copy(update=values)


def serialize_settings(settings: UserSettings) -> str:
    return settings.model_dump_json(by_alias=True)


class SettingsStore:
    """
    Preferences record mirrored to local durable storage.

    Without a store (non-interactive context) load() is a no-op and updates
    stay in memory.

    Usage:
        settings_store = SettingsStore(key_value_store)
        settings_store.load()
        next_settings = settings_store.settings.model_copy(update={"weekly_workout_goal": 4})
        settings_store.update_settings(next_settings)
    """

    def __init__(self, store: Optional[KeyValueStore]) -> None:
        self._store = store
        self._settings = DEFAULT_SETTINGS.model_copy()
        self._loaded = False
        self._unsubscribe: Optional[Callable[[], None]] = None

    @property
    def settings(self) -> UserSettings:
        return self._settings

    @property
    def loaded(self) -> bool:
        return self._loaded

    def load(self) -> UserSettings:
        """Read the stored record (or defaults) and follow later writes."""
        if self._store is None:
            return self._settings

        raw = self._store.get(SETTINGS_STORAGE_KEY)
        if raw is not None:
            self._settings = parse_settings(raw)
        self._loaded = True

        if self._unsubscribe is None:
            self._unsubscribe = self._store.subscribe(self._handle_store_change)
        return self._settings

    def update_settings(self, next_settings: UserSettings) -> None:
        """
        Replace the whole record, in memory and in storage.

        Partial updates must be merged by the caller before calling.
        """
        self._settings = next_settings
        if self._store is not None:
            self._store.set(SETTINGS_STORAGE_KEY, serialize_settings(next_settings))
            logger.info("User settings saved")

    def close(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def _handle_store_change(self, key: str, value: str) -> None:
        if key == SETTINGS_STORAGE_KEY:
            self._settings = parse_settings(value)


class ThemeStore:
    """Light/dark preference; anything stored other than "dark" reads as light."""

    def __init__(self, store: Optional[KeyValueStore]) -> None:
        self._store = store
        self._theme: Theme = DEFAULT_THEME

    @property
    def theme(self) -> Theme:
        return self._theme

    def load(self) -> Theme:
        if self._store is not None:
            stored = self._store.get(THEME_STORAGE_KEY)
            self._theme = "dark" if stored == "dark" else "light"
        return self._theme

    def set_theme(self, next_theme: Theme) -> None:
        """
        Raises:
            ValueError: If next_theme is not "light" or "dark"
        """
        if next_theme not in ("light", "dark"):
            raise ValueError(f"Invalid theme '{next_theme}'. Must be 'light' or 'dark'")
        self._theme = next_theme
        if self._store is not None:
            self._store.set(THEME_STORAGE_KEY, next_theme)
