"""
Settings router for local dashboard preferences.

Provides GET/PUT endpoints for the preferences record (display name, weekly
workout goal, preferred split, unit system) and for the light/dark theme.
Both live in the local key-value store, not in the remote gateway; records
use camelCase keys on the wire and on disk.

The preferences page sits behind the session guard like every other page.
The theme applies before sign-in and is not guarded.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field

from api.deps import get_settings_store, get_theme_store, require_session
from application.services import SessionGuard, SettingsStore, ThemeStore
from domain.models import Theme, UserSettings

logger = logging.getLogger(__name__)

SAVED_MESSAGE = "Saved"

router = APIRouter(
    prefix="/settings",
    tags=["settings"],
)


class SettingsUpdateResponse(BaseModel):
    """Response for successful settings update."""
    message: str
    settings: UserSettings


class ThemeRequest(BaseModel):
    """Request model for switching the theme."""
    theme: Theme = Field(description="Color scheme for the dashboard")

    class Config:
        json_schema_extra = {
            "example": {
                "theme": "dark",
            }
        }


class ThemeResponse(BaseModel):
    theme: Theme


@router.get(
    "",
    response_model=UserSettings,
    summary="Get dashboard preferences",
)
def get_user_settings(
    guard: SessionGuard = Depends(require_session),
    settings_store: SettingsStore = Depends(get_settings_store),
) -> UserSettings:
    """
    Get the stored preferences record.

    A missing or unreadable record yields the defaults; a record with some
    invalid fields keeps its valid ones.
    """
    return settings_store.settings


@router.put(
    "",
    response_model=SettingsUpdateResponse,
    status_code=status.HTTP_200_OK,
    summary="Replace dashboard preferences",
)
def update_user_settings(
    settings: UserSettings,
    guard: SessionGuard = Depends(require_session),
    settings_store: SettingsStore = Depends(get_settings_store),
) -> SettingsUpdateResponse:
    """
    Replace the preferences record.

    The body is the whole record; omitted fields take their defaults rather
    than keeping stored values.

    Raises:
        HTTPException: If the record cannot be written (500 error)
    """
    try:
        settings_store.update_settings(settings)
    except OSError as e:
        logger.error(f"Failed to save user settings: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to save user settings: {str(e)}",
        ) from e

    return SettingsUpdateResponse(message=SAVED_MESSAGE, settings=settings_store.settings)


@router.get("/theme", response_model=ThemeResponse)
def get_theme(theme_store: ThemeStore = Depends(get_theme_store)) -> ThemeResponse:
    return ThemeResponse(theme=theme_store.theme)


@router.put("/theme", response_model=ThemeResponse)
def update_theme(
    request: ThemeRequest,
    theme_store: ThemeStore = Depends(get_theme_store),
) -> ThemeResponse:
    """
    Switch the theme.

    Raises:
        HTTPException: If the theme cannot be written (500 error)
    """
    try:
        theme_store.set_theme(request.theme)
    except OSError as e:
        logger.error(f"Failed to save theme: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to save theme: {str(e)}",
        ) from e
    return ThemeResponse(theme=theme_store.theme)
