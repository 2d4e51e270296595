"""
Profiles router.

Read-only listing of the profiles table for the signed-in user.
"""

import logging

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from api.deps import require_session
from api.schemas.views import ProfileSection, build_section, profile_rows
from application.services import SessionGuard, mount_loaders, profiles_loader

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Profiles"],
)


class ProfilesPageResponse(BaseModel):
    profiles: ProfileSection


@router.get("/profiles", response_model=ProfilesPageResponse)
async def list_profiles(guard: SessionGuard = Depends(require_session)):
    profiles = profiles_loader(guard.gateway, enabled=True)

    async with mount_loaders(profiles):
        state = profiles.state

    return ProfilesPageResponse(
        profiles=build_section(
            ProfileSection,
            state,
            profile_rows(state.data),
            loading_message="Loading profiles...",
            empty_message="No profiles found yet.",
        )
    )
