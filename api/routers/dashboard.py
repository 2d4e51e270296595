"""
Dashboard router.

Overview of training data: four stat cards, the profiles / workouts /
exercises tables and a data-checks panel. The three tables are fetched
concurrently; a failed fetch only affects its own table and the cards that
read from it.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from api.deps import get_settings_store, require_session
from api.schemas.views import (
    ExerciseSection,
    ProfileSection,
    UserView,
    WorkoutSection,
    build_section,
    exercise_rows,
    profile_rows,
    workout_rows,
)
from application.services import (
    LoadState,
    SessionGuard,
    SettingsStore,
    mount_loaders,
    profiles_loader,
    workout_exercises_loader,
    workouts_loader,
)
from domain.metrics import PLACEHOLDER, format_number, progress_percent, total_volume
from domain.models import Number

logger = logging.getLogger(__name__)

GOAL_UNSET_LABEL = "Set in settings"

router = APIRouter(
    tags=["Dashboard"],
)


# =============================================================================
# Response Models
# =============================================================================


class StatCard(BaseModel):
    title: str
    value: str
    helper: str


class DashboardSummary(BaseModel):
    """Raw numbers behind the stat cards."""
    total_workouts: int
    total_exercises: int
    total_volume: float
    weekly_goal: Optional[Number] = None
    weekly_progress: Optional[float] = None


class DataChecks(BaseModel):
    """Row counts per table; None while a table is still loading."""
    profiles_loaded: Optional[int] = None
    workouts_loaded: Optional[int] = None
    exercises_loaded: Optional[int] = None


class DashboardResponse(BaseModel):
    user: UserView
    stats: List[StatCard]
    summary: DashboardSummary
    profiles: ProfileSection
    workouts: WorkoutSection
    exercises: ExerciseSection
    data_checks: DataChecks


def _loaded_count(state: LoadState) -> Optional[int]:
    return None if state.loading else len(state.data)


def _stat_value(state: LoadState, value: str) -> str:
    return PLACEHOLDER if state.loading else value


def build_stats(
    workouts: LoadState,
    exercises: LoadState,
    weekly_goal: Optional[Number],
) -> List[StatCard]:
    """
    Stat cards for the dashboard header.

    A card backed by a failed fetch shows the error as its helper text.
    Weekly progress counts every loaded workout against the goal.
    """
    progress = progress_percent(len(workouts.data), weekly_goal)
    return [
        StatCard(
            title="Total workouts",
            value=_stat_value(workouts, format_number(len(workouts.data))),
            helper=workouts.error or "Sessions logged in the platform.",
        ),
        StatCard(
            title="Exercises logged",
            value=_stat_value(exercises, format_number(len(exercises.data))),
            helper=exercises.error or "Distinct exercise entries.",
        ),
        StatCard(
            title="Total volume",
            value=_stat_value(exercises, format_number(total_volume(exercises.data))),
            helper=exercises.error or "Calculated from sets x reps x load.",
        ),
        StatCard(
            title="Weekly goal",
            value=f"{format_number(progress)}%" if progress is not None else GOAL_UNSET_LABEL,
            helper="Progress vs your configured weekly goal.",
        ),
    ]


# =============================================================================
# Endpoints
# =============================================================================


@router.get("/dashboard", response_model=DashboardResponse)
async def dashboard(
    guard: SessionGuard = Depends(require_session),
    settings_store: SettingsStore = Depends(get_settings_store),
):
    """
    Dashboard view for the signed-in user.

    Returns:
        DashboardResponse with stat cards, tables and data checks
    """
    profiles = profiles_loader(guard.gateway, enabled=True)
    workouts = workouts_loader(guard.gateway, enabled=True)
    exercises = workout_exercises_loader(guard.gateway, enabled=True)

    async with mount_loaders(profiles, workouts, exercises):
        profiles_state = profiles.state
        workouts_state = workouts.state
        exercises_state = exercises.state

    weekly_goal = settings_store.settings.weekly_workout_goal

    return DashboardResponse(
        user=UserView.from_session(guard.session),
        stats=build_stats(workouts_state, exercises_state, weekly_goal),
        summary=DashboardSummary(
            total_workouts=len(workouts_state.data),
            total_exercises=len(exercises_state.data),
            total_volume=total_volume(exercises_state.data),
            weekly_goal=weekly_goal,
            weekly_progress=progress_percent(len(workouts_state.data), weekly_goal),
        ),
        profiles=build_section(
            ProfileSection,
            profiles_state,
            profile_rows(profiles_state.data),
            loading_message="Loading profiles...",
            empty_message="No profiles found yet.",
        ),
        workouts=build_section(
            WorkoutSection,
            workouts_state,
            workout_rows(workouts_state.data, exercises_state.data),
            loading_message="Loading workouts...",
            empty_message="No workouts logged yet.",
        ),
        exercises=build_section(
            ExerciseSection,
            exercises_state,
            exercise_rows(exercises_state.data, workouts_state.data),
            loading_message="Loading exercises...",
            empty_message="No exercises logged yet.",
        ),
        data_checks=DataChecks(
            profiles_loaded=_loaded_count(profiles_state),
            workouts_loaded=_loaded_count(workouts_state),
            exercises_loaded=_loaded_count(exercises_state),
        ),
    )
