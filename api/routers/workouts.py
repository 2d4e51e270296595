"""
Workouts router for the workout log.

This router contains endpoints for:
- GET /workouts - Workout sessions and exercise entries
- POST /workouts - Log a workout with its exercises
- GET /workouts/weekday - Weekday name for the form's date field

Logging a workout is a two-step write (workout row, then exercise rows). When
the second step fails the workout row stays behind and the response says so;
nothing is retried or rolled back.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import BaseModel

from api.deps import get_log_workout_use_case, require_session
from api.schemas.views import (
    ExerciseSection,
    WorkoutSection,
    build_section,
    exercise_rows,
    workout_rows,
)
from application.services import (
    LoadState,
    SessionGuard,
    mount_loaders,
    workout_exercises_loader,
    workouts_loader,
)
from application.use_cases import LogWorkoutUseCase, WorkoutDraft
from domain.metrics import weekday_label

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Workouts"],
)


# =============================================================================
# Response Models
# =============================================================================


class WorkoutsPageResponse(BaseModel):
    """Workout sessions and exercise entries tables."""
    workouts: WorkoutSection
    exercises: ExerciseSection


class LogWorkoutResponse(WorkoutsPageResponse):
    """Saved workout plus the tables as re-fetched after the save."""
    message: str
    workout_id: str
    exercise_count: int


class WeekdayResponse(BaseModel):
    date: Optional[str] = None
    weekday: str


def _page(workouts: LoadState, exercises: LoadState) -> WorkoutsPageResponse:
    return WorkoutsPageResponse(
        workouts=build_section(
            WorkoutSection,
            workouts,
            workout_rows(workouts.data, exercises.data),
            loading_message="Loading workouts...",
            empty_message="No workouts logged yet.",
        ),
        exercises=build_section(
            ExerciseSection,
            exercises,
            exercise_rows(exercises.data, workouts.data),
            loading_message="Loading exercises...",
            empty_message="No exercises logged yet.",
        ),
    )


# =============================================================================
# Endpoints
# =============================================================================


@router.get("/workouts", response_model=WorkoutsPageResponse)
async def list_workouts(guard: SessionGuard = Depends(require_session)):
    workouts = workouts_loader(guard.gateway, enabled=True)
    exercises = workout_exercises_loader(guard.gateway, enabled=True)

    async with mount_loaders(workouts, exercises):
        return _page(workouts.state, exercises.state)


@router.get("/workouts/weekday", response_model=WeekdayResponse)
def workout_weekday(date: Optional[str] = Query(None, description="YYYY-MM-DD")):
    """Weekday shown next to the date field; empty for a blank or invalid date."""
    return WeekdayResponse(date=date, weekday=weekday_label(date))


@router.post("/workouts", response_model=LogWorkoutResponse)
async def log_workout(
    draft: WorkoutDraft,
    guard: SessionGuard = Depends(require_session),
    use_case: LogWorkoutUseCase = Depends(get_log_workout_use_case),
):
    """
    Log a workout with its exercises.

    Exercise rows with a blank name are skipped. Both tables are loaded only
    after the save succeeds and are returned with the result.

    Raises:
        HTTPException: 400 for a missing date or no named exercise,
            502 when the gateway rejects either insert
    """
    result = await use_case.execute(session=guard.session, draft=draft)

    if result.is_validation_error:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=result.message)

    if not result.success:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail={
                "message": result.message,
                "workout_id": result.workout_id,
                "partial_write": result.is_partial_write,
            },
        )

    workouts = workouts_loader(guard.gateway, enabled=True)
    exercises = workout_exercises_loader(guard.gateway, enabled=True)

    async with mount_loaders(workouts, exercises):
        page = _page(workouts.state, exercises.state)

    return LogWorkoutResponse(
        message=result.message,
        workout_id=result.workout_id,
        exercise_count=result.exercise_count,
        workouts=page.workouts,
        exercises=page.exercises,
    )
