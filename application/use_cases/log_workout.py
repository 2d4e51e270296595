"""
LogWorkout Use Case.

Creates a workout and its exercise entries with a two-step insert: the
workout row first (to obtain its id), then the exercises referencing it.

The two inserts are sequential, not transactional. If the exercises insert
fails after the workout insert succeeded, the workout row is left in place
without exercises; there is no retry and no rollback. The result flags the
partial write so callers can tell it apart from a total failure.
"""

import datetime
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from application.ports import Gateway
from application.services.table_loader import WORKOUT_EXERCISES_TABLE, WORKOUTS_TABLE
from domain.models import Number, Session

logger = logging.getLogger(__name__)

MISSING_DATE_MESSAGE = "Please choose a workout date."
NO_EXERCISES_MESSAGE = "Add at least one exercise."
WORKOUT_SAVE_FAILED_MESSAGE = "Failed to save workout."
WORKOUT_SAVED_MESSAGE = "Workout saved."


class ExerciseDraft(BaseModel):
    """One exercise row of the logging form. Rows with a blank name are skipped."""

    name: str = ""
    sets: Optional[Number] = Field(default=None, ge=0)
    reps: Optional[Number] = Field(default=None, ge=0)
    weight: Optional[Number] = Field(default=None, ge=0)


class WorkoutDraft(BaseModel):
    """Workout logging form as submitted."""

    title: str = ""
    focus: str = ""
    date: Optional[datetime.date] = None
    duration_minutes: Optional[Number] = Field(default=None, ge=0)
    exercises: List[ExerciseDraft] = Field(default_factory=list)

    def named_exercises(self) -> List[ExerciseDraft]:
        return [e for e in self.exercises if e.name.strip()]


@dataclass
class LogWorkoutResult:
    """Result of the LogWorkout use case execution."""

    success: bool
    message: str
    workout_id: Optional[str] = None
    exercise_count: int = 0
    is_validation_error: bool = False
    is_partial_write: bool = False


class LogWorkoutUseCase:
    """
    Use case for logging a workout with its exercises.

    Orchestrates the following workflow:
    1. Validate the draft (date present, at least one named exercise)
    2. Insert the workout row and read back its id
    3. Insert the exercise rows referencing that id

    Validation failures never reach the gateway.

    Usage:
        >>> use_case = LogWorkoutUseCase(gateway=gateway)
        >>> result = await use_case.execute(session=session, draft=draft)
        >>> if result.success:
        ...     loader.refresh()
    """

    def __init__(self, gateway: Gateway) -> None:
        """
        Initialize the use case with required dependencies.

        Args:
            gateway: Remote gateway used for both inserts
        """
        self._gateway = gateway

    async def execute(self, session: Session, draft: WorkoutDraft) -> LogWorkoutResult:
        """
        Execute the log workout workflow.

        Args:
            session: Authenticated session; its user_id owns the workout
            draft: Submitted form

        Returns:
            LogWorkoutResult with the message to display
        """
        validation_error = self._validate(draft)
        if validation_error:
            logger.info(f"Workout draft rejected: {validation_error}")
            return LogWorkoutResult(
                success=False,
                message=validation_error,
                is_validation_error=True,
            )

        exercises = draft.named_exercises()

        # Step 1: workout row
        created = await (
            self._gateway.table(WORKOUTS_TABLE)
            .insert(self._workout_payload(session, draft))
            .select_one("id")
        )
        if created.error is not None or not created.data:
            logger.error(f"Workout insert failed: {created.error}")
            return LogWorkoutResult(
                success=False,
                message=created.error or WORKOUT_SAVE_FAILED_MESSAGE,
            )
        workout_id = str(created.data[0]["id"])

        # Step 2: exercise rows
        inserted = await (
            self._gateway.table(WORKOUT_EXERCISES_TABLE)
            .insert(self._exercises_payload(workout_id, exercises))
            .execute()
        )
        if inserted.error is not None:
            logger.warning(
                f"Exercises insert failed; workout {workout_id} kept without exercises: "
                f"{inserted.error}"
            )
            return LogWorkoutResult(
                success=False,
                message=inserted.error,
                workout_id=workout_id,
                is_partial_write=True,
            )

        logger.info(f"Workout {workout_id} logged with {len(exercises)} exercise(s)")
        return LogWorkoutResult(
            success=True,
            message=WORKOUT_SAVED_MESSAGE,
            workout_id=workout_id,
            exercise_count=len(exercises),
        )

    def _validate(self, draft: WorkoutDraft) -> Optional[str]:
        if draft.date is None:
            return MISSING_DATE_MESSAGE
        if not draft.named_exercises():
            return NO_EXERCISES_MESSAGE
        return None

    @staticmethod
    def _workout_payload(session: Session, draft: WorkoutDraft) -> Dict[str, Any]:
        return {
            "user_id": session.user_id,
            "title": draft.title.strip() or None,
            "focus": draft.focus.strip() or None,
            "date": draft.date.isoformat(),
            "duration_minutes": draft.duration_minutes,
        }

    @staticmethod
    def _exercises_payload(
        workout_id: str, exercises: List[ExerciseDraft]
    ) -> List[Dict[str, Any]]:
        return [
            {
                "workout_id": workout_id,
                "name": e.name.strip(),
                "sets": e.sets,
                "reps": e.reps,
                "weight": e.weight,
            }
            for e in exercises
        ]
