"""
Workout and WorkoutExercise row models.

A Workout and its exercises are created together by the workout-logging
use case (workout first, then the exercises that reference its ``id``).
Neither is updated or deleted by the dashboard.
"""

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field


Number = Union[int, float]


class Workout(BaseModel):
    """
    A row of the ``workouts`` table.

    Several date columns exist for historical reasons; display code resolves
    them in the order ``started_at``, ``date``, ``created_at``
    (see ``domain.metrics.resolve_workout_date``).

    Examples:
        >>> workout = Workout(id="w1", title="Leg Day", date="2024-01-08")
        >>> workout.title
        'Leg Day'
    """

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    id: str = Field(..., description="Workout ID")
    title: Optional[str] = None
    focus: Optional[str] = None
    started_at: Optional[str] = None
    date: Optional[str] = None
    created_at: Optional[str] = None
    duration_minutes: Optional[Number] = None


class WorkoutExercise(BaseModel):
    """
    A row of the ``workout_exercises`` table.

    ``workout_id`` may point at a workout that is not loaded (or no longer
    exists); such orphans are still counted in total volume. Numeric columns
    are taken as stored, fractional values included.
    """

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    id: str = Field(..., description="Exercise entry ID")
    workout_id: Optional[str] = None
    name: Optional[str] = None
    sets: Optional[Number] = None
    reps: Optional[Number] = None
    weight: Optional[Number] = None
