"""
View Schemas for the dashboard pages.

Each page is a set of sections. A section renders one table loader in one of
four states, checked in this order:
- error: the loader's error message replaces the table
- loading: the fetch has not settled
- empty: the table has no rows
- ready: rows are shown
"""

from typing import Dict, List, Literal, Optional, Sequence, Type, TypeVar

from pydantic import BaseModel, Field

from application.services import LoadState
from domain.metrics import (
    PLACEHOLDER,
    exercise_counts,
    format_date,
    format_number,
    group_by_workout,
    resolve_workout_date,
    total_volume,
    workout_label,
)
from domain.models import Profile, Session, Workout, WorkoutExercise

SectionStatus = Literal["error", "loading", "empty", "ready"]
SectionT = TypeVar("SectionT", bound="TableSection")


class TableSection(BaseModel):
    """One table of a page; subclasses type the rows."""
    status: SectionStatus
    message: Optional[str] = Field(
        default=None,
        description="Error, loading or empty-state text; None when ready",
    )


def build_section(
    section_cls: Type[SectionT],
    state: LoadState,
    rows: Sequence[BaseModel],
    *,
    loading_message: str,
    empty_message: str,
) -> SectionT:
    """Pick the section status for a loader state."""
    if state.error:
        return section_cls(status="error", message=state.error)
    if state.loading:
        return section_cls(status="loading", message=loading_message)
    if not state.data:
        return section_cls(status="empty", message=empty_message)
    return section_cls(status="ready", rows=list(rows))


class UserView(BaseModel):
    """Signed-in user shown in the app shell."""
    user_id: str
    email: Optional[str] = None

    @classmethod
    def from_session(cls, session: Session) -> "UserView":
        return cls(user_id=session.user_id, email=session.email)


# =============================================================================
# Rows
# =============================================================================


class ProfileRow(BaseModel):
    id: str
    name: str
    handle: str
    updated: str


class WorkoutRow(BaseModel):
    id: str
    date: str
    focus: str
    duration: str
    exercises: int
    volume: str = Field(description="Formatted volume, or the no-data marker")


class ExerciseRow(BaseModel):
    id: str
    exercise: str
    workout: str
    sets_x_reps: str
    load: str


class ProfileSection(TableSection):
    rows: List[ProfileRow] = Field(default_factory=list)


class WorkoutSection(TableSection):
    rows: List[WorkoutRow] = Field(default_factory=list)


class ExerciseSection(TableSection):
    rows: List[ExerciseRow] = Field(default_factory=list)


def profile_rows(profiles: Sequence[Profile]) -> List[ProfileRow]:
    return [
        ProfileRow(
            id=p.id,
            name=p.full_name if p.full_name is not None else "Unnamed",
            handle=p.username if p.username is not None else PLACEHOLDER,
            updated=format_date(p.updated_at),
        )
        for p in profiles
    ]


def workout_rows(
    workouts: Sequence[Workout],
    exercises: Sequence[WorkoutExercise],
) -> List[WorkoutRow]:
    """
    Workout rows with per-workout volume.

    A workout with no exercise entries shows the no-data marker rather than
    a zero volume.
    """
    groups = group_by_workout(exercises)
    counts = exercise_counts(exercises)
    rows = []
    for workout in workouts:
        group = groups.get(workout.id, [])
        focus = workout.title if workout.title is not None else workout.focus
        rows.append(
            WorkoutRow(
                id=workout.id,
                date=format_date(resolve_workout_date(workout)),
                focus=focus if focus is not None else PLACEHOLDER,
                duration=(
                    f"{workout.duration_minutes} min"
                    if workout.duration_minutes
                    else PLACEHOLDER
                ),
                exercises=counts.get(workout.id, 0),
                volume=format_number(total_volume(group)) if group else PLACEHOLDER,
            )
        )
    return rows


def exercise_rows(
    exercises: Sequence[WorkoutExercise],
    workouts: Sequence[Workout],
) -> List[ExerciseRow]:
    """Exercise rows; entries whose workout is not loaded get the placeholder label."""
    workouts_by_id: Dict[str, Workout] = {w.id: w for w in workouts}
    return [
        ExerciseRow(
            id=e.id,
            exercise=e.name if e.name is not None else "Unnamed",
            workout=workout_label(workouts_by_id.get(e.workout_id) if e.workout_id else None),
            sets_x_reps=f"{e.sets or 0} x {e.reps or 0}",
            load=format_number(e.weight) if e.weight else PLACEHOLDER,
        )
        for e in exercises
    ]
