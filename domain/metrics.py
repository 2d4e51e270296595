"""
Derived metrics for the dashboard.

Pure, synchronous functions over loaded rows:
- Training volume (sets x reps x weight) per exercise, per workout and in total
- Grouping of exercises by workout
- Clamped progress percentage against a configured goal
- Display resolution of workout dates and labels
"""
from collections import defaultdict
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Dict, Iterable, List, Optional

from domain.models import Workout, WorkoutExercise

# Rendered wherever a value is absent or cannot be displayed.
PLACEHOLDER = "—"


# =============================================================================
# Volume
# =============================================================================


def volume(
    sets: Optional[float],
    reps: Optional[float],
    weight: Optional[float],
) -> float:
    """
    Calculate training volume.

    Formula: volume = sets * reps * weight

    Absent operands count as 0, so an exercise logged without a weight
    contributes no volume.

    Args:
        sets: Number of sets
        reps: Reps per set
        weight: Load per rep

    Returns:
        Volume as a float
    """
    return float((sets or 0) * (reps or 0) * (weight or 0))


def exercise_volume(exercise: WorkoutExercise) -> float:
    """Volume of a single exercise entry."""
    return volume(exercise.sets, exercise.reps, exercise.weight)


def total_volume(exercises: Iterable[WorkoutExercise]) -> float:
    """Sum of volumes across all loaded exercises, orphans included."""
    return sum((exercise_volume(e) for e in exercises), 0.0)


def group_by_workout(
    exercises: Iterable[WorkoutExercise],
) -> Dict[str, List[WorkoutExercise]]:
    """
    Group exercises by their ``workout_id``.

    Exercises without a ``workout_id`` are skipped. The mapping carries no
    ordering guarantee between groups; within a group, load order is kept.

    Args:
        exercises: Loaded exercise rows

    Returns:
        Dict of workout_id -> exercises for that workout
    """
    groups: Dict[str, List[WorkoutExercise]] = defaultdict(list)
    for exercise in exercises:
        if not exercise.workout_id:
            continue
        groups[exercise.workout_id].append(exercise)
    return dict(groups)


def workout_volume(workout: Workout, exercises: Iterable[WorkoutExercise]) -> float:
    """Sum of volumes of the exercises whose ``workout_id`` matches the workout."""
    return total_volume(e for e in exercises if e.workout_id == workout.id)


def exercise_counts(exercises: Iterable[WorkoutExercise]) -> Dict[str, int]:
    """Number of exercise entries per workout_id."""
    return {
        workout_id: len(group)
        for workout_id, group in group_by_workout(exercises).items()
    }


# =============================================================================
# Goals
# =============================================================================


def progress_percent(achieved: float, goal: Optional[float]) -> Optional[float]:
    """
    Progress towards a goal as a percentage clamped to 100.

    Returns None (not 0) when no positive goal is configured, so the display
    layer can tell "no goal" apart from "no progress".

    Args:
        achieved: Amount achieved so far
        goal: Configured target; None or <= 0 means unset

    Returns:
        Percentage in [0, 100], or None
    """
    if goal is None or goal <= 0:
        return None
    return min(100.0, achieved / goal * 100)


# =============================================================================
# Display Resolution
# =============================================================================


def resolve_workout_date(workout: Workout) -> Optional[str]:
    """First non-null of ``started_at``, ``date``, ``created_at``."""
    for value in (workout.started_at, workout.date, workout.created_at):
        if value is not None:
            return value
    return None


def workout_label(workout: Optional[Workout]) -> str:
    """Label for the workout column of an exercise row; orphans get the placeholder."""
    if workout is None:
        return PLACEHOLDER
    for value in (workout.title, workout.focus, workout.created_at):
        if value is not None:
            return value
    return PLACEHOLDER


def format_number(value: float) -> str:
    """
    Format a number with thousands separators and at most one decimal.

    Examples:
        >>> format_number(4700)
        '4,700'
        >>> format_number(1234.56)
        '1,234.6'
    """
    try:
        rounded = Decimal(str(value)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    except InvalidOperation:
        return PLACEHOLDER
    if rounded == rounded.to_integral_value():
        return f"{int(rounded):,}"
    return f"{rounded:,.1f}"


def _parse_datetime(value: str) -> Optional[datetime]:
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None


def format_date(value: Optional[str]) -> str:
    """
    Format an ISO date or timestamp as M/D/YYYY.

    Examples:
        >>> format_date("2024-01-08")
        '1/8/2024'
        >>> format_date("not a date")
        '—'
    """
    if not value:
        return PLACEHOLDER
    parsed = _parse_datetime(value)
    if parsed is None:
        return PLACEHOLDER
    return f"{parsed.month}/{parsed.day}/{parsed.year}"


def weekday_label(value: Optional[str]) -> str:
    """Weekday name for a YYYY-MM-DD form date, or an empty string."""
    if not value:
        return ""
    try:
        return date.fromisoformat(value).strftime("%A")
    except ValueError:
        return ""
