"""
Domain models for the Fitness Dashboard.

This package contains pure domain models that are independent of
infrastructure concerns (database, API, external services).

These models represent the core concepts:
- Session: Authenticated user context issued by the gateway
- Profile: One row per user, read-only
- Workout: A logged training session
- WorkoutExercise: One exercise entry belonging to a workout
- UserSettings: Locally stored dashboard preferences

Usage:
    >>> from domain.models import Workout, WorkoutExercise

    >>> workout = Workout(id="w1", title="Leg Day", date="2024-01-08")
    >>> squat = WorkoutExercise(id="e1", workout_id="w1", sets=4, reps=8, weight=100)
"""

from domain.models.profile import Profile
from domain.models.session import Session
from domain.models.user_settings import (
    DEFAULT_SETTINGS,
    DEFAULT_THEME,
    Theme,
    UnitSystem,
    UserSettings,
)
from domain.models.workout import Number, Workout, WorkoutExercise

__all__ = [
    "Profile",
    "Session",
    "Workout",
    "WorkoutExercise",
    "Number",
    "UserSettings",
    "UnitSystem",
    "Theme",
    "DEFAULT_SETTINGS",
    "DEFAULT_THEME",
]
