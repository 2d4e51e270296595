"""
Domain layer for the Fitness Dashboard.

This package contains pure domain models and derived-metric functions that
are independent of infrastructure concerns (gateway, API, local storage).
"""

from domain.models import (
    Profile,
    Session,
    UserSettings,
    Workout,
    WorkoutExercise,
)

__all__ = [
    "Profile",
    "Session",
    "UserSettings",
    "Workout",
    "WorkoutExercise",
]
