"""
Pydantic schemas for API responses.

Organized by feature/domain:
- views: Table sections and row models shared by the page routers
"""

from api.schemas.views import (
    ExerciseRow,
    ExerciseSection,
    ProfileRow,
    ProfileSection,
    SectionStatus,
    TableSection,
    UserView,
    WorkoutRow,
    WorkoutSection,
    build_section,
    exercise_rows,
    profile_rows,
    workout_rows,
)

__all__ = [
    "ExerciseRow",
    "ExerciseSection",
    "ProfileRow",
    "ProfileSection",
    "SectionStatus",
    "TableSection",
    "UserView",
    "WorkoutRow",
    "WorkoutSection",
    "build_section",
    "exercise_rows",
    "profile_rows",
    "workout_rows",
]
