"""
Application Use Cases for the Fitness Dashboard.

This package contains application-level use cases that orchestrate domain
logic and coordinate between ports/adapters.

Architecture follows Clean Architecture / Hexagonal pattern:
- Use cases orchestrate domain objects and gateway ports
- Dependencies are injected via constructors for testability
- Use cases return result objects, not API responses

Usage:
    from application.use_cases import LogWorkoutUseCase, WorkoutDraft

    use_case = LogWorkoutUseCase(gateway=gateway)
    result = await use_case.execute(session=session, draft=draft)
"""

from application.use_cases.authenticate import (
    SIGNED_IN_MESSAGE,
    SIGNED_OUT_MESSAGE,
    SIGNED_UP_MESSAGE,
    AuthenticateUseCase,
    AuthOutcome,
)
from application.use_cases.log_workout import (
    MISSING_DATE_MESSAGE,
    NO_EXERCISES_MESSAGE,
    WORKOUT_SAVE_FAILED_MESSAGE,
    WORKOUT_SAVED_MESSAGE,
    ExerciseDraft,
    LogWorkoutResult,
    LogWorkoutUseCase,
    WorkoutDraft,
)

__all__ = [
    # Authentication
    "AuthenticateUseCase",
    "AuthOutcome",
    "SIGNED_IN_MESSAGE",
    "SIGNED_UP_MESSAGE",
    "SIGNED_OUT_MESSAGE",
    # Workout logging
    "LogWorkoutUseCase",
    "LogWorkoutResult",
    "WorkoutDraft",
    "ExerciseDraft",
    "MISSING_DATE_MESSAGE",
    "NO_EXERCISES_MESSAGE",
    "WORKOUT_SAVE_FAILED_MESSAGE",
    "WORKOUT_SAVED_MESSAGE",
]
