"""
Fake Implementations for Testing.

This package provides in-memory fake implementations of the gateway and
local-storage ports for fast, isolated testing. No Supabase project or
files on disk required.

Features:
- Fakes implement the same Protocol interfaces as real implementations
- Supports seeding with test data
- Supports reset() for test isolation
- Factory functions for common test scenarios

Usage:
    from tests.fakes import FakeGateway, create_gateway

    # Direct instantiation
    gateway = FakeGateway(session=make_session())
    gateway.seed("workouts", [{"id": "w1", "title": "Push"}])

    # Factory function with pre-populated data
    gateway = create_gateway(num_workouts=3, exercises_per_workout=2)
"""
from typing import Optional

from domain.models import Session
from infrastructure.storage import InMemoryKeyValueStore
from tests.fakes.gateway import (
    FakeAuth,
    FakeGateway,
    FakeInsertQuery,
    FakeTable,
    make_session,
)


# =============================================================================
# Factory Functions
# =============================================================================


def create_gateway(
    *,
    session: Optional[Session] = None,
    signed_in: bool = True,
    num_profiles: int = 0,
    num_workouts: int = 0,
    exercises_per_workout: int = 0,
) -> FakeGateway:
    """
    Create a FakeGateway with optional pre-populated tables.

    Workout i (1-based) gets exercises of 3 sets x 10 reps at 10 * i kg.

    Args:
        session: Session to start with; defaults to make_session() when signed_in
        signed_in: Start with a session
        num_profiles: Number of sample profiles to create
        num_workouts: Number of sample workouts to create
        exercises_per_workout: Exercise entries per sample workout

    Returns:
        Pre-populated FakeGateway
    """
    if session is None and signed_in:
        session = make_session()
    gateway = FakeGateway(session=session)

    gateway.seed("profiles", [
        {
            "id": f"p{i + 1}",
            "full_name": f"Athlete {i + 1}",
            "username": f"athlete{i + 1}",
            "updated_at": "2024-01-08T09:30:00Z",
        }
        for i in range(num_profiles)
    ])

    workouts = []
    exercises = []
    for i in range(num_workouts):
        workout_id = f"w{i + 1}"
        workouts.append({
            "id": workout_id,
            "title": f"Session {i + 1}",
            "date": f"2024-01-{i + 1:02d}",
            "duration_minutes": 45,
        })
        for j in range(exercises_per_workout):
            exercises.append({
                "id": f"{workout_id}-e{j + 1}",
                "workout_id": workout_id,
                "name": f"Lift {j + 1}",
                "sets": 3,
                "reps": 10,
                "weight": 10 * (i + 1),
            })
    gateway.seed("workouts", workouts)
    gateway.seed("workout_exercises", exercises)

    return gateway


__all__ = [
    "FakeAuth",
    "FakeGateway",
    "FakeInsertQuery",
    "FakeTable",
    "InMemoryKeyValueStore",
    "make_session",
    "create_gateway",
]
