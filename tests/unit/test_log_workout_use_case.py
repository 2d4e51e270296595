"""
Unit tests for application/use_cases/log_workout.py

Validation, the two-step insert and partial-write reporting.
"""

import datetime

import pytest

from application.use_cases import (
    ExerciseDraft,
    LogWorkoutUseCase,
    WorkoutDraft,
)
from application.use_cases.log_workout import (
    MISSING_DATE_MESSAGE,
    NO_EXERCISES_MESSAGE,
    WORKOUT_SAVED_MESSAGE,
)
from tests.fakes import FakeGateway, make_session

pytestmark = pytest.mark.unit


def _draft(**overrides):
    values = {
        "title": "Leg day",
        "focus": "Lower body",
        "date": datetime.date(2024, 1, 8),
        "duration_minutes": 60,
        "exercises": [
            ExerciseDraft(name="Squat", sets=3, reps=10, weight=100),
            ExerciseDraft(name="Deadlift", sets=2, reps=5, weight=170),
        ],
    }
    values.update(overrides)
    return WorkoutDraft(**values)


@pytest.fixture
def gateway():
    return FakeGateway(session=make_session())


@pytest.fixture
def use_case(gateway):
    return LogWorkoutUseCase(gateway=gateway)


# =============================================================================
# Validation
# =============================================================================


class TestValidation:
    @pytest.mark.asyncio
    async def test_missing_date(self, use_case, gateway):
        result = await use_case.execute(make_session(), _draft(date=None))

        assert result.success is False
        assert result.is_validation_error is True
        assert result.message == MISSING_DATE_MESSAGE
        assert gateway.inserts == []

    @pytest.mark.asyncio
    async def test_no_exercises(self, use_case, gateway):
        result = await use_case.execute(make_session(), _draft(exercises=[]))

        assert result.message == NO_EXERCISES_MESSAGE
        assert result.is_validation_error is True
        assert gateway.inserts == []

    @pytest.mark.asyncio
    async def test_only_blank_exercise_names(self, use_case, gateway):
        draft = _draft(exercises=[ExerciseDraft(name="   ", sets=3), ExerciseDraft()])
        result = await use_case.execute(make_session(), draft)

        assert result.message == NO_EXERCISES_MESSAGE
        assert gateway.inserts == []

    @pytest.mark.asyncio
    async def test_date_checked_before_exercises(self, use_case):
        result = await use_case.execute(make_session(), _draft(date=None, exercises=[]))
        assert result.message == MISSING_DATE_MESSAGE


# =============================================================================
# Two-Step Insert
# =============================================================================


class TestInsert:
    @pytest.mark.asyncio
    async def test_workout_then_exercises(self, use_case, gateway):
        session = make_session(user_id="user-42")
        result = await use_case.execute(session, _draft())

        assert result.success is True
        assert result.message == WORKOUT_SAVED_MESSAGE
        assert result.exercise_count == 2
        assert [table for table, _ in gateway.inserts] == ["workouts", "workout_exercises"]

        workout_row = gateway.inserts[0][1][0]
        assert workout_row == {
            "user_id": "user-42",
            "title": "Leg day",
            "focus": "Lower body",
            "date": "2024-01-08",
            "duration_minutes": 60,
        }

        exercise_rows = gateway.inserts[1][1]
        assert [row["workout_id"] for row in exercise_rows] == [result.workout_id] * 2
        assert exercise_rows[0] == {
            "workout_id": result.workout_id,
            "name": "Squat",
            "sets": 3,
            "reps": 10,
            "weight": 100,
        }

    @pytest.mark.asyncio
    async def test_blank_named_rows_are_skipped(self, use_case, gateway):
        draft = _draft(exercises=[
            ExerciseDraft(name="  Bench press ", sets=3, reps=8, weight=80),
            ExerciseDraft(name="", sets=5, reps=5, weight=100),
        ])
        result = await use_case.execute(make_session(), draft)

        assert result.exercise_count == 1
        assert [row["name"] for row in gateway.inserts[1][1]] == ["Bench press"]

    @pytest.mark.asyncio
    async def test_blank_title_and_focus_become_null(self, use_case, gateway):
        await use_case.execute(make_session(), _draft(title="  ", focus=""))

        workout_row = gateway.inserts[0][1][0]
        assert workout_row["title"] is None
        assert workout_row["focus"] is None

    @pytest.mark.asyncio
    async def test_rows_are_stored(self, use_case, gateway):
        result = await use_case.execute(make_session(), _draft())

        assert [w["id"] for w in gateway.rows("workouts")] == [result.workout_id]
        assert len(gateway.rows("workout_exercises")) == 2

    @pytest.mark.asyncio
    async def test_fractional_values_written_as_given(self, use_case, gateway):
        draft = _draft(
            duration_minutes=32.5,
            exercises=[ExerciseDraft(name="Squat", sets=3, reps=7.5, weight=102.5)],
        )

        result = await use_case.execute(make_session(), draft)

        assert result.success
        assert gateway.rows("workouts")[0]["duration_minutes"] == 32.5
        exercise = gateway.rows("workout_exercises")[0]
        assert (exercise["sets"], exercise["reps"], exercise["weight"]) == (3, 7.5, 102.5)
        assert isinstance(exercise["sets"], int)


# =============================================================================
# Failures
# =============================================================================


class TestFailures:
    @pytest.mark.asyncio
    async def test_workout_insert_failure(self, use_case, gateway):
        gateway.fail_insert("workouts", "new row violates row-level security policy")

        result = await use_case.execute(make_session(), _draft())

        assert result.success is False
        assert result.is_partial_write is False
        assert result.workout_id is None
        assert result.message == "new row violates row-level security policy"
        assert [table for table, _ in gateway.inserts] == ["workouts"]

    @pytest.mark.asyncio
    async def test_exercises_insert_failure_leaves_workout(self, use_case, gateway):
        gateway.fail_insert("workout_exercises", "insert failed")

        result = await use_case.execute(make_session(), _draft())

        assert result.success is False
        assert result.is_partial_write is True
        assert result.message == "insert failed"
        assert [w["id"] for w in gateway.rows("workouts")] == [result.workout_id]
        assert gateway.rows("workout_exercises") == []
