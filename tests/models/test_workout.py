"""Tests for the workout session models."""

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from ironledger.models import (
    ExerciseSet,
    LoggedExercise,
    WorkoutSession,
    workout_full_name,
    workout_short_name,
)
from tests._factories import SetFactory, ExerciseFactory, SessionFactory


class TestExerciseSet:
    """Tests for ExerciseSet."""

    def test_volume_of_completed_working_set(self):
        exercise_set = SetFactory().make({"weight": 100.0, "reps": 5})
        assert exercise_set.volume() == 500.0

    def test_volume_ignores_incomplete_sets(self):
        exercise_set = SetFactory().make({"weight": 100.0, "reps": 5, "completed": False})
        assert exercise_set.volume() == 0.0

    def test_volume_ignores_warmups(self):
        exercise_set = SetFactory().make({"weight": 100.0, "reps": 5, "set_type": "warmup"})
        assert exercise_set.volume() == 0.0

    def test_volume_with_missing_weight_or_reps(self):
        factory = SetFactory()
        assert factory.make({"weight": None}).volume() == 0.0
        assert factory.make({"reps": None}).volume() == 0.0

    def test_time_based(self):
        plank = SetFactory().make({"weight": None, "reps": None, "duration_seconds": 60})
        assert plank.is_time_based
        assert plank.volume() == 0.0

    def test_rejects_negative_values(self):
        with pytest.raises(ValidationError):
            ExerciseSet(reps=-1)
        with pytest.raises(ValidationError):
            ExerciseSet(weight=-5.0)

    def test_defaults(self):
        exercise_set = ExerciseSet()
        assert exercise_set.set_type == "working"
        assert not exercise_set.completed
        assert exercise_set.reps is None and exercise_set.weight is None


class TestLoggedExercise:
    """Tests for LoggedExercise."""

    @pytest.mark.parametrize(
        "category,expected",
        [("main_lift", 150), ("compound", 90), ("accessory", 60)],
    )
    def test_rest_defaults_from_category(self, category, expected):
        exercise = LoggedExercise(name="X", category=category)
        assert exercise.rest_seconds == expected

    def test_rest_override(self):
        exercise = LoggedExercise(name="X", category="main_lift", rest_seconds=200)
        assert exercise.rest_seconds == 200

    def test_best_set_compares_weight_then_reps(self):
        factory = SetFactory()
        heavy = factory.make({"weight": 145.0, "reps": 3})
        sets = [
            factory.make({"weight": 140.0, "reps": 8}),
            heavy,
            factory.make({"weight": 145.0, "reps": 2}),
        ]
        exercise = ExerciseFactory().make(sets=sets)
        assert exercise.best_set() == heavy

    def test_best_set_skips_warmups_incomplete_and_partial_sets(self):
        factory = SetFactory()
        counted = factory.make({"weight": 100.0, "reps": 5})
        sets = [
            factory.make({"weight": 300.0, "reps": 5, "set_type": "warmup"}),
            factory.make({"weight": 250.0, "reps": 5, "completed": False}),
            factory.make({"weight": 200.0, "reps": None}),
            counted,
        ]
        exercise = ExerciseFactory().make(sets=sets)
        assert exercise.best_set() == counted

    def test_best_set_none_without_candidates(self):
        factory = SetFactory()
        exercise = ExerciseFactory().make(sets=[factory.make({"completed": False})])
        assert exercise.best_set() is None

    def test_best_set_tie_keeps_first(self):
        factory = SetFactory()
        first = factory.make({"weight": 100.0, "reps": 5})
        second = factory.make({"weight": 100.0, "reps": 5})
        exercise = ExerciseFactory().make(sets=[first, second])
        assert exercise.best_set().id == first.id

    def test_total_volume(self):
        factory = SetFactory()
        sets = [
            factory.make({"weight": 100.0, "reps": 5}),  # 500
            factory.make({"weight": 100.0, "reps": 3}),  # 300
            factory.make({"weight": 60.0, "reps": 5, "set_type": "warmup"}),  # 0
        ]
        exercise = ExerciseFactory().make(sets=sets)
        assert exercise.total_volume() == 800.0

    def test_find_set(self):
        exercise = ExerciseFactory().make()
        target = exercise.sets[1]
        assert exercise.find_set(target.id) == target
        assert exercise.find_set(SetFactory().make().id) is None


class TestWorkoutSession:
    """Tests for WorkoutSession."""

    def test_end_time_requires_completed(self):
        now = datetime(2024, 1, 15, tzinfo=timezone.utc)
        with pytest.raises(ValidationError):
            WorkoutSession(workout_type="A", start_time=now, end_time=now, completed=False)
        with pytest.raises(ValidationError):
            WorkoutSession(workout_type="A", start_time=now, completed=True)

    def test_duration(self):
        session = SessionFactory().make()
        assert session.duration_seconds() == 3600

    def test_duration_undefined_in_progress(self):
        session = WorkoutSession(
            workout_type="B", start_time=datetime(2024, 1, 15, tzinfo=timezone.utc)
        )
        assert session.duration_seconds() is None

    def test_total_volume_across_exercises(self):
        set_factory = SetFactory()
        exercise_factory = ExerciseFactory()
        session = SessionFactory().make(
            exercises=[
                exercise_factory.make(
                    {"name": "Squat"},
                    sets=[set_factory.make({"weight": 100.0, "reps": 5})] * 3,
                ),
                exercise_factory.make(
                    {"name": "Leg Curl", "category": "accessory"},
                    sets=[set_factory.make({"weight": 50.0, "reps": 10})] * 2,
                ),
            ]
        )
        assert session.total_volume() == 2500.0
        assert session.total_sets() == 5

    def test_main_lift(self):
        exercise_factory = ExerciseFactory()
        accessory = exercise_factory.make({"name": "Cable Fly", "category": "accessory"})
        main = exercise_factory.make({"name": "Bench Press"})
        session = SessionFactory().make(exercises=[accessory, main])
        assert session.main_lift() == main

    def test_rejects_unknown_workout_type(self):
        with pytest.raises(ValidationError):
            WorkoutSession(
                workout_type="D", start_time=datetime.now(timezone.utc) - timedelta(hours=1)
            )


def test_workout_names():
    assert workout_short_name("B") == "Workout B"
    assert workout_full_name("A") == "Workout A – Bench Focus"
    assert workout_full_name("C") == "Workout C – OHP + Back"
