import math

import pytest

from liftlog.domain import validators as v
from liftlog.models import Exercise, ExerciseLogEntry, ExerciseSet

# --------------- Field validators ---------------


@pytest.mark.parametrize(
    "name, expected",
    [
        ("Bench Press", True),
        ("  Squat  ", True),
        ("x" * 100, True),
        ("x" * 101, False),
        ("", False),
        ("   ", False),
        (None, False),
        (42, False),
    ],
)
def test_validate_exercise_name(name, expected):
    assert v.validate_exercise_name(name) is expected


@pytest.mark.parametrize(
    "group, expected",
    [("CHEST", True), ("", False), ("  ", False), (None, False), (["CHEST"], False)],
)
def test_validate_exercise_group(group, expected):
    assert v.validate_exercise_group(group) is expected


@pytest.mark.parametrize(
    "weight, expected",
    [
        (0.5, True),
        (1000, True),
        (1000.01, False),
        (0, False),
        (-5, False),
        (math.nan, False),
        (math.inf, False),
        ("100", False),
        (True, False),
        (None, False),
    ],
)
def test_validate_weight(weight, expected):
    assert v.validate_weight(weight) is expected


@pytest.mark.parametrize(
    "reps, expected",
    [
        (1, True),
        (1000, True),
        (10.0, True),
        (1001, False),
        (0, False),
        (-1, False),
        (8.5, False),
        (math.nan, False),
        ("10", False),
        (None, False),
    ],
)
def test_validate_reps(reps, expected):
    assert v.validate_reps(reps) is expected


# --------------- Sets ---------------


def test_validate_sets_empty():
    result = v.validate_sets([])

    assert result.valid is False
    assert [e.field for e in result.errors] == ["sets"]
    assert result.messages == ["Must have at least one set"]


def test_validate_sets_too_many_reports_only_the_count():
    sets = [{"weight": -1, "reps": 0}] * 51

    result = v.validate_sets(sets)

    assert len(result.errors) == 1
    assert "too many sets" in result.messages[0]


def test_validate_sets_exactly_fifty_is_allowed():
    result = v.validate_sets([ExerciseSet(weight=50, reps=5)] * 50)

    assert result.valid is True


def test_validate_sets_reports_each_bad_field_with_index():
    sets = [
        {"weight": 100, "reps": 10},
        {"weight": 0, "reps": 8.5},
        {"weight": 60, "reps": 0},
    ]

    result = v.validate_sets(sets)

    assert [e.field for e in result.errors] == [
        "sets[1].weight",
        "sets[1].reps",
        "sets[2].reps",
    ]
    assert result.messages[0].startswith("Set 2: Weight must be a positive number")
    assert result.messages[2].startswith("Set 3: Reps must be a positive whole number")


# --------------- Whole entry ---------------


def test_validate_exercise_valid(entry_factory):
    result = v.validate_exercise(entry_factory())

    assert result.valid is True
    assert result.errors == []


def test_validate_exercise_empty_entry_reports_every_rule_in_order():
    entry = ExerciseLogEntry(
        timestamp="", exercise=Exercise(group="", name=""), sets=[]
    )

    result = v.validate_exercise(entry)

    assert result.valid is False
    assert [e.field for e in result.errors] == [
        "timestamp",
        "exercise.group",
        "exercise.name",
        "sets",
    ]
    assert "Exercise group is required" in result.messages
    assert any("Exercise name is required" in m for m in result.messages)
    assert "Must have at least one set" in result.messages


def test_validate_exercise_does_not_raise_on_garbage():
    class Garbage:
        pass

    result = v.validate_exercise(Garbage())

    assert result.valid is False
    assert len(result.errors) == 4


# --------------- Workout plans ---------------


def test_validate_workout_plan_accepts_valid_plan(plan_factory):
    assert v.validate_workout_plan(plan_factory()).valid is True


def test_validate_workout_plan_requires_name_and_duration(plan_factory):
    result = v.validate_workout_plan(plan_factory(name="  ", duration=0))

    assert [e.field for e in result.errors] == ["name", "duration"]
    assert result.messages == ["Plan name is required", "Duration must be at least 1"]


def test_validate_workout_plan_checks_each_target(plan_factory):
    plan = plan_factory()
    day = plan.workout_days[0]
    bad = day.exercises[0].model_copy(
        update={
            "exercise": day.exercises[0].exercise.model_copy(update={"id": ""}),
            "sets": 0,
        }
    )
    plan = plan.model_copy(
        update={"workout_days": [day.model_copy(update={"exercises": [day.exercises[0], bad]})]}
    )

    result = v.validate_workout_plan(plan)

    assert [e.field for e in result.errors] == [
        "workoutDayDTOList[0].exercises[1].exercise",
        "workoutDayDTOList[0].exercises[1].sets",
    ]
    assert result.errors[0].message == "Day 1, exercise 2: Exercise is required"


def test_validate_workout_plan_min_reps_above_max(plan_factory):
    plan = plan_factory()
    day = plan.workout_days[0]
    target = day.exercises[0].model_copy(update={"min_reps": 15, "max_reps": 10})
    plan = plan.model_copy(
        update={"workout_days": [day.model_copy(update={"exercises": [target]})]}
    )

    result = v.validate_workout_plan(plan)

    assert result.joined() == "Day 1, exercise 1: Max reps cannot be less than min reps"


def test_validate_workout_plan_allows_days_without_exercises(plan_factory):
    assert v.validate_workout_plan(plan_factory(workout_days=[])).valid is True
