from liftlog.models import (
    CatalogExercise,
    Exercise,
    ExerciseLogEntry,
    ExerciseSet,
    MuscleGroup,
)
from liftlog.utils.dates import dt_to_iso, now


def build_muscle_groups() -> list[MuscleGroup]:
    """
    Default muscle groups for the in-memory catalog.
    """
    return [
        MuscleGroup(id=1, name="CHEST", description="Chest exercises for pectoral muscles"),
        MuscleGroup(id=2, name="BACK", description="Back exercises for latissimus dorsi"),
        MuscleGroup(id=3, name="LEGS", description="Leg exercises for quadriceps and hamstrings"),
        MuscleGroup(id=4, name="SHOULDERS", description="Shoulder exercises for deltoid muscles"),
        MuscleGroup(id=5, name="BICEPS", description="Bicep exercises for biceps brachii"),
        MuscleGroup(id=6, name="TRICEPS", description="Tricep exercises for triceps brachii"),
    ]


def build_catalog_exercises() -> list[CatalogExercise]:
    return [
        CatalogExercise(id="1", group="CHEST", name="Bench Press"),
        CatalogExercise(id="2", group="LEGS", name="Squat"),
        CatalogExercise(id="3", group="BACK", name="Deadlift"),
    ]


def build_demo_logs() -> list[ExerciseLogEntry]:
    """
    A short history of valid logs for seeding a local store.
    """
    ts = dt_to_iso(now())
    return [
        ExerciseLogEntry(
            timestamp=ts,
            exercise=Exercise(group="CHEST", name="Bench Press"),
            sets=[ExerciseSet(weight=60, reps=10), ExerciseSet(weight=60, reps=8)],
            failure=False,
        ),
        ExerciseLogEntry(
            timestamp=ts,
            exercise=Exercise(group="LEGS", name="Squat"),
            sets=[ExerciseSet(weight=100, reps=5)] * 3,
            failure=False,
        ),
        ExerciseLogEntry(
            timestamp=ts,
            exercise=Exercise(group="BACK", name="Deadlift"),
            sets=[ExerciseSet(weight=140, reps=5), ExerciseSet(weight=150, reps=3)],
            failure=True,
        ),
    ]
