from .exercise import (
    EXERCISE_KEY_PREFIX,
    CatalogExercise,
    Exercise,
    ExerciseDisplay,
    ExerciseLogEntry,
    ExerciseSet,
    ExerciseStats,
)
from .muscle_group import MuscleGroup, MuscleGroupInput
from .result import ErrorKind, Result
from .user import AuthSession, LoginCredentials, RegisterCredentials, Role, User
from .validation import FieldError, ValidationResult
from .workout_plan import (
    DurationUnit,
    ExerciseTarget,
    TargetExercise,
    WorkoutDay,
    WorkoutPlan,
)

__all__ = [
    "EXERCISE_KEY_PREFIX",
    "AuthSession",
    "CatalogExercise",
    "DurationUnit",
    "ErrorKind",
    "Exercise",
    "ExerciseDisplay",
    "ExerciseLogEntry",
    "ExerciseSet",
    "ExerciseStats",
    "ExerciseTarget",
    "FieldError",
    "LoginCredentials",
    "MuscleGroup",
    "MuscleGroupInput",
    "RegisterCredentials",
    "Result",
    "Role",
    "TargetExercise",
    "User",
    "ValidationResult",
    "WorkoutDay",
    "WorkoutPlan",
]
