from pydantic import BaseModel, ConfigDict, Field

EXERCISE_KEY_PREFIX = "exercise_"


class ExerciseSet(BaseModel):
    # Left unconstrained so invalid sets reach the validators and get reported
    weight: float
    reps: int | float


class Exercise(BaseModel):
    group: str
    name: str


class ExerciseLogEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    timestamp: str
    exercise: Exercise
    sets: list[ExerciseSet] = Field(default_factory=list)
    failure: bool = False


class ExerciseDisplay(BaseModel):
    exercise_summary: str
    formatted_timestamp: str
    set_count: int
    total_reps: int | float
    total_volume: str
    average_weight: str
    max_weight: str
    failure: bool


class ExerciseStats(BaseModel):
    total_exercises: int = 0
    total_sets: int = 0
    total_volume: float = 0


class CatalogExercise(Exercise):
    """An exercise in the admin-managed reference catalog."""

    # The backend sends numeric ids
    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: str
