from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class DurationUnit(str, Enum):
    WEEKS = "WEEKS"
    MONTHS = "MONTHS"


class TargetExercise(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: str
    name: str
    group: str


class ExerciseTarget(BaseModel):
    """Prescribed sets and rep range for one exercise on a workout day."""

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    id: str | None = None
    exercise: TargetExercise
    sets: int
    min_reps: int = Field(alias="minReps")
    max_reps: int = Field(alias="maxReps")


class WorkoutDay(BaseModel):
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    id: str | None = None
    description: str = ""
    workout_plan_id: str | None = Field(default=None, alias="workoutPlanId")
    exercises: list[ExerciseTarget] = Field(default_factory=list)


class WorkoutPlan(BaseModel):
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    id: str | None = None
    name: str
    duration: int
    duration_unit: DurationUnit = Field(default=DurationUnit.WEEKS, alias="durationUnit")
    is_active: bool = Field(default=False, alias="isActive")
    workout_days: list[WorkoutDay] = Field(
        default_factory=list, alias="workoutDayDTOList"
    )

    def to_api(self) -> dict:
        """Backend JSON shape, camelCase keys, unset ids left out."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
