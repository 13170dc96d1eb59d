from liftlog.adapters.catalog import ExerciseCatalogPort, MuscleGroupPort
from liftlog.domain.validators import (
    validate_exercise_group,
    validate_exercise_name,
)
from liftlog.models import (
    CatalogExercise,
    ErrorKind,
    Exercise,
    FieldError,
    MuscleGroup,
    MuscleGroupInput,
    Result,
    ValidationResult,
)
from liftlog.utils.log import logger

MAX_MUSCLE_GROUP_NAME_LENGTH = 50


def _validation_error(validation: ValidationResult) -> Result:
    return Result.err(
        f"Validation failed: {validation.joined()}", kind=ErrorKind.VALIDATION
    )


def validate_catalog_exercise(exercise: Exercise) -> ValidationResult:
    errors = []
    if not validate_exercise_group(exercise.group):
        errors.append(FieldError(field="group", message="Exercise group is required"))
    if not validate_exercise_name(exercise.name):
        errors.append(FieldError(field="name", message="Exercise name is required"))
    return ValidationResult(errors=errors)


def validate_muscle_group_input(data: MuscleGroupInput) -> ValidationResult:
    name = data.name.strip() if isinstance(data.name, str) else ""
    if not name or len(name) > MAX_MUSCLE_GROUP_NAME_LENGTH:
        return ValidationResult(
            errors=[
                FieldError(
                    field="name",
                    message=f"Muscle group name is required (max {MAX_MUSCLE_GROUP_NAME_LENGTH} characters)",
                )
            ]
        )
    return ValidationResult()


class AdminExerciseService:
    """Admin CRUD over the exercise catalog."""

    def __init__(self, port: ExerciseCatalogPort):
        self._port = port

    def _call(self, action: str, fn, *args) -> Result:
        try:
            return fn(*args)
        except Exception as e:
            logger.exception(f"Exercise catalog port raised during {action}")
            return Result.err(f"Failed to {action}: {e}")

    def get_all(self) -> Result[list[CatalogExercise]]:
        return self._call("load exercises", self._port.get_all)

    def get_by_id(self, exercise_id: str) -> Result[CatalogExercise]:
        return self._call("load exercise", self._port.get_by_id, exercise_id)

    def create(self, exercise: Exercise) -> Result[CatalogExercise]:
        validation = validate_catalog_exercise(exercise)
        if not validation.valid:
            return _validation_error(validation)
        return self._call("create exercise", self._port.create, exercise)

    def update(self, exercise_id: str, exercise: Exercise) -> Result[CatalogExercise]:
        validation = validate_catalog_exercise(exercise)
        if not validation.valid:
            return _validation_error(validation)
        return self._call("update exercise", self._port.update, exercise_id, exercise)

    def delete(self, exercise_id: str) -> Result[None]:
        return self._call("delete exercise", self._port.delete, exercise_id)


class AdminMuscleGroupService:
    """
    Admin CRUD over muscle groups. Names are sent upper case; uniqueness and
    referential integrity are enforced by the port and come back as conflicts.
    """

    def __init__(self, port: MuscleGroupPort):
        self._port = port

    def _call(self, action: str, fn, *args) -> Result:
        try:
            return fn(*args)
        except Exception as e:
            logger.exception(f"Muscle group port raised during {action}")
            return Result.err(f"Failed to {action}: {e}")

    def get_all(self) -> Result[list[MuscleGroup]]:
        return self._call("load muscle groups", self._port.get_all)

    def get_by_id(self, group_id: int) -> Result[MuscleGroup]:
        return self._call("load muscle group", self._port.get_by_id, group_id)

    def get_by_name(self, name: str) -> Result[MuscleGroup]:
        return self._call("load muscle group", self._port.get_by_name, name)

    def create(self, data: MuscleGroupInput) -> Result[MuscleGroup]:
        validation = validate_muscle_group_input(data)
        if not validation.valid:
            return _validation_error(validation)
        return self._call("create muscle group", self._port.create, data.normalised())

    def update(self, group_id: int, data: MuscleGroupInput) -> Result[MuscleGroup]:
        validation = validate_muscle_group_input(data)
        if not validation.valid:
            return _validation_error(validation)
        return self._call(
            "update muscle group", self._port.update, group_id, data.normalised()
        )

    def delete(self, group_id: int) -> Result[None]:
        return self._call("delete muscle group", self._port.delete, group_id)
