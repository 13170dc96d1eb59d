import pytest

from liftlog.adapters.catalog import InMemoryExerciseCatalog, InMemoryMuscleGroupCatalog
from liftlog.models import ErrorKind, Exercise, MuscleGroupInput
from liftlog.services.admin import (
    AdminExerciseService,
    AdminMuscleGroupService,
    validate_catalog_exercise,
    validate_muscle_group_input,
)


class ExplodingPort:
    def __getattr__(self, name):
        def _boom(*args):
            raise RuntimeError("catalog offline")

        return _boom


@pytest.fixture
def catalog() -> InMemoryExerciseCatalog:
    return InMemoryExerciseCatalog()


@pytest.fixture
def exercise_service(catalog) -> AdminExerciseService:
    return AdminExerciseService(catalog)


@pytest.fixture
def group_service(catalog) -> AdminMuscleGroupService:
    return AdminMuscleGroupService(InMemoryMuscleGroupCatalog(catalog))


# --------------- Validators ---------------


def test_validate_catalog_exercise():
    result = validate_catalog_exercise(Exercise(group=" ", name=""))

    assert [e.field for e in result.errors] == ["group", "name"]


@pytest.mark.parametrize("name", ["", "   ", "x" * 51])
def test_validate_muscle_group_input_rejects(name):
    assert validate_muscle_group_input(MuscleGroupInput(name=name)).valid is False


def test_validate_muscle_group_input_accepts():
    assert validate_muscle_group_input(MuscleGroupInput(name="Glutes")).valid is True


# --------------- Exercises ---------------


def test_create_and_fetch_exercise(exercise_service):
    created = exercise_service.create(Exercise(group="BICEPS", name="Curl")).data

    assert exercise_service.get_by_id(created.id).data == created
    assert len(exercise_service.get_all().data) == 4


def test_create_invalid_exercise(exercise_service):
    result = exercise_service.create(Exercise(group="", name="Curl"))

    assert result.kind == ErrorKind.VALIDATION
    assert result.error == "Validation failed: Exercise group is required"
    assert len(exercise_service.get_all().data) == 3


def test_update_invalid_exercise(exercise_service):
    assert exercise_service.update("1", Exercise(group="CHEST", name="")).kind == ErrorKind.VALIDATION


def test_delete_exercise(exercise_service):
    assert exercise_service.delete("1").success is True
    assert exercise_service.get_by_id("1").kind == ErrorKind.NOT_FOUND


def test_exercise_port_exception_becomes_result():
    result = AdminExerciseService(ExplodingPort()).get_all()

    assert result.success is False
    assert result.error == "Failed to load exercises: catalog offline"


# --------------- Muscle groups ---------------


def test_create_muscle_group_upper_cases(group_service):
    created = group_service.create(MuscleGroupInput(name="calves")).data

    assert created.name == "CALVES"
    assert group_service.get_by_name("calves").data == created


def test_create_duplicate_muscle_group(group_service):
    result = group_service.create(MuscleGroupInput(name="Back"))

    assert result.kind == ErrorKind.CONFLICT


def test_create_invalid_muscle_group(group_service):
    assert group_service.create(MuscleGroupInput(name=" ")).kind == ErrorKind.VALIDATION


def test_update_muscle_group(group_service):
    result = group_service.update(5, MuscleGroupInput(name="arms", description="Guns"))

    assert result.data.name == "ARMS"
    assert group_service.get_by_id(5).data.description == "Guns"


def test_delete_referenced_muscle_group_is_conflict(group_service):
    result = group_service.delete(1)

    assert result.kind == ErrorKind.CONFLICT
    assert group_service.get_by_id(1).success is True


def test_muscle_group_port_exception_becomes_result():
    result = AdminMuscleGroupService(ExplodingPort()).delete(1)

    assert result.error == "Failed to delete muscle group: catalog offline"
