import pytest

from liftlog.adapters.storage import LocalStorageAdapter
from liftlog.adapters.workout_plans import LocalWorkoutPlanAdapter
from liftlog.models import ErrorKind
from liftlog.services.workout_plan import WorkoutPlanService


class ExplodingPlans:
    def __getattr__(self, name):
        def _boom(*args):
            raise RuntimeError("plans offline")

        return _boom


@pytest.fixture
def service(user) -> WorkoutPlanService:
    svc = WorkoutPlanService(LocalWorkoutPlanAdapter(LocalStorageAdapter()))
    svc.set_current_user(user)
    return svc


def test_requires_signed_in_user(plan_factory):
    svc = WorkoutPlanService(LocalWorkoutPlanAdapter(LocalStorageAdapter()))

    result = svc.create(plan_factory())

    assert result.kind == ErrorKind.AUTHORIZATION
    assert result.error == "Workout plans require a signed-in user"


def test_create_then_get(service, plan_factory):
    created = service.create(plan_factory()).data

    assert service.get_by_id(created.id).data == created
    assert service.get_all().data == [created]


def test_create_invalid_plan_is_not_stored(service, plan_factory):
    result = service.create(plan_factory(name="", duration=0))

    assert result.kind == ErrorKind.VALIDATION
    assert result.error == (
        "Validation failed: Plan name is required, Duration must be at least 1"
    )
    assert service.get_all().data == []


def test_update_validates_first(service, plan_factory):
    created = service.create(plan_factory()).data

    result = service.update(created.id, plan_factory(duration=-1))

    assert result.kind == ErrorKind.VALIDATION
    assert service.get_by_id(created.id).data.duration == 8


def test_get_active_plan(service, plan_factory):
    assert service.get_active_plan().data is None

    service.create(plan_factory(name="Old"))
    active = service.create(plan_factory(name="Current", is_active=True)).data

    assert service.get_active_plan().data == active


def test_delete(service, plan_factory):
    created = service.create(plan_factory()).data

    assert service.delete(created.id).success is True
    assert service.get_by_id(created.id).kind == ErrorKind.NOT_FOUND


@pytest.mark.parametrize(
    "call, message",
    [
        (lambda s, p: s.get_all(), "Failed to load workout plans: plans offline"),
        (lambda s, p: s.get_by_id("x"), "Failed to load workout plan: plans offline"),
        (lambda s, p: s.create(p), "Failed to create workout plan: plans offline"),
        (lambda s, p: s.update("x", p), "Failed to update workout plan: plans offline"),
        (lambda s, p: s.delete("x"), "Failed to delete workout plan: plans offline"),
    ],
)
def test_port_exceptions_become_results(user, plan_factory, call, message):
    svc = WorkoutPlanService(ExplodingPlans())
    svc.set_current_user(user)

    result = call(svc, plan_factory())

    assert result.success is False
    assert result.kind == ErrorKind.PORT_FAILURE
    assert result.error == message


def test_active_plan_propagates_failure(user):
    svc = WorkoutPlanService(ExplodingPlans())
    svc.set_current_user(user)

    assert svc.get_active_plan().error == "Failed to load workout plans: plans offline"
