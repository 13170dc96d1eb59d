from liftlog.adapters.workout_plans import WorkoutPlanPort
from liftlog.domain.validators import validate_workout_plan
from liftlog.models import ErrorKind, Result, User, WorkoutPlan
from liftlog.utils.log import logger


class WorkoutPlanService:
    """
    CRUD over the signed-in user's workout plans. Like ExerciseService it
    holds a `current_user` that the composition root keeps in sync.
    """

    def __init__(self, port: WorkoutPlanPort):
        self._port = port
        self.current_user: User | None = None

    def set_current_user(self, user: User | None) -> None:
        self.current_user = user

    def _call(self, action: str, fn, *args) -> Result:
        if self.current_user is None:
            return Result.err(
                "Workout plans require a signed-in user", kind=ErrorKind.AUTHORIZATION
            )
        try:
            return fn(self.current_user.id, *args)
        except Exception as e:
            logger.exception(f"Workout plan port raised during {action}")
            return Result.err(f"Failed to {action}: {e}")

    @staticmethod
    def _validation_error(plan: WorkoutPlan) -> Result | None:
        validation = validate_workout_plan(plan)
        if validation.valid:
            return None
        return Result.err(
            f"Validation failed: {validation.joined()}", kind=ErrorKind.VALIDATION
        )

    def get_all(self) -> Result[list[WorkoutPlan]]:
        return self._call("load workout plans", self._port.get_all)

    def get_by_id(self, plan_id: str) -> Result[WorkoutPlan]:
        return self._call("load workout plan", self._port.get_by_id, plan_id)

    def get_active_plan(self) -> Result[WorkoutPlan | None]:
        """The first plan marked active, or None when there is none."""
        result = self.get_all()
        if not result.success:
            return result
        active = next((p for p in result.data or [] if p.is_active), None)
        return Result.ok(active)

    def create(self, plan: WorkoutPlan) -> Result[WorkoutPlan]:
        invalid = self._validation_error(plan)
        if invalid:
            return invalid
        return self._call("create workout plan", self._port.create, plan)

    def update(self, plan_id: str, plan: WorkoutPlan) -> Result[WorkoutPlan]:
        invalid = self._validation_error(plan)
        if invalid:
            return invalid
        return self._call("update workout plan", self._port.update, plan_id, plan)

    def delete(self, plan_id: str) -> Result[None]:
        return self._call("delete workout plan", self._port.delete, plan_id)
