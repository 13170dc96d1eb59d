import uuid
from typing import Any, Protocol

from liftlog.adapters.base import ApiAdapter
from liftlog.adapters.storage import StoragePort
from liftlog.models import ErrorKind, Result, WorkoutPlan
from liftlog.utils.log import logger

WORKOUT_PLAN_KEY_PREFIX = "workout_plans_"
WORKOUT_PLAN_NOT_FOUND = "Workout plan not found"


class WorkoutPlanPort(Protocol):
    def get_all(self, user_id: str) -> Result[list[WorkoutPlan]]: ...
    def get_by_id(self, user_id: str, plan_id: str) -> Result[WorkoutPlan]: ...
    def create(self, user_id: str, plan: WorkoutPlan) -> Result[WorkoutPlan]: ...
    def update(
        self, user_id: str, plan_id: str, plan: WorkoutPlan
    ) -> Result[WorkoutPlan]: ...
    def delete(self, user_id: str, plan_id: str) -> Result[None]: ...


# ------------------------- LOCAL -------------------------


class LocalWorkoutPlanAdapter:
    """
    Plans kept in local storage, one list per user under
    `workout_plans_<user id>`. Storage errors propagate as StorageError.
    """

    def __init__(self, storage: StoragePort):
        self._storage = storage

    @staticmethod
    def _key(user_id: str) -> str:
        return f"{WORKOUT_PLAN_KEY_PREFIX}{user_id}"

    def _load(self, user_id: str) -> list[WorkoutPlan]:
        raw = self._storage.load(self._key(user_id))
        if not isinstance(raw, list):
            return []

        plans = []
        for item in raw:
            try:
                plans.append(WorkoutPlan.model_validate(item))
            except ValueError as e:
                logger.warning(f"Skipping malformed workout plan user={user_id}: {e}")
        return plans

    def _save(self, user_id: str, plans: list[WorkoutPlan]) -> None:
        self._storage.save(self._key(user_id), [p.to_api() for p in plans])

    @staticmethod
    def _with_id(plan: WorkoutPlan, plan_id: str) -> WorkoutPlan:
        days = [d.model_copy(update={"workout_plan_id": plan_id}) for d in plan.workout_days]
        return plan.model_copy(update={"id": plan_id, "workout_days": days})

    def get_all(self, user_id: str) -> Result[list[WorkoutPlan]]:
        return Result.ok(self._load(user_id))

    def get_by_id(self, user_id: str, plan_id: str) -> Result[WorkoutPlan]:
        for plan in self._load(user_id):
            if plan.id == plan_id:
                return Result.ok(plan)
        return Result.err(WORKOUT_PLAN_NOT_FOUND, kind=ErrorKind.NOT_FOUND)

    def create(self, user_id: str, plan: WorkoutPlan) -> Result[WorkoutPlan]:
        created = self._with_id(plan, uuid.uuid4().hex)
        self._save(user_id, [*self._load(user_id), created])
        return Result.ok(created)

    def update(self, user_id: str, plan_id: str, plan: WorkoutPlan) -> Result[WorkoutPlan]:
        plans = self._load(user_id)
        for i, existing in enumerate(plans):
            if existing.id == plan_id:
                plans[i] = self._with_id(plan, plan_id)
                self._save(user_id, plans)
                return Result.ok(plans[i])
        return Result.err(WORKOUT_PLAN_NOT_FOUND, kind=ErrorKind.NOT_FOUND)

    def delete(self, user_id: str, plan_id: str) -> Result[None]:
        plans = self._load(user_id)
        remaining = [p for p in plans if p.id != plan_id]
        if len(remaining) == len(plans):
            return Result.err(WORKOUT_PLAN_NOT_FOUND, kind=ErrorKind.NOT_FOUND)
        self._save(user_id, remaining)
        return Result.ok(None)


# ------------------------- REMOTE -------------------------


def _parse_plans(body: Any) -> list[WorkoutPlan]:
    return [WorkoutPlan.model_validate(item) for item in body]


class ApiWorkoutPlanAdapter(ApiAdapter):
    resource_name = "Workout plan"
    forbidden_message = "Access denied"

    def _plans_path(self, user_id: str) -> str:
        return f"/api/v1/users/{user_id}/workout-plans"

    def get_all(self, user_id: str) -> Result[list[WorkoutPlan]]:
        return self._fetch_with_auth("GET", self._plans_path(user_id), _parse_plans)

    def get_by_id(self, user_id: str, plan_id: str) -> Result[WorkoutPlan]:
        return self._fetch_with_auth(
            "GET", f"{self._plans_path(user_id)}/{plan_id}", WorkoutPlan.model_validate
        )

    def create(self, user_id: str, plan: WorkoutPlan) -> Result[WorkoutPlan]:
        return self._fetch_with_auth(
            "POST",
            self._plans_path(user_id),
            WorkoutPlan.model_validate,
            json=plan.to_api(),
        )

    def update(self, user_id: str, plan_id: str, plan: WorkoutPlan) -> Result[WorkoutPlan]:
        return self._fetch_with_auth(
            "PUT",
            f"{self._plans_path(user_id)}/{plan_id}",
            WorkoutPlan.model_validate,
            json=plan.to_api(),
        )

    def delete(self, user_id: str, plan_id: str) -> Result[None]:
        return self._fetch_with_auth(
            "DELETE", f"{self._plans_path(user_id)}/{plan_id}", lambda body: None
        )
