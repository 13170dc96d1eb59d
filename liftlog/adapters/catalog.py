from typing import Protocol
from urllib.parse import quote

import requests

from liftlog.adapters.base import DEFAULT_TIMEOUT_SECONDS, ApiAdapter, TokenProvider
from liftlog.models import (
    CatalogExercise,
    ErrorKind,
    Exercise,
    MuscleGroup,
    MuscleGroupInput,
    Result,
)
from liftlog.utils.log import logger
from liftlog.utils.seed_data import build_catalog_exercises, build_muscle_groups


class ExerciseCatalogPort(Protocol):
    def get_all(self) -> Result[list[CatalogExercise]]: ...
    def get_by_id(self, exercise_id: str) -> Result[CatalogExercise]: ...
    def create(self, exercise: Exercise) -> Result[CatalogExercise]: ...
    def update(self, exercise_id: str, exercise: Exercise) -> Result[CatalogExercise]: ...
    def delete(self, exercise_id: str) -> Result[None]: ...


class PublicExercisePort(Protocol):
    def get_all(self) -> Result[list[CatalogExercise]]: ...
    def get_by_id(self, exercise_id: str) -> Result[CatalogExercise]: ...


class PublicMuscleGroupPort(Protocol):
    def get_all(self) -> Result[list[MuscleGroup]]: ...
    def get_by_id(self, group_id: int) -> Result[MuscleGroup]: ...
    def get_by_name(self, name: str) -> Result[MuscleGroup]: ...


class MuscleGroupPort(Protocol):
    def get_all(self) -> Result[list[MuscleGroup]]: ...
    def get_by_id(self, group_id: int) -> Result[MuscleGroup]: ...
    def get_by_name(self, name: str) -> Result[MuscleGroup]: ...
    def create(self, data: MuscleGroupInput) -> Result[MuscleGroup]: ...
    def update(self, group_id: int, data: MuscleGroupInput) -> Result[MuscleGroup]: ...
    def delete(self, group_id: int) -> Result[None]: ...


EXERCISE_NOT_FOUND = "Exercise not found"
MUSCLE_GROUP_NOT_FOUND = "Muscle group not found"
DUPLICATE_MUSCLE_GROUP = "Muscle group with this name already exists"
REFERENCED_DELETE = "Cannot delete muscle group because it is referenced by exercises"
REFERENCED_RENAME = "Cannot rename muscle group because it is referenced by exercises"


# ------------------------- IN-MEMORY -------------------------


class InMemoryExerciseCatalog:
    """
    Exercise catalog held in process memory, seeded with a few lifts.
    """

    def __init__(self, exercises: list[CatalogExercise] | None = None):
        self._exercises: list[CatalogExercise] = (
            list(exercises) if exercises is not None else build_catalog_exercises()
        )
        self._next_id = max((int(e.id) for e in self._exercises if e.id.isdigit()), default=0) + 1

    def references_group(self, group_name: str) -> bool:
        wanted = group_name.upper()
        return any(e.group.upper() == wanted for e in self._exercises)

    def _index_of(self, exercise_id: str) -> int | None:
        for i, e in enumerate(self._exercises):
            if e.id == exercise_id:
                return i
        return None

    def get_all(self) -> Result[list[CatalogExercise]]:
        return Result.ok(list(self._exercises))

    def get_by_id(self, exercise_id: str) -> Result[CatalogExercise]:
        index = self._index_of(exercise_id)
        if index is None:
            return Result.err(EXERCISE_NOT_FOUND, kind=ErrorKind.NOT_FOUND)
        return Result.ok(self._exercises[index])

    def create(self, exercise: Exercise) -> Result[CatalogExercise]:
        created = CatalogExercise(
            id=str(self._next_id), group=exercise.group, name=exercise.name
        )
        self._next_id += 1
        self._exercises.append(created)
        return Result.ok(created)

    def update(self, exercise_id: str, exercise: Exercise) -> Result[CatalogExercise]:
        index = self._index_of(exercise_id)
        if index is None:
            return Result.err(EXERCISE_NOT_FOUND, kind=ErrorKind.NOT_FOUND)
        updated = CatalogExercise(id=exercise_id, group=exercise.group, name=exercise.name)
        self._exercises[index] = updated
        return Result.ok(updated)

    def delete(self, exercise_id: str) -> Result[None]:
        index = self._index_of(exercise_id)
        if index is None:
            return Result.err(EXERCISE_NOT_FOUND, kind=ErrorKind.NOT_FOUND)
        del self._exercises[index]
        return Result.ok(None)


class InMemoryMuscleGroupCatalog:
    """
    Muscle groups held in process memory.

    Names are unique ignoring case and stored upper case. A group still used
    by an exercise in `exercises` cannot be deleted.
    """

    def __init__(
        self,
        exercises: InMemoryExerciseCatalog,
        groups: list[MuscleGroup] | None = None,
    ):
        self._exercises = exercises
        self._groups: list[MuscleGroup] = (
            list(groups) if groups is not None else build_muscle_groups()
        )
        self._next_id = max((g.id for g in self._groups), default=0) + 1

    def _index_of(self, group_id: int) -> int | None:
        for i, g in enumerate(self._groups):
            if g.id == group_id:
                return i
        return None

    def _name_taken(self, name: str, *, exclude_id: int | None = None) -> bool:
        wanted = name.upper()
        return any(
            g.name.upper() == wanted and g.id != exclude_id for g in self._groups
        )

    def get_all(self) -> Result[list[MuscleGroup]]:
        return Result.ok(list(self._groups))

    def get_by_id(self, group_id: int) -> Result[MuscleGroup]:
        index = self._index_of(group_id)
        if index is None:
            return Result.err(MUSCLE_GROUP_NOT_FOUND, kind=ErrorKind.NOT_FOUND)
        return Result.ok(self._groups[index])

    def get_by_name(self, name: str) -> Result[MuscleGroup]:
        wanted = name.strip().upper()
        for g in self._groups:
            if g.name.upper() == wanted:
                return Result.ok(g)
        return Result.err(MUSCLE_GROUP_NOT_FOUND, kind=ErrorKind.NOT_FOUND)

    def create(self, data: MuscleGroupInput) -> Result[MuscleGroup]:
        data = data.normalised()
        if self._name_taken(data.name):
            return Result.err(DUPLICATE_MUSCLE_GROUP, kind=ErrorKind.CONFLICT)

        created = MuscleGroup(
            id=self._next_id, name=data.name, description=data.description
        )
        self._next_id += 1
        self._groups.append(created)
        return Result.ok(created)

    def update(self, group_id: int, data: MuscleGroupInput) -> Result[MuscleGroup]:
        index = self._index_of(group_id)
        if index is None:
            return Result.err(MUSCLE_GROUP_NOT_FOUND, kind=ErrorKind.NOT_FOUND)

        data = data.normalised()
        if self._name_taken(data.name, exclude_id=group_id):
            return Result.err(DUPLICATE_MUSCLE_GROUP, kind=ErrorKind.CONFLICT)

        current = self._groups[index]
        if current.name.upper() != data.name and self._exercises.references_group(
            current.name
        ):
            logger.info(f"Refused to rename muscle group {current.name}: still referenced")
            return Result.err(REFERENCED_RENAME, kind=ErrorKind.CONFLICT)

        updated = MuscleGroup(id=group_id, name=data.name, description=data.description)
        self._groups[index] = updated
        return Result.ok(updated)

    def delete(self, group_id: int) -> Result[None]:
        index = self._index_of(group_id)
        if index is None:
            return Result.err(MUSCLE_GROUP_NOT_FOUND, kind=ErrorKind.NOT_FOUND)

        group = self._groups[index]
        if self._exercises.references_group(group.name):
            logger.info(f"Refused to delete muscle group {group.name}: still referenced")
            return Result.err(REFERENCED_DELETE, kind=ErrorKind.CONFLICT)

        del self._groups[index]
        return Result.ok(None)


# ------------------------- REMOTE -------------------------


class ApiExerciseCatalogAdapter(ApiAdapter):
    resource_name = "Exercise"

    PATH = "/api/v1/admin/exercises"

    def __init__(
        self,
        base_url: str,
        token_provider: TokenProvider,
        *,
        session: requests.Session | None = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ):
        super().__init__(
            base_url, session=session, token_provider=token_provider, timeout=timeout
        )

    def get_all(self) -> Result[list[CatalogExercise]]:
        return self._fetch_with_auth(
            "GET", self.PATH, lambda body: [CatalogExercise.model_validate(i) for i in body]
        )

    def get_by_id(self, exercise_id: str) -> Result[CatalogExercise]:
        return self._fetch_with_auth(
            "GET", f"{self.PATH}/{exercise_id}", CatalogExercise.model_validate
        )

    def create(self, exercise: Exercise) -> Result[CatalogExercise]:
        return self._fetch_with_auth(
            "POST", self.PATH, CatalogExercise.model_validate, json=exercise.model_dump()
        )

    def update(self, exercise_id: str, exercise: Exercise) -> Result[CatalogExercise]:
        return self._fetch_with_auth(
            "PUT",
            f"{self.PATH}/{exercise_id}",
            CatalogExercise.model_validate,
            json=exercise.model_dump(),
        )

    def delete(self, exercise_id: str) -> Result[None]:
        return self._fetch_with_auth(
            "DELETE", f"{self.PATH}/{exercise_id}", lambda body: None
        )


class ApiMuscleGroupAdapter(ApiAdapter):
    resource_name = "Muscle group"

    PATH = "/api/v1/admin/muscle-groups"
    PUBLIC_PATH = "/api/v1/muscle-groups"

    def __init__(
        self,
        base_url: str,
        token_provider: TokenProvider,
        *,
        session: requests.Session | None = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ):
        super().__init__(
            base_url, session=session, token_provider=token_provider, timeout=timeout
        )

    def get_all(self) -> Result[list[MuscleGroup]]:
        return self._fetch_with_auth(
            "GET", self.PATH, lambda body: [MuscleGroup.model_validate(i) for i in body]
        )

    def get_by_id(self, group_id: int) -> Result[MuscleGroup]:
        return self._fetch_with_auth(
            "GET", f"{self.PATH}/{group_id}", MuscleGroup.model_validate
        )

    def get_by_name(self, name: str) -> Result[MuscleGroup]:
        return self._fetch_public(
            "GET",
            f"{self.PUBLIC_PATH}/by-name/{quote(name.strip(), safe='')}",
            MuscleGroup.model_validate,
        )

    def create(self, data: MuscleGroupInput) -> Result[MuscleGroup]:
        return self._fetch_with_auth(
            "POST",
            self.PATH,
            MuscleGroup.model_validate,
            json=data.model_dump(exclude_none=True),
        )

    def update(self, group_id: int, data: MuscleGroupInput) -> Result[MuscleGroup]:
        return self._fetch_with_auth(
            "PUT",
            f"{self.PATH}/{group_id}",
            MuscleGroup.model_validate,
            json=data.model_dump(exclude_none=True),
        )

    def delete(self, group_id: int) -> Result[None]:
        return self._fetch_with_auth("DELETE", f"{self.PATH}/{group_id}", lambda body: None)


class ApiPublicExerciseAdapter(ApiAdapter):
    """Read-only exercise catalog from the unauthenticated endpoints."""

    resource_name = "Exercise"

    PATH = "/api/v1/exercises"

    def get_all(self) -> Result[list[CatalogExercise]]:
        return self._fetch_public(
            "GET", self.PATH, lambda body: [CatalogExercise.model_validate(i) for i in body]
        )

    def get_by_id(self, exercise_id: str) -> Result[CatalogExercise]:
        return self._fetch_public(
            "GET", f"{self.PATH}/{exercise_id}", CatalogExercise.model_validate
        )


class ApiPublicMuscleGroupAdapter(ApiAdapter):
    """Read-only muscle groups from the unauthenticated endpoints."""

    resource_name = "Muscle group"

    PATH = ApiMuscleGroupAdapter.PUBLIC_PATH

    def get_all(self) -> Result[list[MuscleGroup]]:
        return self._fetch_public(
            "GET", self.PATH, lambda body: [MuscleGroup.model_validate(i) for i in body]
        )

    def get_by_id(self, group_id: int) -> Result[MuscleGroup]:
        return self._fetch_public(
            "GET", f"{self.PATH}/{group_id}", MuscleGroup.model_validate
        )

    def get_by_name(self, name: str) -> Result[MuscleGroup]:
        return self._fetch_public(
            "GET",
            f"{self.PATH}/by-name/{quote(name.strip(), safe='')}",
            MuscleGroup.model_validate,
        )
