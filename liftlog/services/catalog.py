from liftlog.adapters.catalog import PublicExercisePort, PublicMuscleGroupPort
from liftlog.models import CatalogExercise, MuscleGroup, Result
from liftlog.utils.log import logger


class CatalogService:
    """
    Read-only exercise and muscle-group lookups for any user, signed in or
    not. Used to populate pickers when logging or planning.
    """

    def __init__(self, exercises: PublicExercisePort, muscle_groups: PublicMuscleGroupPort):
        self._exercises = exercises
        self._muscle_groups = muscle_groups

    def _call(self, action: str, fn, *args) -> Result:
        try:
            return fn(*args)
        except Exception as e:
            logger.exception(f"Catalog port raised during {action}")
            return Result.err(f"Failed to {action}: {e}")

    def get_exercises(self) -> Result[list[CatalogExercise]]:
        return self._call("fetch exercises", self._exercises.get_all)

    def get_exercise(self, exercise_id: str) -> Result[CatalogExercise]:
        return self._call("fetch exercise", self._exercises.get_by_id, exercise_id)

    def get_exercises_in_group(self, group: str) -> Result[list[CatalogExercise]]:
        result = self.get_exercises()
        if not result.success:
            return result
        wanted = group.strip().upper()
        return Result.ok([e for e in result.data or [] if e.group.upper() == wanted])

    def get_muscle_groups(self) -> Result[list[MuscleGroup]]:
        return self._call("fetch muscle groups", self._muscle_groups.get_all)

    def get_muscle_group(self, group_id: int) -> Result[MuscleGroup]:
        return self._call("fetch muscle group", self._muscle_groups.get_by_id, group_id)

    def get_muscle_group_by_name(self, name: str) -> Result[MuscleGroup]:
        return self._call(
            "fetch muscle group", self._muscle_groups.get_by_name, name
        )
