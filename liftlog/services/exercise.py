import uuid

from liftlog.adapters.errors import StorageError
from liftlog.adapters.exercise_logs import ExerciseLogPort
from liftlog.adapters.notification import NotificationPort
from liftlog.adapters.storage import StoragePort
from liftlog.domain.calculators import calculate_total_volume
from liftlog.domain.formatters import format_exercise_for_storage
from liftlog.domain.validators import validate_exercise
from liftlog.models import (
    EXERCISE_KEY_PREFIX,
    ErrorKind,
    ExerciseLogEntry,
    ExerciseStats,
    Result,
    User,
)
from liftlog.utils import dates
from liftlog.utils.log import logger


class ExerciseService:
    """
    Saves and reads exercise logs.

    Logs go to the remote adapter when one was supplied and a user is signed
    in, otherwise to local storage under `exercise_`-prefixed keys.
    """

    def __init__(
        self,
        storage: StoragePort,
        notifier: NotificationPort,
        remote: ExerciseLogPort | None = None,
    ):
        self._storage = storage
        self._notifier = notifier
        self._remote = remote
        self.current_user: User | None = None

    def set_current_user(self, user: User | None) -> None:
        self.current_user = user

    def _remote_user(self) -> User | None:
        """The user to act for remotely, or None when local storage applies."""
        if self._remote is None:
            return None
        return self.current_user

    @staticmethod
    def _new_key() -> str:
        millis = dates.epoch_millis(dates.now())
        return f"{EXERCISE_KEY_PREFIX}{millis}_{uuid.uuid4().hex[:8]}"

    def _exercise_keys(self) -> list[str]:
        return [k for k in self._storage.keys() if k.startswith(EXERCISE_KEY_PREFIX)]

    # ---- writes ----

    def save_exercise(self, entry: ExerciseLogEntry) -> Result[None]:
        validation = validate_exercise(entry)
        if not validation.valid:
            message = f"Validation failed: {validation.joined()}"
            self._notifier.error(message)
            return Result.err(message, kind=ErrorKind.VALIDATION)

        try:
            user = self._remote_user()
            if user is not None:
                result = self._remote.save_exercise(user.id, entry)
            else:
                self._storage.save(self._new_key(), format_exercise_for_storage(entry))
                result = Result.ok(None)
        except Exception as e:
            logger.exception("Failed to save exercise")
            result = Result.err(f"Failed to save exercise: {e}")

        if result.success:
            self._notifier.success("Exercise saved")
        else:
            self._notifier.error(result.error or "Failed to save exercise")
        return result

    def delete_exercise(self, key: str) -> Result[None]:
        try:
            self._storage.remove(key)
        except Exception as e:
            logger.exception(f"Failed to delete exercise key={key}")
            return Result.err(f"Failed to delete exercise: {e}")
        return Result.ok(None)

    def clear_all_exercises(self) -> Result[None]:
        try:
            for key in self._exercise_keys():
                self._storage.remove(key)
        except Exception as e:
            logger.exception("Failed to clear exercises")
            return Result.err(f"Failed to clear exercises: {e}")

        self._notifier.info("All exercises cleared")
        return Result.ok(None)

    # ---- reads ----

    def load_exercise_records(self) -> dict[str, ExerciseLogEntry]:
        """
        Local logs keyed by storage key, oldest first. Records that cannot be
        read or parsed are skipped so one bad record does not hide the rest.
        """
        records: dict[str, ExerciseLogEntry] = {}
        for key in self._exercise_keys():
            try:
                raw = self._storage.load(key)
            except StorageError as e:
                logger.warning(f"Skipping unreadable exercise record key={key}: {e}")
                continue

            if raw is None:
                continue

            try:
                records[key] = ExerciseLogEntry.model_validate(raw)
            except ValueError as e:
                logger.warning(f"Skipping malformed exercise record key={key}: {e}")

        return records

    def load_exercises(self) -> list[ExerciseLogEntry]:
        """
        All logs for the current mode. Failures degrade to an empty history
        instead of an error.
        """
        try:
            user = self._remote_user()
            if user is not None:
                return self._remote.load_exercises(user.id)
            return list(self.load_exercise_records().values())
        except Exception:
            logger.exception("Failed to load exercises")
            return []

    def get_exercise_stats(self) -> ExerciseStats:
        exercises = self.load_exercises()
        return ExerciseStats(
            total_exercises=len(exercises),
            total_sets=sum(len(e.sets) for e in exercises),
            total_volume=sum(calculate_total_volume(e.sets) for e in exercises),
        )

    def get_latest_log(self, exercise_id: int | str) -> Result[ExerciseLogEntry | None]:
        if self._remote is None:
            return Result.err(
                "Latest log lookup is only available with the remote backend",
                kind=ErrorKind.PORT_FAILURE,
            )
        if self.current_user is None:
            return Result.err(
                "Latest log lookup requires a signed-in user",
                kind=ErrorKind.AUTHORIZATION,
            )

        try:
            return self._remote.get_latest_log(self.current_user.id, exercise_id)
        except Exception as e:
            logger.exception("Failed to fetch latest log")
            return Result.err(f"Failed to fetch latest log: {e}")
