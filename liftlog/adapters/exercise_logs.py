from typing import Protocol

from liftlog.adapters.base import ApiAdapter
from liftlog.adapters.errors import ApiError
from liftlog.models import ErrorKind, ExerciseLogEntry, Result
from liftlog.utils import dates
from liftlog.utils.log import logger


class ExerciseLogPort(Protocol):
    def save_exercise(self, user_id: str, entry: ExerciseLogEntry) -> Result[None]: ...
    def load_exercises(self, user_id: str) -> list[ExerciseLogEntry]: ...
    def get_latest_log(
        self, user_id: str, exercise_id: int | str
    ) -> Result[ExerciseLogEntry | None]: ...


def to_api_log(entry: ExerciseLogEntry) -> dict:
    """
    Backend DTO for a log entry, timestamp as ISO8601 UTC.

    Raises ValueError when the timestamp cannot be parsed.
    """
    parsed = dates.parse_timestamp(entry.timestamp)
    if parsed is None:
        raise ValueError(f"Invalid timestamp: {entry.timestamp!r}")
    return {
        "timestamp": dates.dt_to_iso(parsed),
        "exercise": {"group": entry.exercise.group, "name": entry.exercise.name},
        "sets": [{"weight": s.weight, "reps": s.reps} for s in entry.sets],
        "failure": entry.failure,
    }


class ApiExerciseAdapter(ApiAdapter):
    """
    Exercise log storage on the remote API, keyed by user id.
    """

    resource_name = "Exercise log"

    def _logs_path(self, user_id: str) -> str:
        return f"/api/v1/users/{user_id}/logs"

    def _token(self) -> str | None:
        return self._token_provider() if self._token_provider else None

    def save_exercise(self, user_id: str, entry: ExerciseLogEntry) -> Result[None]:
        try:
            payload = [to_api_log(entry)]
        except ValueError as e:
            logger.warning(f"Refusing to send exercise log: {e}")
            return Result.err(
                f"Failed to save exercise: {e}", kind=ErrorKind.VALIDATION
            )

        try:
            # The backend accepts a batch of logs
            response = self._safe_request(
                "POST",
                self._logs_path(user_id),
                token=self._token(),
                json=payload,
            )
        except ApiError as e:
            return Result.err(f"Failed to save exercise: {e}")

        if not response.ok:
            if response.status_code in (401, 403):
                return self._error_result(response)
            body = self._json_or_none(response)
            message = body.get("message") if isinstance(body, dict) else None
            return Result.err(
                message or f"Failed to save exercise: {response.status_code}"
            )

        return Result.ok(None)

    def load_exercises(self, user_id: str) -> list[ExerciseLogEntry]:
        try:
            response = self._safe_request(
                "GET", self._logs_path(user_id), token=self._token()
            )
        except ApiError:
            return []

        if not response.ok:
            logger.error(f"Failed to load exercises: status={response.status_code}")
            return []

        body = self._json_or_none(response)
        if not isinstance(body, list):
            logger.error("Failed to load exercises: response was not a list")
            return []

        entries = []
        for item in body:
            try:
                entries.append(ExerciseLogEntry.model_validate(item))
            except ValueError as e:
                logger.warning(f"Skipping malformed exercise log from API: {e}")
        return entries

    def get_latest_log(
        self, user_id: str, exercise_id: int | str
    ) -> Result[ExerciseLogEntry | None]:
        try:
            response = self._safe_request(
                "GET",
                f"{self._logs_path(user_id)}/latest",
                token=self._token(),
                params={"exerciseId": exercise_id},
            )
        except ApiError as e:
            return Result.err(str(e))

        # No prior log for this exercise
        if response.status_code == 404:
            return Result.ok(None)

        if not response.ok:
            if response.status_code in (401, 403):
                return self._error_result(response)
            return Result.err(f"Failed to fetch latest log: {response.status_code}")

        try:
            return Result.ok(ExerciseLogEntry.model_validate(self._json_or_none(response)))
        except ValueError as e:
            logger.error(f"Latest log response was malformed: {e}")
            return Result.err(
                "Failed to fetch latest log: unexpected response",
                kind=ErrorKind.PORT_FAILURE,
            )
