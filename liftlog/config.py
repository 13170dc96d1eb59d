from dataclasses import dataclass

from liftlog.settings import Settings


@dataclass(frozen=True)
class BackendConfig:
    """
    Backend selection resolved once at startup and passed to build_services.
    """

    use_remote_auth: bool = False
    use_remote_exercises: bool = False
    use_remote_admin: bool = False
    base_url: str = "http://localhost:8080/exercise-logging"
    timeout_seconds: float = 10.0

    @classmethod
    def from_settings(cls, settings: Settings) -> "BackendConfig":
        return cls(
            use_remote_auth=settings.USE_REMOTE_AUTH,
            use_remote_exercises=settings.USE_REMOTE_EXERCISES,
            use_remote_admin=settings.USE_REMOTE_ADMIN,
            base_url=settings.API_BASE_URL.rstrip("/"),
            timeout_seconds=settings.API_TIMEOUT_SECONDS,
        )
