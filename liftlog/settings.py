from dotenv import find_dotenv, load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv(find_dotenv(usecwd=True), override=False)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=None)

    # ──────────────────── Backends ─────────────────────

    USE_REMOTE_AUTH: bool = False
    USE_REMOTE_EXERCISES: bool = False
    USE_REMOTE_ADMIN: bool = False

    API_BASE_URL: str = "http://localhost:8080/exercise-logging"
    API_TIMEOUT_SECONDS: float = 10.0

    # ──────────────────── Local storage ─────────────────────

    # None keeps everything in memory for the lifetime of the process
    LOCAL_STORE_PATH: str | None = None

    # ──────────────────── Local auth ─────────────────────

    LOCAL_AUTH_SECRET: str = "liftlog-local-dev-secret-change-me"
    LOCAL_TOKEN_TTL_SECONDS: int = 60 * 60 * 24 * 7

    LOCAL_ADMIN_EMAIL: str | None = "admin@exercises.com"
    LOCAL_ADMIN_USERNAME: str = "admin"
    LOCAL_ADMIN_PASSWORD: str | None = None

    @property
    def seeds_local_admin(self) -> bool:
        return bool(self.LOCAL_ADMIN_EMAIL and self.LOCAL_ADMIN_PASSWORD)


settings = Settings()
