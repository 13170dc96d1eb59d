# Run using python -m scripts.seed (set LOCAL_STORE_PATH to persist the result)

from liftlog.config import BackendConfig
from liftlog.container import build_services
from liftlog.models import RegisterCredentials
from liftlog.settings import settings
from liftlog.utils.seed_data import build_demo_logs

DEMO_CREDENTIALS = RegisterCredentials(
    username="demo",
    email="demo@liftlog.dev",
    password="demo-password",
    confirm_password="demo-password",
)


def seed_user(services) -> None:
    result = services.auth.register(DEMO_CREDENTIALS)
    if not result.success:
        print("Registering demo user skipped:", result.error)
        return
    print("Seeded user", result.data.user.username)


def seed_logs(services) -> None:
    logs = build_demo_logs()
    for entry in logs:
        result = services.exercises.save_exercise(entry)
        if not result.success:
            raise RuntimeError(result.error)
    print(f"Seeded {len(logs)} exercise logs")


def main():
    # Seeding always targets local storage
    services = build_services(BackendConfig(), settings)

    seed_user(services)
    seed_logs(services)


if __name__ == "__main__":
    try:
        main()
    except Exception as e:
        print("Seeding failed:", e)
        raise
