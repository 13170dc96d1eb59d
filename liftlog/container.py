"""Explicit construction of adapters and services for one application instance."""

from collections.abc import MutableMapping
from dataclasses import dataclass

import requests

from liftlog.adapters.auth import ApiAuthAdapter, AuthPort, LocalAuthAdapter
from liftlog.adapters.catalog import (
    ApiExerciseCatalogAdapter,
    ApiMuscleGroupAdapter,
    ApiPublicExerciseAdapter,
    ApiPublicMuscleGroupAdapter,
    ExerciseCatalogPort,
    InMemoryExerciseCatalog,
    InMemoryMuscleGroupCatalog,
    MuscleGroupPort,
    PublicExercisePort,
    PublicMuscleGroupPort,
)
from liftlog.adapters.exercise_logs import ApiExerciseAdapter
from liftlog.adapters.notification import LoggingNotificationAdapter, NotificationPort
from liftlog.adapters.storage import JsonFileStore, LocalStorageAdapter, StoragePort
from liftlog.adapters.workout_plans import (
    ApiWorkoutPlanAdapter,
    LocalWorkoutPlanAdapter,
    WorkoutPlanPort,
)
from liftlog.config import BackendConfig
from liftlog.models import User
from liftlog.services.admin import AdminExerciseService, AdminMuscleGroupService
from liftlog.services.auth import AuthService
from liftlog.services.catalog import CatalogService
from liftlog.services.exercise import ExerciseService
from liftlog.services.workout_plan import WorkoutPlanService
from liftlog.settings import Settings
from liftlog.utils.log import logger


@dataclass
class Services:
    storage: StoragePort
    auth: AuthService
    exercises: ExerciseService
    admin_exercises: AdminExerciseService
    admin_muscle_groups: AdminMuscleGroupService
    catalog: CatalogService
    workout_plans: WorkoutPlanService

    def sync_current_user(self) -> User | None:
        """Copy the authenticated identity (or None) into the user-scoped services."""
        user = self.auth.get_current_user()
        self.exercises.set_current_user(user)
        self.workout_plans.set_current_user(user)
        return user


def build_storage(settings: Settings) -> StoragePort:
    store: MutableMapping[str, str] | None = None
    if settings.LOCAL_STORE_PATH:
        store = JsonFileStore(settings.LOCAL_STORE_PATH)
    return LocalStorageAdapter(store)


def build_services(
    config: BackendConfig,
    settings: Settings,
    *,
    storage: StoragePort | None = None,
    notifier: NotificationPort | None = None,
    session: requests.Session | None = None,
) -> Services:
    storage = storage or build_storage(settings)
    notifier = notifier or LoggingNotificationAdapter()
    session = session or requests.Session()
    timeout = config.timeout_seconds

    auth_port: AuthPort
    if config.use_remote_auth:
        logger.info(f"Using API authentication at {config.base_url}")
        auth_port = ApiAuthAdapter(
            config.base_url, storage, session=session, timeout=timeout
        )
    else:
        logger.info("Using local authentication")
        local_auth = LocalAuthAdapter(
            storage,
            secret=settings.LOCAL_AUTH_SECRET,
            token_ttl_seconds=settings.LOCAL_TOKEN_TTL_SECONDS,
        )
        if settings.seeds_local_admin:
            local_auth.ensure_admin_user(
                email=settings.LOCAL_ADMIN_EMAIL,
                username=settings.LOCAL_ADMIN_USERNAME,
                password=settings.LOCAL_ADMIN_PASSWORD,
            )
        auth_port = local_auth

    auth = AuthService(auth_port)

    remote_logs = None
    if config.use_remote_exercises:
        logger.info(f"Using API exercise logging at {config.base_url}")
        remote_logs = ApiExerciseAdapter(
            config.base_url,
            session=session,
            token_provider=auth.get_token,
            timeout=timeout,
        )
    exercises = ExerciseService(storage, notifier, remote_logs)

    catalog_port: ExerciseCatalogPort
    muscle_group_port: MuscleGroupPort
    public_exercise_port: PublicExercisePort
    public_muscle_group_port: PublicMuscleGroupPort
    if config.use_remote_admin:
        logger.info(f"Using API admin catalog at {config.base_url}")
        catalog_port = ApiExerciseCatalogAdapter(
            config.base_url, auth.get_token, session=session, timeout=timeout
        )
        muscle_group_port = ApiMuscleGroupAdapter(
            config.base_url, auth.get_token, session=session, timeout=timeout
        )
        public_exercise_port = ApiPublicExerciseAdapter(
            config.base_url, session=session, timeout=timeout
        )
        public_muscle_group_port = ApiPublicMuscleGroupAdapter(
            config.base_url, session=session, timeout=timeout
        )
    else:
        logger.info("Using in-memory admin catalog")
        in_memory_catalog = InMemoryExerciseCatalog()
        catalog_port = in_memory_catalog
        muscle_group_port = InMemoryMuscleGroupCatalog(in_memory_catalog)
        public_exercise_port = in_memory_catalog
        public_muscle_group_port = muscle_group_port

    workout_plan_port: WorkoutPlanPort
    if config.use_remote_exercises:
        workout_plan_port = ApiWorkoutPlanAdapter(
            config.base_url,
            session=session,
            token_provider=auth.get_token,
            timeout=timeout,
        )
    else:
        workout_plan_port = LocalWorkoutPlanAdapter(storage)

    services = Services(
        storage=storage,
        auth=auth,
        exercises=exercises,
        admin_exercises=AdminExerciseService(catalog_port),
        admin_muscle_groups=AdminMuscleGroupService(muscle_group_port),
        catalog=CatalogService(public_exercise_port, public_muscle_group_port),
        workout_plans=WorkoutPlanService(workout_plan_port),
    )
    services.sync_current_user()
    return services
