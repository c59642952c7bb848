"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from nutritrack.adapters.supabase_appointment_repository import (
    SupabaseAppointmentRepository,
)
from nutritrack.adapters.supabase_catalog_repository import SupabaseCatalogRepository
from nutritrack.adapters.supabase_exercise_log_repository import (
    SupabaseExerciseLogRepository,
)
from nutritrack.adapters.supabase_goal_repository import SupabaseGoalRepository
from nutritrack.adapters.supabase_meal_log_repository import (
    SupabaseMealLogRepository,
)
from nutritrack.adapters.supabase_user_repository import SupabaseUserRepository
from nutritrack.config import Settings
from nutritrack.services.aggregates import DailyAggregator
from nutritrack.services.appointments import (
    AppointmentRepository,
    AppointmentService,
)
from nutritrack.services.catalog import CatalogRepository, CatalogService
from nutritrack.services.exercise_logs import ExerciseLogRepository, ExerciseLogService
from nutritrack.services.goals import GoalRepository, GoalService
from nutritrack.services.meal_logs import MealLogRepository, MealLogService
from nutritrack.services.recommendations import RecommendationService
from nutritrack.services.tokens import TokenService
from nutritrack.services.users import UserRepository, UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    tokens: TokenService
    user_service: UserService
    catalog_service: CatalogService
    goal_service: GoalService
    recommendation_service: RecommendationService
    aggregator: DailyAggregator
    meal_log_service: MealLogService
    exercise_log_service: ExerciseLogService
    appointment_service: AppointmentService


def wire_container(  # noqa: PLR0913
    settings: Settings,
    user_repository: UserRepository,
    catalog_repository: CatalogRepository,
    goal_repository: GoalRepository,
    meal_log_repository: MealLogRepository,
    exercise_log_repository: ExerciseLogRepository,
    appointment_repository: AppointmentRepository,
) -> AppContainer:
    """Build services on top of the given repositories."""
    tokens = TokenService(
        secret=settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        ttl_minutes=settings.access_token_minutes,
    )
    aggregator = DailyAggregator(
        intake=meal_log_repository,
        burn=exercise_log_repository,
        timezone_name=settings.timezone,
    )
    goal_service = GoalService(
        repository=goal_repository,
        tag_source=catalog_repository,
        default_daily_limit=settings.default_daily_limit,
    )
    return AppContainer(
        settings=settings,
        tokens=tokens,
        user_service=UserService(user_repository, tokens),
        catalog_service=CatalogService(catalog_repository),
        goal_service=goal_service,
        recommendation_service=RecommendationService(catalog_repository),
        aggregator=aggregator,
        meal_log_service=MealLogService(
            repository=meal_log_repository,
            catalog=catalog_repository,
            goal_service=goal_service,
            aggregator=aggregator,
        ),
        exercise_log_service=ExerciseLogService(
            repository=exercise_log_repository,
            aggregator=aggregator,
        ),
        appointment_service=AppointmentService(
            repository=appointment_repository,
            aggregator=aggregator,
        ),
    )


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    return wire_container(
        settings=resolved_settings,
        user_repository=SupabaseUserRepository(supabase_client),
        catalog_repository=SupabaseCatalogRepository(supabase_client),
        goal_repository=SupabaseGoalRepository(supabase_client),
        meal_log_repository=SupabaseMealLogRepository(supabase_client),
        exercise_log_repository=SupabaseExerciseLogRepository(supabase_client),
        appointment_repository=SupabaseAppointmentRepository(supabase_client),
    )
