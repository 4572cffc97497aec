"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from dinner_planner.adapters.recipe_page_client import HttpxRecipePageClient
from dinner_planner.adapters.supabase_household_repository import (
    SupabaseHouseholdRepository,
)
from dinner_planner.adapters.supabase_meal_repository import SupabaseMealRepository
from dinner_planner.adapters.supabase_meal_request_repository import (
    SupabaseMealRequestRepository,
)
from dinner_planner.adapters.supabase_plan_repository import SupabasePlanRepository
from dinner_planner.adapters.supabase_shopping_list_repository import (
    SupabaseShoppingListRepository,
)
from dinner_planner.adapters.supabase_user_settings_repository import (
    SupabaseUserSettingsRepository,
)
from dinner_planner.config import Settings
from dinner_planner.services.households import HouseholdService
from dinner_planner.services.meal_requests import MealRequestService
from dinner_planner.services.meals import MealService
from dinner_planner.services.planner import PlanService
from dinner_planner.services.recipes import RecipeImportService
from dinner_planner.services.shopping import ShoppingListService
from dinner_planner.services.user_settings import UserSettingsService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    meal_service: MealService
    user_settings_service: UserSettingsService
    plan_service: PlanService
    shopping_list_service: ShoppingListService
    household_service: HouseholdService
    meal_request_service: MealRequestService
    recipe_import_service: RecipeImportService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    meal_repository = SupabaseMealRepository(supabase_client)
    plan_repository = SupabasePlanRepository(supabase_client)
    recipe_page_client = HttpxRecipePageClient.create(
        user_agent=resolved_settings.recipe_user_agent,
        timeout_seconds=resolved_settings.recipe_fetch_timeout_seconds,
    )
    recipe_import_service = RecipeImportService(recipe_page_client)
    meal_service = MealService(
        repository=meal_repository,
        recipe_import_service=recipe_import_service,
    )
    user_settings_service = UserSettingsService(
        SupabaseUserSettingsRepository(supabase_client)
    )
    plan_service = PlanService(
        plan_repository=plan_repository,
        meal_repository=meal_repository,
        user_settings_service=user_settings_service,
    )
    shopping_list_service = ShoppingListService(
        plan_repository=plan_repository,
        meal_repository=meal_repository,
        repository=SupabaseShoppingListRepository(supabase_client),
    )
    household_service = HouseholdService(
        repository=SupabaseHouseholdRepository(supabase_client),
        invite_code_length=resolved_settings.invite_code_length,
    )
    meal_request_service = MealRequestService(
        repository=SupabaseMealRequestRepository(supabase_client),
        household_service=household_service,
        plan_service=plan_service,
        meal_repository=meal_repository,
    )

    async def close_resources() -> None:
        await recipe_page_client.close()

    return AppContainer(
        settings=resolved_settings,
        meal_service=meal_service,
        user_settings_service=user_settings_service,
        plan_service=plan_service,
        shopping_list_service=shopping_list_service,
        household_service=household_service,
        meal_request_service=meal_request_service,
        recipe_import_service=recipe_import_service,
        close_resources=close_resources,
    )
