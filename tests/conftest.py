"""Shared test fixtures."""

import random
from dataclasses import dataclass, field, replace
from datetime import date
from uuid import UUID, uuid4

import pytest

from dinner_planner.config import Settings
from dinner_planner.containers import AppContainer
from dinner_planner.domain.households import Household, HouseholdMember, MealRequest
from dinner_planner.domain.meals import Ingredient, Meal
from dinner_planner.domain.plans import WeekPlan
from dinner_planner.domain.settings import PlannerSettings
from dinner_planner.domain.shopping import ShoppingList
from dinner_planner.services.households import HouseholdRepository, HouseholdService
from dinner_planner.services.meal_requests import (
    MealRequestRepository,
    MealRequestService,
)
from dinner_planner.services.meals import MealRepository, MealService
from dinner_planner.services.planner import PlanRepository, PlanService
from dinner_planner.services.recipes import RecipeImportService
from dinner_planner.services.shopping import ShoppingListRepository, ShoppingListService
from dinner_planner.services.user_settings import (
    UserSettingsRepository,
    UserSettingsService,
)


def make_meal(  # noqa: PLR0913
    owner_id: UUID,
    name: str,
    cook_time_minutes: int = 20,
    ingredients: list[str] | None = None,
    tags: list[str] | None = None,
    meal_id: UUID | None = None,
) -> Meal:
    """Build a meal with plain ingredient names."""
    return Meal(
        id=meal_id or uuid4(),
        owner_id=owner_id,
        name=name,
        cook_time_minutes=cook_time_minutes,
        tags=tags or [],
        ingredients=[Ingredient(name=item) for item in ingredients or []],
    )


@dataclass
class InMemoryMealRepository(MealRepository):
    """In-memory meal repository for tests."""

    meals: dict[UUID, Meal] = field(default_factory=dict)

    def add(self, meal: Meal) -> Meal:
        self.meals[meal.id] = meal
        return meal

    def list_meals(self, owner_id: UUID) -> list[Meal]:
        return [meal for meal in self.meals.values() if meal.owner_id == owner_id]

    def get_meal(self, meal_id: UUID) -> Meal | None:
        return self.meals.get(meal_id)

    def get_meals(self, meal_ids: list[UUID]) -> list[Meal]:
        return [self.meals[meal_id] for meal_id in meal_ids if meal_id in self.meals]

    def list_meals_for_owners(self, owner_ids: list[UUID]) -> list[Meal]:
        return [meal for meal in self.meals.values() if meal.owner_id in owner_ids]

    def create_meal(self, owner_id: UUID, payload: dict[str, object]) -> Meal:
        meal = _meal_from_payload(uuid4(), owner_id, payload)
        self.meals[meal.id] = meal
        return meal

    def update_meal(self, meal_id: UUID, payload: dict[str, object]) -> Meal:
        current = self.meals[meal_id]
        meal = _meal_from_payload(meal_id, current.owner_id, payload)
        self.meals[meal_id] = meal
        return meal

    def delete_meal(self, meal_id: UUID) -> None:
        self.meals.pop(meal_id, None)


def _meal_from_payload(
    meal_id: UUID, owner_id: UUID, payload: dict[str, object]
) -> Meal:
    return Meal(
        id=meal_id,
        owner_id=owner_id,
        name=str(payload["name"]),
        cook_time_minutes=int(payload["cook_time_minutes"]),
        tags=list(payload.get("tags") or []),
        ingredients=[
            Ingredient(name=item["name"], quantity=item.get("quantity"))
            for item in payload.get("ingredients") or []
        ],
        instructions=list(payload.get("instructions") or []),
        image_url=payload.get("image_url"),
        servings=payload.get("servings"),
        source_url=payload.get("source_url"),
        nutrition=payload.get("nutrition"),
    )


@dataclass
class InMemoryUserSettingsRepository(UserSettingsRepository):
    """In-memory user settings repository for tests."""

    settings: dict[UUID, PlannerSettings] = field(default_factory=dict)

    def get_settings(self, user_id: UUID) -> PlannerSettings | None:
        return self.settings.get(user_id)

    def save_settings(self, user_id: UUID, settings: PlannerSettings) -> None:
        self.settings[user_id] = settings


@dataclass
class InMemoryPlanRepository(PlanRepository):
    """In-memory plan repository that records writes."""

    plans: dict[tuple[UUID, date], WeekPlan] = field(default_factory=dict)
    writes: int = 0
    fail_writes: bool = False

    def get_plan(self, owner_id: UUID, week_start: date) -> WeekPlan | None:
        return self.plans.get((owner_id, week_start))

    def upsert_plan(self, plan: WeekPlan) -> None:
        if self.fail_writes:
            raise RuntimeError("Failed to save week plan")
        self.writes += 1
        self.plans[(plan.owner_id, plan.week_start)] = plan


@dataclass
class InMemoryShoppingListRepository(ShoppingListRepository):
    """In-memory shopping list repository for tests."""

    lists: dict[tuple[UUID, date], ShoppingList] = field(default_factory=dict)
    writes: int = 0

    def get_list(self, owner_id: UUID, week_start: date) -> ShoppingList | None:
        return self.lists.get((owner_id, week_start))

    def save_list(self, shopping_list: ShoppingList) -> None:
        self.writes += 1
        self.lists[(shopping_list.owner_id, shopping_list.week_start)] = shopping_list


@dataclass
class InMemoryHouseholdRepository(HouseholdRepository):
    """In-memory household repository for tests."""

    households: dict[UUID, Household] = field(default_factory=dict)
    members: list[HouseholdMember] = field(default_factory=list)
    fail_add_member: bool = False

    def create_household(self, name: str, invite_code: str, owner_id: UUID) -> Household:
        household = Household(
            id=uuid4(), name=name, invite_code=invite_code, owner_id=owner_id
        )
        self.households[household.id] = household
        return household

    def delete_household(self, household_id: UUID) -> None:
        self.households.pop(household_id, None)

    def get_household(self, household_id: UUID) -> Household | None:
        return self.households.get(household_id)

    def find_by_invite_code(self, invite_code: str) -> Household | None:
        for household in self.households.values():
            if household.invite_code == invite_code:
                return household
        return None

    def add_member(
        self, household_id: UUID, user_id: UUID, display_name: str, role: str
    ) -> HouseholdMember:
        if self.fail_add_member:
            raise RuntimeError("Failed to add household member")
        member = HouseholdMember(
            household_id=household_id,
            user_id=user_id,
            display_name=display_name,
            role=role,
        )
        self.members.append(member)
        return member

    def get_member(self, household_id: UUID, user_id: UUID) -> HouseholdMember | None:
        for member in self.members:
            if member.household_id == household_id and member.user_id == user_id:
                return member
        return None

    def list_members(self, household_id: UUID) -> list[HouseholdMember]:
        return [m for m in self.members if m.household_id == household_id]


@dataclass
class InMemoryMealRequestRepository(MealRequestRepository):
    """In-memory meal request repository for tests."""

    requests: dict[UUID, MealRequest] = field(default_factory=dict)

    def create_request(self, payload: dict[str, object]) -> MealRequest:
        request = MealRequest(id=uuid4(), **payload)
        self.requests[request.id] = request
        return request

    def get_request(self, request_id: UUID) -> MealRequest | None:
        return self.requests.get(request_id)

    def list_requests(
        self, household_id: UUID, status: str | None
    ) -> list[MealRequest]:
        return [
            request
            for request in self.requests.values()
            if request.household_id == household_id
            and (status is None or request.status == status)
        ]

    def update_status(self, request_id: UUID, status: str) -> MealRequest:
        request = replace(self.requests[request_id], status=status)
        self.requests[request_id] = request
        return request


@dataclass
class FakeRecipePageClient:
    """Recipe page client serving canned HTML."""

    pages: dict[str, str] = field(default_factory=dict)

    async def fetch_html(self, url: str) -> str:
        return self.pages.get(url, "<html></html>")


@pytest.fixture
def owner_id() -> UUID:
    return uuid4()


@pytest.fixture
def meal_repository() -> InMemoryMealRepository:
    return InMemoryMealRepository()


@pytest.fixture
def settings_repository() -> InMemoryUserSettingsRepository:
    return InMemoryUserSettingsRepository()


@pytest.fixture
def plan_repository() -> InMemoryPlanRepository:
    return InMemoryPlanRepository()


@pytest.fixture
def plan_service(
    plan_repository: InMemoryPlanRepository,
    meal_repository: InMemoryMealRepository,
    settings_repository: InMemoryUserSettingsRepository,
) -> PlanService:
    return PlanService(
        plan_repository=plan_repository,
        meal_repository=meal_repository,
        user_settings_service=UserSettingsService(settings_repository),
        rng=random.Random(1234),
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key=(
            "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9."
            "eyJyb2xlIjoic2VydmljZV9yb2xlIn0."
            "c2lnbmF0dXJlLXBsYWNlaG9sZGVy"
        ),
        api_token="api-token",
    )


@pytest.fixture
def recipe_page_client() -> FakeRecipePageClient:
    return FakeRecipePageClient()


@pytest.fixture
def container(
    settings: Settings,
    meal_repository: InMemoryMealRepository,
    settings_repository: InMemoryUserSettingsRepository,
    plan_repository: InMemoryPlanRepository,
    recipe_page_client: FakeRecipePageClient,
) -> AppContainer:
    user_settings_service = UserSettingsService(settings_repository)
    recipe_import_service = RecipeImportService(recipe_page_client)
    meal_service = MealService(
        repository=meal_repository,
        recipe_import_service=recipe_import_service,
    )
    plan_service = PlanService(
        plan_repository=plan_repository,
        meal_repository=meal_repository,
        user_settings_service=user_settings_service,
        rng=random.Random(99),
    )
    shopping_list_service = ShoppingListService(
        plan_repository=plan_repository,
        meal_repository=meal_repository,
        repository=InMemoryShoppingListRepository(),
    )
    household_service = HouseholdService(InMemoryHouseholdRepository())
    meal_request_service = MealRequestService(
        repository=InMemoryMealRequestRepository(),
        household_service=household_service,
        plan_service=plan_service,
        meal_repository=meal_repository,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        meal_service=meal_service,
        user_settings_service=user_settings_service,
        plan_service=plan_service,
        shopping_list_service=shopping_list_service,
        household_service=household_service,
        meal_request_service=meal_request_service,
        recipe_import_service=recipe_import_service,
        close_resources=close_resources,
    )
