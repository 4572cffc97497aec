"""JSON serialization of domain records for API responses."""

from dinner_planner.domain.households import Household, HouseholdMember, MealRequest
from dinner_planner.domain.meals import Meal
from dinner_planner.domain.plans import WeekPlan
from dinner_planner.domain.recipes import ParsedRecipe
from dinner_planner.domain.settings import PlannerSettings
from dinner_planner.domain.shopping import ShoppingItem, ShoppingList
from dinner_planner.services.weeks import format_date


def serialize_meal(meal: Meal) -> dict[str, object]:
    return {
        "id": str(meal.id),
        "name": meal.name,
        "tags": list(meal.tags),
        "cook_time_minutes": meal.cook_time_minutes,
        "ingredients": [
            {"name": ingredient.name, "quantity": ingredient.quantity}
            for ingredient in meal.ingredients
        ],
        "instructions": list(meal.instructions),
        "image_url": meal.image_url,
        "servings": meal.servings,
        "source_url": meal.source_url,
        "nutrition": meal.nutrition,
    }


def serialize_recipe(recipe: ParsedRecipe) -> dict[str, object]:
    return {
        "name": recipe.name,
        "cook_time_minutes": recipe.cook_time_minutes,
        "ingredients": [
            {"name": ingredient.name, "quantity": ingredient.quantity}
            for ingredient in recipe.ingredients
        ],
        "instructions": list(recipe.instructions),
        "image_url": recipe.image_url,
        "servings": recipe.servings,
        "nutrition": recipe.nutrition,
        "tags": list(recipe.tags),
        "source_url": recipe.source_url,
    }


def serialize_settings(settings: PlannerSettings) -> dict[str, object]:
    return {
        "dinners_per_week": settings.dinners_per_week,
        "max_cook_time_minutes": settings.max_cook_time_minutes,
        "excluded_ingredients": list(settings.excluded_ingredients),
        "allow_repeats": settings.allow_repeats,
    }


def serialize_plan(plan: WeekPlan) -> dict[str, object]:
    return {
        "week_start": format_date(plan.week_start),
        "days": [
            {
                "date": format_date(day.date),
                "meal_id": str(day.meal_id) if day.meal_id else None,
            }
            for day in plan.days
        ],
    }


def serialize_items(items: list[ShoppingItem]) -> list[dict[str, object]]:
    return [{"name": item.name, "checked": item.checked} for item in items]


def serialize_shopping_list(shopping_list: ShoppingList) -> dict[str, object]:
    return {
        "week_start": format_date(shopping_list.week_start),
        "items": serialize_items(shopping_list.items),
    }


def serialize_household(household: Household) -> dict[str, object]:
    return {
        "id": str(household.id),
        "name": household.name,
        "invite_code": household.invite_code,
        "owner_id": str(household.owner_id),
    }


def serialize_request(request: MealRequest) -> dict[str, object]:
    return {
        "id": str(request.id),
        "household_id": str(request.household_id),
        "requested_by": str(request.requested_by),
        "meal_id": str(request.meal_id),
        "week_start": format_date(request.week_start),
        "day_date": format_date(request.day_date) if request.day_date else None,
        "note": request.note,
        "status": request.status,
        "created_at": request.created_at.isoformat() if request.created_at else None,
    }


def serialize_member(member: HouseholdMember) -> dict[str, object]:
    return {
        "user_id": str(member.user_id),
        "display_name": member.display_name,
        "role": member.role,
    }
