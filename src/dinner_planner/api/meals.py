"""Meal library, recipe import and settings endpoints."""

from __future__ import annotations

from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, HTTPException, Request, status

from dinner_planner.api.auth import current_user_id, get_container, require_api_token
from dinner_planner.api.models import MealIn, RecipeUrlIn, SettingsIn
from dinner_planner.api.serializers import (
    serialize_meal,
    serialize_recipe,
    serialize_settings,
)
from dinner_planner.domain.meals import Meal

router = APIRouter(tags=["meals"], dependencies=[Depends(require_api_token)])


@router.get("/meals")
async def list_meals(
    request: Request, user_id: UUID = Depends(current_user_id)
) -> dict[str, object]:
    """Return the caller's meal library."""
    meals = get_container(request).meal_service.list_meals(user_id)
    return {"meals": [serialize_meal(meal) for meal in meals]}


@router.post("/meals", status_code=status.HTTP_201_CREATED)
async def create_meal(
    body: MealIn, request: Request, user_id: UUID = Depends(current_user_id)
) -> dict[str, object]:
    """Add a meal to the caller's library."""
    meal = get_container(request).meal_service.create_meal(user_id, body.to_payload())
    return serialize_meal(meal)


@router.put("/meals/{meal_id}")
async def update_meal(
    meal_id: UUID,
    body: MealIn,
    request: Request,
    user_id: UUID = Depends(current_user_id),
) -> dict[str, object]:
    """Replace a meal's fields."""
    service = get_container(request).meal_service
    _require_owned_meal(service.get_meal(meal_id), user_id)
    meal = service.update_meal(meal_id, body.to_payload())
    if meal is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return serialize_meal(meal)


@router.delete("/meals/{meal_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_meal(
    meal_id: UUID, request: Request, user_id: UUID = Depends(current_user_id)
) -> None:
    """Remove a meal from the library."""
    service = get_container(request).meal_service
    _require_owned_meal(service.get_meal(meal_id), user_id)
    service.delete_meal(meal_id)


@router.post("/meals/import", status_code=status.HTTP_201_CREATED)
async def import_meal(
    body: RecipeUrlIn, request: Request, user_id: UUID = Depends(current_user_id)
) -> dict[str, object]:
    """Import a recipe page and store it as a meal."""
    meal = await get_container(request).meal_service.import_meal(user_id, str(body.url))
    if meal is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Could not parse a recipe from this page",
        )
    return serialize_meal(meal)


@router.post("/recipes/parse")
async def parse_recipe(body: RecipeUrlIn, request: Request) -> dict[str, object]:
    """Preview the recipe parsed from a page without saving it."""
    recipe = await get_container(request).recipe_import_service.parse_url(str(body.url))
    if recipe is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Could not parse a recipe from this page",
        )
    return serialize_recipe(recipe)


@router.get("/settings")
async def get_settings(
    request: Request, user_id: UUID = Depends(current_user_id)
) -> dict[str, object]:
    """Return the caller's planner settings."""
    settings = get_container(request).user_settings_service.get_settings(user_id)
    return serialize_settings(settings)


@router.put("/settings")
async def save_settings(
    body: SettingsIn, request: Request, user_id: UUID = Depends(current_user_id)
) -> dict[str, object]:
    """Save the caller's planner settings."""
    service = get_container(request).user_settings_service
    try:
        saved = service.save_settings(user_id, body.to_domain())
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from exc
    return serialize_settings(saved)


def _require_owned_meal(meal: Meal | None, user_id: UUID) -> None:
    if meal is None or meal.owner_id != user_id:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
