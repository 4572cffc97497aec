"""Weekly plan generation and mutation."""

import logging
import random
from dataclasses import dataclass, field
from datetime import date
from typing import Protocol
from uuid import UUID

from dinner_planner.domain.meals import Meal
from dinner_planner.domain.plans import DayPlan, WeekPlan
from dinner_planner.domain.settings import PlannerSettings
from dinner_planner.services.meals import MealRepository
from dinner_planner.services.user_settings import UserSettingsService
from dinner_planner.services.weeks import week_days, week_start_of

_logger = logging.getLogger(__name__)


class PlanRepository(Protocol):
    """Persistence interface for weekly plans."""

    def get_plan(self, owner_id: UUID, week_start: date) -> WeekPlan | None:
        """Return the plan for an owner's week, if present."""

    def upsert_plan(self, plan: WeekPlan) -> None:
        """Insert the plan or overwrite the existing one for its week."""


def filter_eligible_meals(
    meals: list[Meal], settings: PlannerSettings
) -> list[Meal]:
    """Return meals within the cook-time ceiling and free of excluded ingredients."""
    excluded = [
        term.strip().lower() for term in settings.excluded_ingredients if term.strip()
    ]
    return [
        meal
        for meal in meals
        if meal.cook_time_minutes <= settings.max_cook_time_minutes
        and not _contains_excluded(meal, excluded)
    ]


def _contains_excluded(meal: Meal, excluded: list[str]) -> bool:
    for ingredient in meal.ingredients:
        name = ingredient.name.lower()
        if any(term in name for term in excluded):
            return True
    return False


def select_meal_ids(
    eligible: list[Meal], settings: PlannerSettings, rng: random.Random
) -> list[UUID]:
    """Pick meal ids for the first dinners_per_week days of a week."""
    if not eligible:
        return []
    slots = settings.dinners_per_week
    if settings.allow_repeats:
        return [rng.choice(eligible).id for _ in range(slots)]
    shuffled = list(eligible)
    rng.shuffle(shuffled)
    return [meal.id for meal in shuffled[:slots]]


@dataclass
class PlanService:
    """Generates weekly plans and applies edits to stored plans."""

    plan_repository: PlanRepository
    meal_repository: MealRepository
    user_settings_service: UserSettingsService
    rng: random.Random = field(default_factory=random.Random)

    def get_plan(self, owner_id: UUID, week_start: date) -> WeekPlan | None:
        """Return the stored plan for the week containing week_start."""
        return self.plan_repository.get_plan(owner_id, week_start_of(week_start))

    def generate(self, owner_id: UUID, week_start: date) -> WeekPlan:
        """Create a fresh plan for the week, replacing any existing one."""
        monday = week_start_of(week_start)
        settings = self.user_settings_service.get_settings(owner_id)
        eligible = filter_eligible_meals(
            self.meal_repository.list_meals(owner_id), settings
        )
        selected = select_meal_ids(eligible, settings, self.rng)
        days = [
            DayPlan(date=day, meal_id=selected[index] if index < len(selected) else None)
            for index, day in enumerate(week_days(monday))
        ]
        plan = WeekPlan(owner_id=owner_id, week_start=monday, days=days)
        self.plan_repository.upsert_plan(plan)
        _logger.info(
            "Generated plan: owner=%s week=%s eligible=%s planned=%s",
            owner_id,
            monday,
            len(eligible),
            len(selected),
        )
        return plan

    def reroll(
        self, owner_id: UUID, week_start: date, day_date: date
    ) -> WeekPlan | None:
        """Replace one day's meal with a random eligible pick."""
        plan = self.get_plan(owner_id, week_start)
        if plan is None:
            return None
        if plan.find_day(day_date) is None:
            return plan

        settings = self.user_settings_service.get_settings(owner_id)
        candidates = filter_eligible_meals(
            self.meal_repository.list_meals(owner_id), settings
        )
        if not settings.allow_repeats:
            used = {
                day.meal_id
                for day in plan.days
                if day.meal_id is not None and day.date != day_date
            }
            candidates = [meal for meal in candidates if meal.id not in used]
        if not candidates:
            _logger.info(
                "Reroll skipped, no candidates: owner=%s day=%s", owner_id, day_date
            )
            return plan

        picked = self.rng.choice(candidates)
        updated = plan.with_meals({day_date: picked.id})
        self.plan_repository.upsert_plan(updated)
        return updated

    def swap(
        self, owner_id: UUID, week_start: date, date_a: date, date_b: date
    ) -> WeekPlan | None:
        """Exchange the meals of two days."""
        plan = self.get_plan(owner_id, week_start)
        if plan is None:
            return None
        day_a = plan.find_day(date_a)
        day_b = plan.find_day(date_b)
        if day_a is None or day_b is None:
            return plan

        updated = plan.with_meals({date_a: day_b.meal_id, date_b: day_a.meal_id})
        self.plan_repository.upsert_plan(updated)
        return updated

    def set_day_meal(
        self,
        owner_id: UUID,
        week_start: date,
        day_date: date,
        meal_id: UUID | None,
    ) -> WeekPlan | None:
        """Assign a meal to a day without applying any planning constraints."""
        plan = self.get_plan(owner_id, week_start)
        if plan is None:
            return None
        if plan.find_day(day_date) is None:
            return plan

        updated = plan.with_meals({day_date: meal_id})
        self.plan_repository.upsert_plan(updated)
        return updated
