"""Meal plan repository (file persistence)."""
import logging
from datetime import date
from pathlib import Path
from typing import List

from mealprep.domain.MealPlan import MealPlan
from mealprep.infra.json_store import read_json, atomic_write
from mealprep.infra.paths import MEAL_PLANS_FILE

logger = logging.getLogger(__name__)


class MealPlanRepository:
    def __init__(self, path: Path = MEAL_PLANS_FILE):
        self.path = Path(path)

    def load_meal_plans(self) -> List[MealPlan]:
        plans = []
        data = read_json(self.path, [])
        if not isinstance(data, list):
            logger.error("Meal plan file %s does not contain a list", self.path)
            return plans
        for entry in data:
            if not isinstance(entry, dict):
                logger.error("Skipping meal plan entry that is not an object: %r", entry)
                continue
            try:
                plans.append(MealPlan.from_dict(entry))
            except (KeyError, ValueError, TypeError) as e:
                logger.error("Skipping invalid meal plan entry %r: %s", entry.get('id'), e)
        return plans

    def save_meal_plans(self, meal_plans: List[MealPlan]) -> None:
        atomic_write(self.path, [p.to_dict() for p in meal_plans])

    def add_meal_plan(self, meal_plan: MealPlan) -> MealPlan:
        plans = self.load_meal_plans()
        plans.append(meal_plan)
        self.save_meal_plans(plans)
        return meal_plan

    def remove_meal_plan(self, plan_id: str) -> bool:
        plans = self.load_meal_plans()
        remaining = [p for p in plans if p.id != plan_id]
        if len(remaining) == len(plans):
            return False
        self.save_meal_plans(remaining)
        return True

    def get_meal_plans(self, for_date: date) -> List[MealPlan]:
        return [p for p in self.load_meal_plans() if p.date == for_date]

    def clear(self) -> None:
        self.save_meal_plans([])
