"""MealPlan domain entity: a recipe scheduled for a meal slot on a given day."""
from datetime import date, datetime
from enum import Enum
from typing import Optional
from uuid import uuid4

from mealprep.domain.NutritionalInfo import NutritionalInfo
from mealprep.domain.Recipe import Recipe
from mealprep.utilities.constants import DATE_FORMAT


class MealType(str, Enum):
    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


class MealPlan:
    def __init__(self, recipe: Recipe, meal_type: MealType, date: Optional[date] = None, servings: int = 1,
                 notes: Optional[str] = None, id: Optional[str] = None):
        self.id = id or str(uuid4())
        self.date = date or datetime.now().date()
        self.meal_type = MealType(meal_type)
        self.recipe = recipe
        self.servings = servings
        self.notes = notes

    @property
    def nutritional_info(self) -> NutritionalInfo:
        '''Nutrition of one serving of the planned recipe.'''
        return self.recipe.nutritional_info.per_serving(self.recipe.servings)

    def __str__(self) -> str:
        return f"{self.date.strftime(DATE_FORMAT)} {self.meal_type.display_name}: {self.recipe.name}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data)
        return MealPlan(
            id=d.get("id") or None,
            date=datetime.strptime(d["date"], DATE_FORMAT).date(),
            meal_type=d.get("meal_type", MealType.DINNER.value),
            recipe=Recipe.from_dict(d.get("recipe", {})),
            servings=int(d.get("servings", 1) or 1),
            notes=d.get("notes") or None,
        )

    def to_dict(self):
        return {
            "id": self.id,
            "date": self.date.strftime(DATE_FORMAT),
            "meal_type": self.meal_type.value,
            "recipe": self.recipe.to_dict(),
            "servings": self.servings,
            "notes": self.notes,
        }
