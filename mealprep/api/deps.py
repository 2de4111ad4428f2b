"""Dependency providers for the API layer.

Repositories and external clients are created here and handed to the routes
through FastAPI's Depends, so tests can swap them with app.dependency_overrides.
"""
from functools import lru_cache

from mealprep.events.Event_Bus import EventBus
from mealprep.infra.Pantry_Repository import PantryRepository
from mealprep.infra.Plan_Repository import MealPlanRepository
from mealprep.infra.Recipe_Repository import RecipeRepository
from mealprep.infra.nutritionix_client import NutritionixClient
from mealprep.infra.recipe_ai import RecipeGenerator, get_openai_client


@lru_cache
def get_event_bus() -> EventBus:
    return EventBus()


@lru_cache
def get_recipe_repository() -> RecipeRepository:
    return RecipeRepository()


def get_pantry_repository() -> PantryRepository:
    return PantryRepository(event_bus=get_event_bus())


def get_meal_plan_repository() -> MealPlanRepository:
    return MealPlanRepository()


def get_nutritionix_client() -> NutritionixClient:
    return NutritionixClient()


@lru_cache
def get_recipe_generator() -> RecipeGenerator:
    return RecipeGenerator(client=get_openai_client())
