import pytest
from fastapi.testclient import TestClient

from mealprep.api import deps
from mealprep.api.api_run import create_app
from mealprep.events.Event_Bus import EventBus
from mealprep.infra.Pantry_Repository import PantryRepository
from mealprep.infra.Plan_Repository import MealPlanRepository
from mealprep.infra.Recipe_Repository import RecipeRepository
from mealprep.infra.recipe_ai import RecipeGenerator


@pytest.fixture
def event_bus():
    return EventBus()


@pytest.fixture
def recipe_repo(tmp_path):
    return RecipeRepository(tmp_path / "recipes.json")


@pytest.fixture
def pantry_repo(tmp_path, event_bus):
    return PantryRepository(tmp_path / "pantry_ingredients.json", event_bus=event_bus)


@pytest.fixture
def plan_repo(tmp_path):
    return MealPlanRepository(tmp_path / "meal_plans.json")


@pytest.fixture
def client(recipe_repo, pantry_repo, plan_repo):
    app = create_app()
    app.dependency_overrides[deps.get_recipe_repository] = lambda: recipe_repo
    app.dependency_overrides[deps.get_pantry_repository] = lambda: pantry_repo
    app.dependency_overrides[deps.get_meal_plan_repository] = lambda: plan_repo
    app.dependency_overrides[deps.get_recipe_generator] = lambda: RecipeGenerator(client=None)
    with TestClient(app) as test_client:
        yield test_client
