from pathlib import Path
from mealprep.utilities.config import DATA_DIR as _CONFIGURED_DATA_DIR

# Centralized paths for data files (single source of truth)
DATA_DIR = _CONFIGURED_DATA_DIR.resolve()
RECIPES_FILE = DATA_DIR / 'recipes.json'
PANTRY_FILE = DATA_DIR / 'pantry_ingredients.json'
MEAL_PLANS_FILE = DATA_DIR / 'meal_plans.json'

# Seed catalog shipped with the package
SAMPLE_RECIPES_FILE = (Path(__file__).parent.parent / 'data' / 'sample_recipes.json').resolve()

__all__ = ['DATA_DIR', 'RECIPES_FILE', 'PANTRY_FILE', 'MEAL_PLANS_FILE', 'SAMPLE_RECIPES_FILE']
