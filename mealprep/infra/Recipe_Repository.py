"""Recipe catalog repository (file persistence)."""
import logging
from pathlib import Path
from typing import List, Optional

from mealprep.domain.Recipe import Recipe
from mealprep.infra.json_store import read_json, atomic_write
from mealprep.infra.paths import RECIPES_FILE, SAMPLE_RECIPES_FILE

logger = logging.getLogger(__name__)


class RecipeRepository:
    """Owns the recipe catalog. A missing catalog file is seeded from the bundled sample recipes."""

    def __init__(self, path: Path = RECIPES_FILE, seed_path: Optional[Path] = SAMPLE_RECIPES_FILE):
        self.path = Path(path)
        self.seed_path = Path(seed_path) if seed_path else None
        self._recipes: List[Recipe] = self._load()

    def _load(self) -> List[Recipe]:
        if not self.path.exists() and self.seed_path is not None:
            logger.info("Seeding recipe catalog %s from %s", self.path, self.seed_path)
            recipes = [Recipe.from_dict(entry) for entry in read_json(self.seed_path, [])]
            self._recipes = recipes
            self._save()
            return recipes
        return [Recipe.from_dict(entry) for entry in read_json(self.path, [])]

    def _save(self):
        atomic_write(self.path, [r.to_dict() for r in self._recipes])

    def get_all_recipes(self) -> List[Recipe]:
        return list(self._recipes)

    def get_recipe(self, recipe_id: str) -> Optional[Recipe]:
        return next((r for r in self._recipes if r.id == recipe_id), None)

    def add_recipe(self, recipe: Recipe) -> Recipe:
        self._recipes.append(recipe)
        self._save()
        return recipe

    def update_recipe(self, recipe: Recipe) -> bool:
        for index, existing in enumerate(self._recipes):
            if existing.id == recipe.id:
                self._recipes[index] = recipe
                self._save()
                return True
        return False

    def remove_recipe(self, recipe_id: str) -> bool:
        before = len(self._recipes)
        self._recipes = [r for r in self._recipes if r.id != recipe_id]
        if len(self._recipes) == before:
            return False
        self._save()
        return True
