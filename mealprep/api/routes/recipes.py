from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from mealprep.api.deps import get_pantry_repository, get_recipe_repository
from mealprep.infra.Pantry_Repository import PantryRepository
from mealprep.infra.Recipe_Repository import RecipeRepository
from mealprep.logic.matching.recipe_matcher import recommend_recipes
from mealprep.utilities.constants import DEFAULT_MATCH_LIMIT
from mealprep.utilities.validators import RecipeInput

router = APIRouter(prefix="/api/recipes", tags=["recipes"])


@router.get("")
def list_recipes(recipes: RecipeRepository = Depends(get_recipe_repository)):
    catalog = recipes.get_all_recipes()
    return {"count": len(catalog), "recipes": [r.to_dict() for r in catalog]}


@router.get("/matches")
def recipe_matches(
    limit: int = Query(default=DEFAULT_MATCH_LIMIT, ge=0, le=100),
    pantry: PantryRepository = Depends(get_pantry_repository),
    recipes: RecipeRepository = Depends(get_recipe_repository),
):
    """Recipes the pantry can most nearly support, best match first.

    Response JSON structure:
        {
          "count": <int>,
          "total": <int>,
          "matches": [ { recipe, match_percentage } ]
        }
    """
    matches = recommend_recipes(pantry, recipes, limit=limit)
    return {
        "count": len(matches),
        "total": len(recipes.get_all_recipes()),
        "matches": [m.to_dict() for m in matches],
    }


@router.get("/{recipe_id}")
def get_recipe(recipe_id: str, recipes: RecipeRepository = Depends(get_recipe_repository)):
    recipe = recipes.get_recipe(recipe_id)
    if recipe is None:
        raise HTTPException(status_code=404, detail=f"Recipe '{recipe_id}' not found")
    return recipe.to_dict()


def _ensure_unique_name(recipes: RecipeRepository, name: str, recipe_id: Optional[str] = None):
    name = name.lower()
    if any(r.name.lower() == name and r.id != recipe_id for r in recipes.get_all_recipes()):
        raise HTTPException(status_code=400, detail="Recipe with this name already exists")


@router.post("", status_code=201)
def add_recipe(payload: RecipeInput, recipes: RecipeRepository = Depends(get_recipe_repository)):
    _ensure_unique_name(recipes, payload.name)
    recipe = recipes.add_recipe(payload.to_recipe())
    return recipe.to_dict()


@router.put("/{recipe_id}")
def update_recipe(recipe_id: str, payload: RecipeInput,
                  recipes: RecipeRepository = Depends(get_recipe_repository)):
    if recipes.get_recipe(recipe_id) is None:
        raise HTTPException(status_code=404, detail=f"Recipe '{recipe_id}' not found")
    _ensure_unique_name(recipes, payload.name, recipe_id)
    recipe = payload.to_recipe(recipe_id=recipe_id)
    recipes.update_recipe(recipe)
    return recipe.to_dict()


@router.delete("/{recipe_id}")
def delete_recipe(recipe_id: str, recipes: RecipeRepository = Depends(get_recipe_repository)):
    if not recipes.remove_recipe(recipe_id):
        raise HTTPException(status_code=404, detail=f"Recipe '{recipe_id}' not found")
    return {"status": "deleted", "id": recipe_id}
