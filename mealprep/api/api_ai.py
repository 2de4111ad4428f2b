import logging
from fastapi import APIRouter, Depends, HTTPException

from mealprep.api.deps import get_recipe_generator, get_recipe_repository
from mealprep.infra.Recipe_Repository import RecipeRepository
from mealprep.infra.recipe_ai import RecipeGenerator, RecipeAIError, NoFoodDetectedError
from mealprep.logic.scanning.labels import detected_food_items
from mealprep.utilities.validators import GenerateRecipeInput

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/api/recipes/generate")
def generate_recipe_ai(
    payload: GenerateRecipeInput,
    generator: RecipeGenerator = Depends(get_recipe_generator),
    recipes: RecipeRepository = Depends(get_recipe_repository),
):
    """Suggest a recipe from classifier observations and/or food item names, optionally saving it."""
    items = list(payload.food_items)
    if payload.observations:
        items.extend(detected_food_items([(o.identifier, o.confidence) for o in payload.observations]))

    try:
        detected = generator.generate_from_food_items(items)
    except NoFoodDetectedError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except RecipeAIError as e:
        logger.error("Recipe generation failed: %s", e)
        raise HTTPException(status_code=502, detail=str(e))

    result = {"detected": detected.to_dict(), "saved": False}
    if payload.save:
        recipe = recipes.add_recipe(detected.to_recipe())
        result.update({"saved": True, "recipe": recipe.to_dict()})
    return result
