"""Ingredient intake: classifier scan results and Nutritionix search."""
import logging
from fastapi import APIRouter, Depends, HTTPException, Query

from mealprep.api.deps import get_nutritionix_client, get_pantry_repository
from mealprep.infra.Pantry_Repository import PantryRepository
from mealprep.infra.nutritionix_client import (
    NutritionixClient, NutritionixError, NutritionixConfigError
)
from mealprep.logic.scanning.labels import ingredients_from_classifications
from mealprep.utilities.validators import ScanInput

router = APIRouter(prefix="/api", tags=["ingredients"])
logger = logging.getLogger(__name__)


@router.post("/scan")
def scan_ingredients(payload: ScanInput, repo: PantryRepository = Depends(get_pantry_repository)):
    """Turn classifier observations into ingredients; with add=true they are stored in the pantry."""
    ingredients = ingredients_from_classifications([(o.identifier, o.confidence) for o in payload.observations])
    added, skipped = [], []
    if payload.add and ingredients:
        pantry = repo.load()
        for ingredient in ingredients:
            (added if pantry.add_item(ingredient) else skipped).append(ingredient.to_dict())
        repo.save(pantry)
    return {
        "ingredients": [i.to_dict() for i in ingredients],
        "added": added,
        "skipped": skipped,
    }


def _raise_for_nutritionix(e: NutritionixError):
    if isinstance(e, NutritionixConfigError):
        raise HTTPException(status_code=503, detail=str(e))
    logger.error("Nutritionix lookup failed: %s", e)
    raise HTTPException(status_code=502, detail=str(e))


@router.get("/ingredients/search")
async def search_ingredients(query: str = Query(default=""),
                             client: NutritionixClient = Depends(get_nutritionix_client)):
    try:
        foods = await client.search_ingredients(query.strip())
    except NutritionixError as e:
        _raise_for_nutritionix(e)
    return {
        "count": len(foods),
        "foods": [f.to_dict() for f in foods],
        "ingredients": [client.to_ingredient(f).to_dict() for f in foods],
    }


@router.get("/ingredients/details")
async def ingredient_details(query: str = Query(..., min_length=1),
                             client: NutritionixClient = Depends(get_nutritionix_client)):
    try:
        food = await client.get_ingredient_details(query.strip())
    except NutritionixError as e:
        _raise_for_nutritionix(e)
    return {"food": food.to_dict(), "ingredient": client.to_ingredient(food).to_dict()}
