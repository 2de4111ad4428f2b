from fastapi import APIRouter, Depends, HTTPException

from mealprep.api.deps import get_pantry_repository
from mealprep.domain.Pantry import DuplicateIngredientError
from mealprep.infra.Pantry_Repository import PantryRepository
from mealprep.utilities.validators import IngredientInput, QuantityUpdateInput

router = APIRouter(prefix="/api/pantry", tags=["pantry"])


@router.get("")
def list_pantry(repo: PantryRepository = Depends(get_pantry_repository)):
    pantry = repo.load()
    return {
        "count": len(pantry),
        "items": pantry.to_dict(),
        "expiring_soon": [i.to_dict() for i in pantry.expiring_soon()],
    }


@router.post("", status_code=201)
def add_ingredient(payload: IngredientInput, repo: PantryRepository = Depends(get_pantry_repository)):
    pantry = repo.load()
    ingredient = payload.to_ingredient()
    if not pantry.add_item(ingredient):
        raise HTTPException(status_code=400, detail=f"Ingredient '{payload.name}' already exists")
    repo.save(pantry)
    return ingredient.to_dict()


@router.put("/{ingredient_id}")
def edit_ingredient(ingredient_id: str, payload: IngredientInput,
                    repo: PantryRepository = Depends(get_pantry_repository)):
    pantry = repo.load()
    try:
        ingredient = pantry.update_item(payload.to_ingredient(ingredient_id=ingredient_id))
    except DuplicateIngredientError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
    repo.save(pantry)
    return ingredient.to_dict()


@router.patch("/{ingredient_id}/quantity")
def update_quantity(ingredient_id: str, payload: QuantityUpdateInput,
                    repo: PantryRepository = Depends(get_pantry_repository)):
    pantry = repo.load()
    try:
        ingredient = pantry.update_quantity(ingredient_id, payload.quantity)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
    repo.save(pantry)
    return ingredient.to_dict()


@router.delete("/{ingredient_id}")
def delete_ingredient(ingredient_id: str, repo: PantryRepository = Depends(get_pantry_repository)):
    pantry = repo.load()
    if not pantry.remove_item(ingredient_id):
        raise HTTPException(status_code=404, detail=f"Ingredient '{ingredient_id}' not found")
    repo.save(pantry)
    return {"status": "deleted", "id": ingredient_id}
