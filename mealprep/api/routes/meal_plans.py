from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from mealprep.api.deps import get_meal_plan_repository, get_recipe_repository
from mealprep.domain.MealPlan import MealPlan
from mealprep.infra.Plan_Repository import MealPlanRepository
from mealprep.infra.Recipe_Repository import RecipeRepository
from mealprep.logic.reporting.nutrition import compute_daily_nutrition
from mealprep.utilities.validators import MealPlanInput

router = APIRouter(prefix="/api", tags=["nutrition"])


@router.get("/meal-plans")
def list_meal_plans(day: Optional[date] = Query(default=None),
                    plans: MealPlanRepository = Depends(get_meal_plan_repository)):
    day = day or date.today()
    todays = plans.get_meal_plans(day)
    return {"date": day.isoformat(), "count": len(todays), "meal_plans": [p.to_dict() for p in todays]}


@router.post("/meal-plans", status_code=201)
def add_meal_plan(payload: MealPlanInput,
                  plans: MealPlanRepository = Depends(get_meal_plan_repository),
                  recipes: RecipeRepository = Depends(get_recipe_repository)):
    recipe = recipes.get_recipe(payload.recipe_id)
    if recipe is None:
        raise HTTPException(status_code=404, detail=f"Recipe '{payload.recipe_id}' not found")
    plan = MealPlan(
        recipe=recipe,
        meal_type=payload.meal_type,
        date=payload.date or date.today(),
        servings=payload.servings,
        notes=payload.notes,
    )
    return plans.add_meal_plan(plan).to_dict()


@router.delete("/meal-plans/{plan_id}")
def delete_meal_plan(plan_id: str, plans: MealPlanRepository = Depends(get_meal_plan_repository)):
    if not plans.remove_meal_plan(plan_id):
        raise HTTPException(status_code=404, detail=f"Meal plan '{plan_id}' not found")
    return {"status": "deleted", "id": plan_id}


@router.get("/nutrition")
def api_nutrition(day: Optional[date] = Query(default=None),
                  plans: MealPlanRepository = Depends(get_meal_plan_repository)):
    day = day or date.today()
    return compute_daily_nutrition(plans.get_meal_plans(day), day)
