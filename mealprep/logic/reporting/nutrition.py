"""Daily nutrition aggregation over planned meals."""
from collections import defaultdict
from datetime import date
from typing import Dict, Any, Iterable, List

from mealprep.domain.MealPlan import MealPlan, MealType
from mealprep.domain.NutritionalInfo import NutritionalInfo


def sum_nutrition(infos: Iterable[NutritionalInfo]) -> NutritionalInfo:
    total = NutritionalInfo()
    for info in infos:
        total = total + info
    return total


def compute_daily_nutrition(meal_plans: List[MealPlan], day: date) -> Dict[str, Any]:
    """Aggregate nutrition for the meals planned on `day`.

    Each plan contributes one serving of its recipe. Returns structure:
    {
      'date': 'YYYY-MM-DD',
      'count': int,
      'totals': { calories, protein, carbohydrates, fat, fiber, sugar, sodium, cholesterol },
      'meals': { 'breakfast': [ { 'id', 'name', 'nutrition': {...} } ], ... }
    }
    """
    todays = [p for p in meal_plans if p.date == day]
    meals: Dict[str, List[Dict[str, Any]]] = defaultdict(list)
    for plan in todays:
        meals[plan.meal_type.value].append({
            'id': plan.id,
            'name': plan.recipe.name,
            'nutrition': plan.nutritional_info.to_dict(),
        })

    totals = sum_nutrition(p.nutritional_info for p in todays)
    return {
        'date': day.isoformat(),
        'count': len(todays),
        'totals': totals.to_dict(),
        # keep the slot order stable for the UI
        'meals': {t.value: meals[t.value] for t in MealType if t.value in meals},
    }


__all__ = ["compute_daily_nutrition", "sum_nutrition"]
