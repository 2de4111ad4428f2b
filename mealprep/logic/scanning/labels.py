"""Turn image-classifier labels into pantry ingredients.

The classifier itself runs elsewhere (on the device); this module only sees its
observations as (identifier, confidence) pairs and decides which of them are
food, what they should be called and which category they belong to.
"""
from __future__ import annotations
from typing import Iterable, List, Sequence, Tuple

from mealprep.domain.Ingredient import Ingredient, IngredientCategory, MeasurementUnit
from mealprep.utilities.constants import (
    SCAN_CONFIDENCE_THRESHOLD, SCAN_FALLBACK_CONFIDENCE_THRESHOLD, SCAN_MAX_RESULTS,
    DETECTED_FOOD_CONFIDENCE, DETECTED_FOOD_MAX,
)

__all__ = [
    "Observation", "clean_ingredient_name", "categorize_ingredient", "categorize_food",
    "is_food_label", "is_food_related", "map_serving_unit",
    "ingredients_from_classifications", "detected_food_items",
]

Observation = Tuple[str, float]

FOOD_LABEL_KEYWORDS = (
    # Vegetables
    "vegetable", "tomato", "lettuce", "carrot", "broccoli", "spinach", "onion", "pepper", "cucumber",
    "celery", "cabbage", "cauliflower", "potato", "mushroom", "corn", "pea", "bean", "squash",
    # Fruits
    "fruit", "apple", "banana", "orange", "grape", "strawberry", "watermelon", "lemon", "lime",
    "peach", "pear", "cherry", "berry", "melon", "mango", "pineapple", "kiwi",
    # Proteins
    "meat", "chicken", "beef", "pork", "fish", "salmon", "tuna", "shrimp", "egg", "turkey", "tofu",
    "bacon", "sausage", "ham",
    # Dairy
    "milk", "cheese", "yogurt", "butter", "cream", "dairy",
    # Grains
    "bread", "rice", "pasta", "quinoa", "oat", "wheat", "cereal", "grain", "flour",
    # General food terms
    "food", "meal", "dish", "ingredient", "produce", "edible",
)

# Broader list used when picking dish-level labels for recipe generation
DISH_KEYWORDS = (
    "food", "meal", "dish", "cuisine", "fruit", "vegetable", "meat", "seafood",
    "pasta", "rice", "bread", "salad", "soup", "dessert", "snack", "breakfast",
    "lunch", "dinner", "chicken", "beef", "pork", "fish", "cheese", "egg",
    "tomato", "potato", "carrot", "pizza", "burger", "sandwich", "taco", "sushi",
    "noodle", "cake", "cookie", "pie", "sauce", "spice",
)

_SCAN_CATEGORIES = (
    (IngredientCategory.VEGETABLE, ("tomato", "lettuce", "carrot", "broccoli", "spinach", "onion", "pepper", "cucumber")),
    (IngredientCategory.FRUIT, ("apple", "banana", "orange", "grape", "strawberry", "watermelon", "lemon", "lime")),
    (IngredientCategory.PROTEIN, ("chicken", "beef", "pork", "fish", "salmon", "egg", "turkey", "tofu")),
    (IngredientCategory.DAIRY, ("milk", "cheese", "yogurt", "butter", "cream")),
    (IngredientCategory.GRAIN, ("bread", "rice", "pasta", "quinoa", "oat", "wheat")),
)

# Nutritionix food names get a wider net, spices included
_FOOD_CATEGORIES = (
    (IngredientCategory.VEGETABLE, ("tomato", "lettuce", "carrot", "broccoli", "spinach", "pepper", "onion", "celery")),
    (IngredientCategory.FRUIT, ("apple", "banana", "orange", "berry", "grape", "melon")),
    (IngredientCategory.PROTEIN, ("chicken", "beef", "pork", "fish", "egg", "tofu", "bean", "lentil")),
    (IngredientCategory.DAIRY, ("milk", "cheese", "yogurt", "butter", "cream")),
    (IngredientCategory.GRAIN, ("rice", "bread", "pasta", "oat", "flour", "cereal")),
    (IngredientCategory.SPICE, ("pepper", "salt", "garlic", "ginger", "cumin", "basil")),
)


def _categorize(name: str, table) -> IngredientCategory:
    lowered = name.lower()
    for category, keywords in table:
        if any(k in lowered for k in keywords):
            return category
    return IngredientCategory.OTHER


def clean_ingredient_name(raw_name: str) -> str:
    """'granny_smith, apple' -> 'Granny Smith'."""
    cleaned = raw_name.replace("_", " ").title()
    cleaned = cleaned.split(",", 1)[0]
    return cleaned.strip()


def categorize_ingredient(name: str) -> IngredientCategory:
    return _categorize(name, _SCAN_CATEGORIES)


def categorize_food(name: str) -> IngredientCategory:
    return _categorize(name, _FOOD_CATEGORIES)


def is_food_label(identifier: str) -> bool:
    lowered = identifier.lower()
    return any(k in lowered for k in FOOD_LABEL_KEYWORDS)


def is_food_related(identifier: str) -> bool:
    lowered = identifier.lower()
    return any(k in lowered for k in DISH_KEYWORDS)


def map_serving_unit(serving_unit: str) -> MeasurementUnit:
    """Map a free-text serving unit ('tbsp', '1 cup', 'oz') onto a MeasurementUnit."""
    unit = serving_unit.lower()
    if "cup" in unit:
        return MeasurementUnit.CUP
    if "tbsp" in unit or "tablespoon" in unit:
        return MeasurementUnit.TABLESPOON
    if "tsp" in unit or "teaspoon" in unit:
        return MeasurementUnit.TEASPOON
    if "oz" in unit or "ounce" in unit:
        return MeasurementUnit.OUNCE
    if "lb" in unit or "pound" in unit:
        return MeasurementUnit.POUND
    if "kg" in unit or "kilogram" in unit:
        return MeasurementUnit.KILOGRAM
    if unit in ("g", "gram", "grams"):
        return MeasurementUnit.GRAM
    if "ml" in unit or "milliliter" in unit:
        return MeasurementUnit.MILLILITER
    if unit in ("l", "liter", "liters", "litre"):
        return MeasurementUnit.LITER
    return MeasurementUnit.ITEM


def _by_confidence(observations: Iterable[Observation]) -> List[Observation]:
    return sorted(observations, key=lambda o: o[1], reverse=True)


def ingredients_from_classifications(observations: Sequence[Observation],
                                     threshold: float = SCAN_CONFIDENCE_THRESHOLD,
                                     max_results: int = SCAN_MAX_RESULTS) -> List[Ingredient]:
    """Convert classifier observations into pantry ingredients.

    Observations above `threshold` are kept. If none pass, food-related
    observations above a much lower threshold are used instead, since a
    general-purpose classifier is rarely confident about produce. At most
    `max_results` ingredients are returned, most confident first.
    """
    selected = [o for o in observations if o[1] > threshold]
    if not selected:
        selected = [o for o in observations
                    if o[1] > SCAN_FALLBACK_CONFIDENCE_THRESHOLD and is_food_label(o[0])]

    ingredients = []
    for identifier, confidence in _by_confidence(selected)[:max_results]:
        name = clean_ingredient_name(identifier)
        if not name:
            continue
        ingredients.append(Ingredient(
            name=name,
            category=categorize_ingredient(name),
            quantity=1.0,
            unit=MeasurementUnit.ITEM,
            confidence=float(confidence),
        ))
    return ingredients


def detected_food_items(observations: Sequence[Observation]) -> List[str]:
    """Food labels worth sending to recipe generation."""
    items = [o for o in observations if o[1] > DETECTED_FOOD_CONFIDENCE and is_food_related(o[0])]
    return [clean_ingredient_name(identifier) for identifier, _ in _by_confidence(items)[:DETECTED_FOOD_MAX]]
