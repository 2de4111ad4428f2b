"""DetectedRecipe: a recipe suggested from the food items seen in a photo."""
from typing import List, Optional

from mealprep.domain.Ingredient import MeasurementUnit
from mealprep.domain.Recipe import Recipe, RecipeIngredient


class DetectedIngredient:
    def __init__(self, name: str, quantity: str = "1", unit: Optional[str] = None):
        self.name = name
        self.quantity = quantity  # free text from the model, e.g. "1/2"
        self.unit = unit

    def to_recipe_ingredient(self) -> RecipeIngredient:
        try:
            quantity = float(self.quantity)
        except (TypeError, ValueError):
            quantity = 1.0
        return RecipeIngredient(self.name, quantity, MeasurementUnit.parse(self.unit))

    def to_dict(self):
        return {"name": self.name, "quantity": self.quantity, "unit": self.unit}


class DetectedRecipe:
    def __init__(self, name: str, description: str, ingredients: List[DetectedIngredient],
                 instructions: List[str], estimated_prep_time: int, estimated_servings: int,
                 cuisine_type: Optional[str], confidence: float, detected_food_items: List[str]):
        self.name = name
        self.description = description
        self.ingredients = ingredients
        self.instructions = instructions
        self.estimated_prep_time = estimated_prep_time  # minutes
        self.estimated_servings = estimated_servings
        self.cuisine_type = cuisine_type
        self.confidence = confidence
        self.detected_food_items = detected_food_items

    def __str__(self) -> str:
        return f"{self.name} ({self.confidence:.0%}) from {', '.join(self.detected_food_items)}"

    __repr__ = __str__

    def to_recipe(self) -> Recipe:
        '''Convert into a catalog Recipe; every detected ingredient becomes a required one.'''
        tags = ["ai-generated"]
        if self.cuisine_type:
            tags.append(self.cuisine_type.lower())
        return Recipe(
            name=self.name,
            description=self.description,
            required_ingredients=[i.to_recipe_ingredient() for i in self.ingredients if i.name],
            instructions=self.instructions,
            prep_time=self.estimated_prep_time,
            servings=self.estimated_servings,
            tags=tags,
        )

    def to_dict(self):
        return {
            "name": self.name,
            "description": self.description,
            "ingredients": [i.to_dict() for i in self.ingredients],
            "instructions": self.instructions,
            "estimated_prep_time": self.estimated_prep_time,
            "estimated_servings": self.estimated_servings,
            "cuisine_type": self.cuisine_type,
            "confidence": self.confidence,
            "detected_food_items": self.detected_food_items,
        }
