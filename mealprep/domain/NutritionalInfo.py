"""NutritionalInfo value object: calories plus macro and micro nutrients for a whole recipe or a serving."""
from typing import Dict

NUTRIENT_FIELDS = ("calories", "protein", "carbohydrates", "fat", "fiber", "sugar", "sodium", "cholesterol")


class NutritionalInfo:
    def __init__(self, calories: float = 0, protein: float = 0, carbohydrates: float = 0, fat: float = 0,
                 fiber: float = 0, sugar: float = 0, sodium: float = 0, cholesterol: float = 0):
        self.calories = calories
        self.protein = protein  # grams
        self.carbohydrates = carbohydrates  # grams
        self.fat = fat  # grams
        self.fiber = fiber  # grams
        self.sugar = sugar  # grams
        self.sodium = sodium  # milligrams
        self.cholesterol = cholesterol  # milligrams

    def per_serving(self, servings: int) -> "NutritionalInfo":
        '''Divide every nutrient by the number of servings (non-positive servings leave values unchanged).'''
        if servings <= 0:
            return self
        return NutritionalInfo(**{f: getattr(self, f) / servings for f in NUTRIENT_FIELDS})

    def __add__(self, other: "NutritionalInfo") -> "NutritionalInfo":
        if not isinstance(other, NutritionalInfo):
            return NotImplemented
        return NutritionalInfo(**{f: getattr(self, f) + getattr(other, f) for f in NUTRIENT_FIELDS})

    def __eq__(self, other) -> bool:
        if not isinstance(other, NutritionalInfo):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __str__(self) -> str:
        return (f"{int(self.calories)} cal - Protein: {int(self.protein)}g, "
                f"Carbs: {int(self.carbohydrates)}g, Fat: {int(self.fat)}g")

    __repr__ = __str__

    @staticmethod
    def from_dict(data) -> "NutritionalInfo":
        d = data if isinstance(data, dict) else {}
        # Accept the short macro keys used by nutrition APIs as well
        if 'carbs' in d and 'carbohydrates' not in d:
            d = {**d, 'carbohydrates': d['carbs']}
        if 'fats' in d and 'fat' not in d:
            d = {**d, 'fat': d['fats']}
        return NutritionalInfo(**{f: float(d.get(f, 0) or 0) for f in NUTRIENT_FIELDS})

    def to_dict(self) -> Dict[str, float]:
        return {f: getattr(self, f) for f in NUTRIENT_FIELDS}
