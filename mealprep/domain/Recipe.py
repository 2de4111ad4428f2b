"""Recipe domain entity: name, required/optional ingredients, instructions, timings, nutrition info."""
from enum import Enum
from typing import List, Optional
from uuid import uuid4

from mealprep.domain.Ingredient import MeasurementUnit
from mealprep.domain.NutritionalInfo import NutritionalInfo


class DifficultyLevel(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    @classmethod
    def parse(cls, value) -> "DifficultyLevel":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.EASY


class RecipeIngredient:
    def __init__(self, name: str, quantity: float = 1.0, unit: MeasurementUnit = MeasurementUnit.ITEM,
                 notes: Optional[str] = None):
        self.name = name
        self.quantity = quantity
        self.unit = MeasurementUnit.parse(unit)
        self.notes = notes

    def __str__(self) -> str:
        return f"{self.quantity:g} {self.unit.abbreviation} {self.name}"

    __repr__ = __str__

    def __eq__(self, other) -> bool:
        if not isinstance(other, RecipeIngredient):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    @staticmethod
    def from_dict(data) -> "RecipeIngredient":
        d = dict(data) if isinstance(data, dict) else {}
        try:
            quantity = float(d.get("quantity", 1.0))
        except (TypeError, ValueError):
            quantity = 1.0
        return RecipeIngredient(
            name=str(d.get("name", "")).strip(),
            quantity=quantity,
            unit=d.get("unit", MeasurementUnit.ITEM.value),
            notes=d.get("notes") or None,
        )

    def to_dict(self):
        return {"name": self.name, "quantity": self.quantity, "unit": self.unit.value, "notes": self.notes}


class Recipe:
    def __init__(self, name: str = "", description: str = "",
                 required_ingredients: Optional[List[RecipeIngredient]] = None,
                 optional_ingredients: Optional[List[RecipeIngredient]] = None,
                 instructions: Optional[List[str]] = None, prep_time: int = 0, cook_time: int = 0,
                 servings: int = 1, difficulty: DifficultyLevel = DifficultyLevel.EASY,
                 nutritional_info: Optional[NutritionalInfo] = None, image_url: Optional[str] = None,
                 tags: Optional[List[str]] = None, id: Optional[str] = None):
        self.id = id or str(uuid4())
        self.name = name
        self.description = description
        self.required_ingredients = required_ingredients[:] if required_ingredients else []
        self.optional_ingredients = optional_ingredients[:] if optional_ingredients else []
        self.instructions = instructions[:] if instructions else []
        self.prep_time = prep_time  # minutes
        self.cook_time = cook_time  # minutes
        self.servings = servings
        self.difficulty = DifficultyLevel.parse(difficulty)
        self.nutritional_info = nutritional_info or NutritionalInfo()
        self.image_url = image_url
        self.tags = tags[:] if tags else []

    @property
    def total_time(self) -> int:
        return self.prep_time + self.cook_time

    def __str__(self) -> str:
        return (f"{self.name} - {self.servings} servings - {self.difficulty.display_name} - "
                f"{self.total_time} min - Tags: {', '.join(self.tags)}")

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        return Recipe(
            id=d.get("id") or None,
            name=str(d.get("name", "")),
            description=str(d.get("description", "")),
            required_ingredients=[RecipeIngredient.from_dict(i) for i in d.get("required_ingredients", [])],
            optional_ingredients=[RecipeIngredient.from_dict(i) for i in d.get("optional_ingredients", [])],
            instructions=list(d.get("instructions", [])),
            prep_time=int(d.get("prep_time", 0) or 0),
            cook_time=int(d.get("cook_time", 0) or 0),
            servings=int(d.get("servings", 1) or 1),
            difficulty=d.get("difficulty", DifficultyLevel.EASY.value),
            nutritional_info=NutritionalInfo.from_dict(d.get("nutritional_info", {})),
            image_url=d.get("image_url") or None,
            tags=list(d.get("tags", [])),
        )

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "required_ingredients": [ing.to_dict() for ing in self.required_ingredients],
            "optional_ingredients": [ing.to_dict() for ing in self.optional_ingredients],
            "instructions": self.instructions,
            "prep_time": self.prep_time,
            "cook_time": self.cook_time,
            "servings": self.servings,
            "difficulty": self.difficulty.value,
            "nutritional_info": self.nutritional_info.to_dict(),
            "image_url": self.image_url,
            "tags": self.tags,
        }
