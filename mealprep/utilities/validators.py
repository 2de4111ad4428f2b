"""
Input validation schemas using Pydantic for better data integrity.
"""
import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from mealprep.domain.Ingredient import Ingredient, IngredientCategory, MeasurementUnit
from mealprep.domain.MealPlan import MealType
from mealprep.domain.NutritionalInfo import NutritionalInfo
from mealprep.domain.Recipe import Recipe, RecipeIngredient, DifficultyLevel


class IngredientInput(BaseModel):
    """Schema for pantry ingredient input validation."""
    name: str = Field(..., min_length=1, max_length=100)
    category: IngredientCategory = IngredientCategory.OTHER
    quantity: float = Field(1.0, ge=0, le=100000)
    unit: MeasurementUnit = MeasurementUnit.ITEM
    expiration_date: Optional[datetime.date] = None
    confidence: float = Field(1.0, ge=0, le=1)

    @field_validator('name')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        v = v.strip()
        if not v:
            raise ValueError('Ingredient name cannot be empty')
        return v

    def to_ingredient(self, ingredient_id: Optional[str] = None) -> Ingredient:
        return Ingredient(
            id=ingredient_id,
            name=self.name,
            category=self.category,
            quantity=self.quantity,
            unit=self.unit,
            expiration_date=self.expiration_date,
            confidence=self.confidence,
        )


class RecipeIngredientInput(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    quantity: float = Field(1.0, ge=0)
    unit: MeasurementUnit = MeasurementUnit.ITEM
    notes: Optional[str] = None

    @field_validator('name')
    @classmethod
    def strip_whitespace(cls, v):
        v = v.strip()
        if not v:
            raise ValueError('Ingredient name cannot be empty')
        return v


class NutritionalInfoInput(BaseModel):
    calories: float = Field(0, ge=0)
    protein: float = Field(0, ge=0)
    carbohydrates: float = Field(0, ge=0)
    fat: float = Field(0, ge=0)
    fiber: float = Field(0, ge=0)
    sugar: float = Field(0, ge=0)
    sodium: float = Field(0, ge=0)
    cholesterol: float = Field(0, ge=0)


class RecipeInput(BaseModel):
    """Schema for recipe input validation."""
    name: str = Field(..., min_length=3, max_length=200)
    description: str = ""
    required_ingredients: List[RecipeIngredientInput] = Field(default_factory=list)
    optional_ingredients: List[RecipeIngredientInput] = Field(default_factory=list)
    instructions: List[str] = Field(default_factory=list)
    prep_time: int = Field(0, ge=0)
    cook_time: int = Field(0, ge=0)
    servings: int = Field(1, ge=1, le=50)
    difficulty: DifficultyLevel = DifficultyLevel.EASY
    nutritional_info: NutritionalInfoInput = Field(default_factory=NutritionalInfoInput)
    image_url: Optional[str] = None
    tags: List[str] = Field(default_factory=list)

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        """Validate recipe name."""
        if not v.strip():
            raise ValueError('Recipe name cannot be empty')
        return v.strip()

    @field_validator('instructions')
    @classmethod
    def validate_instructions(cls, v):
        """Filter out empty steps."""
        return [step.strip() for step in v if step and step.strip()]

    @field_validator('tags')
    @classmethod
    def validate_tags(cls, v):
        return [tag.strip() for tag in v if tag and tag.strip()]

    def to_recipe(self, recipe_id: Optional[str] = None) -> Recipe:
        def _ingredients(items):
            return [RecipeIngredient(i.name, i.quantity, i.unit, i.notes) for i in items]

        return Recipe(
            id=recipe_id,
            name=self.name,
            description=self.description,
            required_ingredients=_ingredients(self.required_ingredients),
            optional_ingredients=_ingredients(self.optional_ingredients),
            instructions=self.instructions,
            prep_time=self.prep_time,
            cook_time=self.cook_time,
            servings=self.servings,
            difficulty=self.difficulty,
            nutritional_info=NutritionalInfo(**self.nutritional_info.model_dump()),
            image_url=self.image_url,
            tags=self.tags,
        )


class QuantityUpdateInput(BaseModel):
    """Schema for pantry quantity update validation."""
    quantity: float = Field(..., ge=0)


class ObservationInput(BaseModel):
    """One classifier label with its confidence."""
    identifier: str = Field(..., min_length=1)
    confidence: float = Field(..., ge=0, le=1)


class ScanInput(BaseModel):
    observations: List[ObservationInput] = Field(default_factory=list)
    add: bool = True


class GenerateRecipeInput(BaseModel):
    food_items: List[str] = Field(default_factory=list)
    observations: List[ObservationInput] = Field(default_factory=list)
    save: bool = False


class MealPlanInput(BaseModel):
    recipe_id: str = Field(..., min_length=1)
    meal_type: MealType
    date: Optional[datetime.date] = None
    servings: int = Field(1, ge=1, le=50)
    notes: Optional[str] = None
