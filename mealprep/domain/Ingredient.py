"""Ingredient domain entity: a pantry item recognised by the scanner or added by hand."""
from datetime import date, datetime
from enum import Enum
from typing import Optional
from uuid import uuid4

from mealprep.utilities.constants import DATE_FORMAT


class IngredientCategory(str, Enum):
    VEGETABLE = "vegetable"
    FRUIT = "fruit"
    PROTEIN = "protein"
    DAIRY = "dairy"
    GRAIN = "grain"
    SPICE = "spice"
    CONDIMENT = "condiment"
    OTHER = "other"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    @classmethod
    def parse(cls, value) -> "IngredientCategory":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.OTHER


class MeasurementUnit(str, Enum):
    ITEM = "item"
    GRAM = "gram"
    KILOGRAM = "kilogram"
    OUNCE = "ounce"
    POUND = "pound"
    CUP = "cup"
    TABLESPOON = "tablespoon"
    TEASPOON = "teaspoon"
    MILLILITER = "milliliter"
    LITER = "liter"

    @property
    def abbreviation(self) -> str:
        return _UNIT_ABBREVIATIONS[self]

    @classmethod
    def parse(cls, value) -> "MeasurementUnit":
        '''Accepts either the unit name or its abbreviation; unknown units fall back to ITEM.'''
        if isinstance(value, cls):
            return value
        raw = str(value or "").strip()
        for unit in cls:
            if raw.lower() == unit.value or raw == unit.abbreviation:
                return unit
        return cls.ITEM


_UNIT_ABBREVIATIONS = {
    MeasurementUnit.ITEM: "item",
    MeasurementUnit.GRAM: "g",
    MeasurementUnit.KILOGRAM: "kg",
    MeasurementUnit.OUNCE: "oz",
    MeasurementUnit.POUND: "lb",
    MeasurementUnit.CUP: "cup",
    MeasurementUnit.TABLESPOON: "tbsp",
    MeasurementUnit.TEASPOON: "tsp",
    MeasurementUnit.MILLILITER: "ml",
    MeasurementUnit.LITER: "L",
}


def _parse_date(value) -> Optional[date]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return datetime.strptime(str(value), DATE_FORMAT).date()
    except ValueError:
        return None


class Ingredient:
    def __init__(self, name: str = "", category: IngredientCategory = IngredientCategory.OTHER,
                 quantity: float = 1.0, unit: MeasurementUnit = MeasurementUnit.ITEM,
                 date_added: Optional[date] = None, expiration_date: Optional[date] = None,
                 confidence: float = 1.0, id: Optional[str] = None):
        self.id = id or str(uuid4())
        self.name = name
        self.category = IngredientCategory.parse(category)
        self.quantity = quantity
        self.unit = MeasurementUnit.parse(unit)
        self.date_added = date_added or date.today()
        self.expiration_date = expiration_date
        # Classifier confidence; 1.0 for manually added items
        self.confidence = confidence

    def set_quantity(self, quantity: float):
        '''Adjusts the quantity by the specified delta (can be negative).'''
        self.quantity += quantity

    def days_until_expiry(self, today: Optional[date] = None) -> Optional[int]:
        if self.expiration_date is None:
            return None
        return (self.expiration_date - (today or date.today())).days

    def __str__(self) -> str:
        parts = [f"{self.name} - {self.quantity:g} {self.unit.abbreviation}", self.category.display_name]
        if self.expiration_date:
            parts.append(f"Exp: {self.expiration_date.strftime(DATE_FORMAT)}")
        if self.confidence < 1.0:
            parts.append(f"Confidence: {self.confidence:.0%}")
        return " - ".join(parts)

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Creates an Ingredient object from a dictionary. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        return Ingredient(
            id=d.get("id") or None,
            name=str(d.get("name", "")),
            category=d.get("category", IngredientCategory.OTHER.value),
            quantity=float(d.get("quantity", 1.0) or 0),
            unit=d.get("unit", MeasurementUnit.ITEM.value),
            date_added=_parse_date(d.get("date_added")),
            expiration_date=_parse_date(d.get("expiration_date")),
            confidence=float(d.get("confidence", 1.0)),
        )

    def to_dict(self):
        '''Converts the Ingredient object to a dictionary for JSON persistence.'''
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category.value,
            "quantity": self.quantity,
            "unit": self.unit.value,
            "date_added": self.date_added.strftime(DATE_FORMAT),
            "expiration_date": self.expiration_date.strftime(DATE_FORMAT) if self.expiration_date else "",
            "confidence": self.confidence,
        }
