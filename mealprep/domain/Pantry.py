"""Pantry aggregate: collection of Ingredient items owned by the user, unique by name."""
import logging
from datetime import date
from typing import List, Optional, Set
from mealprep.domain.Ingredient import Ingredient
from mealprep.events.Event_Bus import EventBus, PANTRY_ITEM_ADDED, PANTRY_ITEM_REMOVED, PANTRY_NEAR_EXPIRY
from mealprep.utilities.constants import DAYS_BEFORE_EXPIRY

logger = logging.getLogger(__name__)


class DuplicateIngredientError(ValueError):
    """Another pantry item already uses this name."""


class Pantry:
    def __init__(self, items: Optional[List[Ingredient]] = None, event_bus: Optional[EventBus] = None):
        self.items: List[Ingredient] = []
        self._event_bus = event_bus or EventBus()
        for item in items or []:
            self.add_item(item)

    # --- Observer helpers -------------------------------------------------
    def _notify_near_expiry(self, ingredient: Ingredient, days_left: int):
        self._event_bus.publish(PANTRY_NEAR_EXPIRY, {
            "ingredient": ingredient,
            "days_left": days_left,
            "threshold": DAYS_BEFORE_EXPIRY
        })

    # --- Mutations ----------------------------------------------------------
    def add_item(self, item: Ingredient) -> bool:
        '''
        Adds an item to the pantry. Blank names and names already present
        (case-insensitive) are rejected and leave the pantry unchanged.
        '''
        if not item.name or not item.name.strip():
            logger.warning("Attempted to add ingredient with empty name")
            return False
        if self.find_by_name(item.name) is not None:
            logger.warning("Ingredient '%s' already exists", item.name)
            return False
        self.items.append(item)
        self._event_bus.publish(PANTRY_ITEM_ADDED, {"ingredient": item})
        self._evaluate_item(item)
        return True

    def remove_item(self, ingredient_id: str) -> bool:
        '''
        Removes the item with the given id. Returns False if no such item exists.
        '''
        item = self.get_item(ingredient_id)
        if item is None:
            return False
        self.items.remove(item)
        self._event_bus.publish(PANTRY_ITEM_REMOVED, {"ingredient": item})
        return True

    def update_item(self, ingredient: Ingredient):
        '''
        Replaces the stored item that has the same id. The new name must be
        non-blank and not used by any other item.
        '''
        if not ingredient.name or not ingredient.name.strip():
            raise ValueError("Ingredient name cannot be empty")
        clash = self.find_by_name(ingredient.name)
        if clash is not None and clash.id != ingredient.id:
            raise DuplicateIngredientError(f"Ingredient '{ingredient.name}' already exists")
        for index, item in enumerate(self.items):
            if item.id == ingredient.id:
                self.items[index] = ingredient
                self._evaluate_item(ingredient)
                return ingredient
        raise ValueError(f"Ingredient '{ingredient.id}' not found in pantry.")

    def update_quantity(self, ingredient_id: str, new_quantity: float):
        '''
        Sets the quantity of a specific ingredient in the pantry.
        '''
        if new_quantity < 0:
            raise ValueError(f"Quantity cannot be negative: {new_quantity}")
        item = self.get_item(ingredient_id)
        if item is None:
            raise ValueError(f"Ingredient '{ingredient_id}' not found in pantry.")
        item.set_quantity(new_quantity - item.quantity)
        return item

    # --- Evaluation logic --------------------------------------------------
    def _evaluate_item(self, item: Ingredient):
        days_left = item.days_until_expiry()
        if days_left is not None and days_left <= DAYS_BEFORE_EXPIRY:
            self._notify_near_expiry(item, days_left)

    def expiring_soon(self, within_days: int = DAYS_BEFORE_EXPIRY, today: Optional[date] = None) -> List[Ingredient]:
        '''Items expiring in <= within_days days (including already expired), soonest first.'''
        result = []
        for item in self.items:
            days_left = item.days_until_expiry(today)
            if days_left is not None and days_left <= within_days:
                result.append(item)
        result.sort(key=lambda i: (i.expiration_date, i.name.lower()))
        return result

    # --- Queries ------------------------------------------------------------
    def get_items(self):
        '''
        Returns the list of pantry items.
        '''
        return self.items

    def get_item(self, ingredient_id: str) -> Optional[Ingredient]:
        return next((item for item in self.items if item.id == ingredient_id), None)

    def find_by_name(self, name: str) -> Optional[Ingredient]:
        key = name.strip().lower()
        return next((item for item in self.items if item.name.strip().lower() == key), None)

    def names(self) -> Set[str]:
        '''
        Snapshot of ingredient names, the only pantry data recipe matching looks at.
        '''
        return {item.name for item in self.items}

    def __len__(self) -> int:
        return len(self.items)

    def __str__(self) -> str:
        items_str = ",\n\t".join(str(item) for item in self.items)
        return f"Items:\n\t{items_str}"

    def __repr__(self) -> str:
        return self.__str__()

    def from_dict(self, data):
        '''
        Populates the Pantry object from a list of dictionaries without
        publishing events; stored blank or duplicate names are dropped.
        '''
        for item_data in data:
            item = Ingredient.from_dict(item_data)
            if item.name.strip() and self.find_by_name(item.name) is None:
                self.items.append(item)
        return self

    def to_dict(self):
        '''
        Converts the Pantry object to a list of dictionaries.
        '''
        return [item.to_dict() for item in self.items]
