"""Pantry repository (file persistence)."""
import logging
from pathlib import Path
from typing import Optional, Set

from mealprep.domain.Pantry import Pantry
from mealprep.events.Event_Bus import EventBus
from mealprep.infra.json_store import read_json, atomic_write
from mealprep.infra.paths import PANTRY_FILE

logger = logging.getLogger(__name__)


class PantryRepository:
    def __init__(self, path: Path = PANTRY_FILE, event_bus: Optional[EventBus] = None):
        self.path = Path(path)
        self.event_bus = event_bus or EventBus()

    def load(self) -> Pantry:
        """Load pantry ingredients from the JSON file into a Pantry aggregate."""
        pantry = Pantry(event_bus=self.event_bus)
        data = read_json(self.path, [])
        if not isinstance(data, list):
            logger.error("Pantry file %s does not contain a list", self.path)
            return pantry
        return pantry.from_dict(data)

    def save(self, pantry: Pantry) -> None:
        atomic_write(self.path, pantry.to_dict())

    def ingredient_names(self) -> Set[str]:
        return self.load().names()
