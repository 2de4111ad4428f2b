"""Simple Event Bus / Observer implementation for pantry notifications.

Event names published by the Pantry aggregate:
  pantry.item_added -> payload {"ingredient": Ingredient}
  pantry.item_removed -> payload {"ingredient": Ingredient}
  pantry.near_expiry -> payload {"ingredient": Ingredient, "days_left": int, "threshold": int}

Handlers are callables taking (event_name, payload). A failing handler is
logged and does not stop delivery to the others.
"""
from __future__ import annotations
import logging
from collections import defaultdict
from typing import Callable, Any, Dict, List

logger = logging.getLogger(__name__)

Handler = Callable[[str, Any], None]

# --- Event name constants (used across modules) ---
PANTRY_ITEM_ADDED = "pantry.item_added"
PANTRY_ITEM_REMOVED = "pantry.item_removed"
PANTRY_NEAR_EXPIRY = "pantry.near_expiry"


class EventBus:
	def __init__(self):
		self._handlers: Dict[str, List[Handler]] = defaultdict(list)

	def subscribe(self, event_name: str, handler: Handler) -> Handler:
		handlers = self._handlers[event_name]
		if handler not in handlers:
			handlers.append(handler)
		return handler

	def unsubscribe(self, event_name: str, handler: Handler) -> bool:
		handlers = self._handlers.get(event_name, [])
		if handler in handlers:
			handlers.remove(handler)
			return True
		return False

	def handler_count(self, event_name: str) -> int:
		return len(self._handlers.get(event_name, []))

	def publish(self, event_name: str, payload: Any) -> int:
		"""Deliver payload to every handler of event_name; returns how many succeeded."""
		delivered = 0
		for handler in list(self._handlers.get(event_name, [])):
			try:
				handler(event_name, payload)
				delivered += 1
			except Exception:
				logger.exception("Handler %r failed for %s", handler, event_name)
		return delivered


__all__ = ['EventBus', 'Handler', 'PANTRY_ITEM_ADDED', 'PANTRY_ITEM_REMOVED', 'PANTRY_NEAR_EXPIRY']
