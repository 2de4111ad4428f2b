from fastapi import FastAPI
import logging

from mealprep.api.deps import get_event_bus
from mealprep.api.routes import ingredients, meal_plans, pantry, recipes
from mealprep.api.api_ai import router as ai_router
from mealprep.events.Event_Bus import EventBus, PANTRY_ITEM_ADDED, PANTRY_ITEM_REMOVED, PANTRY_NEAR_EXPIRY

# Logging
logger = logging.getLogger("mealprep_app")


def _log_pantry_event(event_name: str, payload):
    ingredient = payload.get("ingredient") if isinstance(payload, dict) else None
    name = getattr(ingredient, "name", "?")
    if event_name == PANTRY_NEAR_EXPIRY:
        logger.warning("%s expires in %s day(s)", name, payload.get("days_left"))
    else:
        logger.info("%s: %s", event_name, name)


def register_event_logging(bus: EventBus):
    for event_name in (PANTRY_ITEM_ADDED, PANTRY_ITEM_REMOVED, PANTRY_NEAR_EXPIRY):
        bus.subscribe(event_name, _log_pantry_event)


def create_app() -> FastAPI:
    app = FastAPI(title="MealPrep Pantry & Recipe API")

    # Routers
    app.include_router(ai_router)
    app.include_router(recipes.router)
    app.include_router(pantry.router)
    app.include_router(ingredients.router)
    app.include_router(meal_plans.router)

    register_event_logging(get_event_bus())

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app


# Initialize FastAPI app
app = create_app()
