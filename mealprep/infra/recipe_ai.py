"""AI recipe generation from detected food items (OpenAI Responses API)."""
import re
import json
import logging
from json import JSONDecodeError
from typing import Any, Dict, List, Optional

from openai import OpenAI, OpenAIError

from mealprep.domain.DetectedRecipe import DetectedRecipe, DetectedIngredient
from mealprep.utilities.config import OPENAI_API_KEY, OPENAI_MODEL
from mealprep.utilities.constants import (
    PROMPT_TEMPLATE, RECIPE_JSON_FORMAT, FIX_JSON_PROMPT, AI_RECIPE_CONFIDENCE, MOCK_RECIPE_CONFIDENCE,
    DEFAULT_PREP_TIME, DEFAULT_SERVINGS,
)

logger = logging.getLogger(__name__)


class RecipeAIError(Exception):
    """Base error for AI recipe generation."""


class NoFoodDetectedError(RecipeAIError):
    def __init__(self):
        super().__init__("No food items detected in the image")


class RecipeAIProcessingError(RecipeAIError):
    pass


# === Helper: Get OpenAI Client ===
def get_openai_client(api_key: str = OPENAI_API_KEY) -> Optional[OpenAI]:
    """Return an OpenAI client if an API key is set, otherwise None."""
    if not api_key:
        return None
    return OpenAI(api_key=api_key)


class RecipeGenerator:
    """Suggests a recipe for the food items detected in a photo.

    Without an OpenAI client, or when the model's answer cannot be turned into
    a recipe, a simple template recipe is built from the items instead.
    """

    def __init__(self, client: Optional[Any] = None, model: str = OPENAI_MODEL):
        self.client = client
        self.model = model

    def generate_from_food_items(self, food_items: List[str]) -> DetectedRecipe:
        items = [i.strip() for i in food_items if i and i.strip()]
        if not items:
            raise NoFoodDetectedError()

        if self.client is None:
            logger.warning("OPENAI_API_KEY not set, using template recipe.")
            return generate_mock_recipe(items)

        prompt = PROMPT_TEMPLATE.format(items=", ".join(items)) + RECIPE_JSON_FORMAT
        try:
            response = self.client.responses.create(model=self.model, input=prompt)
        except OpenAIError as e:
            logger.exception("OpenAI request failed")
            raise RecipeAIProcessingError(f"AI processing failed: {e}") from e

        recipe_text = (response.output_text or "").strip()
        parsed = _parse_json_text(recipe_text) if recipe_text else None
        if parsed is None and recipe_text:
            fixed = self._ask_for_json(recipe_text)
            parsed = _parse_json_text(fixed) if fixed else None

        if not isinstance(parsed, dict):
            logger.warning("AI output is not a JSON recipe; using template recipe.")
            return generate_mock_recipe(items)
        return _detected_recipe_from_json(parsed, items)

    def _ask_for_json(self, previous_output: str) -> Optional[str]:
        """One follow-up request asking the model to restate its recipe as bare JSON."""
        prompt = FIX_JSON_PROMPT.format(output=previous_output)
        try:
            response = self.client.responses.create(model=self.model, input=prompt)
        except OpenAIError:
            logger.exception("JSON reformat request failed")
            return None
        return (response.output_text or "").strip()


def _detected_recipe_from_json(data: Dict[str, Any], detected_items: List[str]) -> DetectedRecipe:
    ingredients = []
    for entry in data.get("ingredients") or []:
        if not isinstance(entry, dict):
            continue
        ingredients.append(DetectedIngredient(
            name=str(entry.get("name", "")),
            quantity=str(entry.get("quantity", "1")),
            unit=entry.get("unit"),
        ))

    def _int(value, default):
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    instructions = data.get("instructions")
    return DetectedRecipe(
        name=data.get("name") or "Generated Recipe",
        description=data.get("description") or "",
        ingredients=ingredients,
        instructions=[str(s) for s in instructions] if isinstance(instructions, list) and instructions
        else ["No instructions provided"],
        estimated_prep_time=_int(data.get("prepTime"), DEFAULT_PREP_TIME),
        estimated_servings=_int(data.get("servings"), DEFAULT_SERVINGS),
        cuisine_type=data.get("cuisineType"),
        confidence=AI_RECIPE_CONFIDENCE,
        detected_food_items=detected_items,
    )


# === Template fallback ===
def generate_recipe_name(items: List[str]) -> str:
    if not items:
        return "Mystery Dish"
    if len(items) == 1:
        return f"{items[0]} Delight"
    return f"{items[0]} and {items[1]} Special"


def generate_mock_recipe(food_items: List[str]) -> DetectedRecipe:
    return DetectedRecipe(
        name=generate_recipe_name(food_items),
        description=f"A delicious recipe featuring {', '.join(food_items[:3])}",
        ingredients=[DetectedIngredient(item, "1", "serving") for item in food_items[:5]],
        instructions=[
            "Prepare all ingredients and wash thoroughly",
            f"Combine {' and '.join(food_items[:2])} in a bowl",
            "Cook or mix according to your preference",
            "Season to taste and serve",
        ],
        estimated_prep_time=DEFAULT_PREP_TIME,
        estimated_servings=DEFAULT_SERVINGS,
        cuisine_type=None,
        confidence=MOCK_RECIPE_CONFIDENCE,
        detected_food_items=list(food_items),
    )


# === Reading JSON out of model output ===
_FENCED_BLOCK = re.compile(r"```(?:json)?\s*(.*?)```", re.S)
_TRAILING_COMMA = re.compile(r",\s*([}\]])")
_decoder = json.JSONDecoder()


def _parse_json_text(text: str) -> Optional[Dict[str, Any]]:
    """Return the first JSON object found in model output, or None.

    The whole text is tried first. Otherwise the body of a markdown code fence
    (or the whole text when there is none) has its trailing commas dropped and
    is decoded from each opening brace in turn.
    """
    try:
        data = json.loads(text)
        if isinstance(data, dict):
            return data
    except JSONDecodeError:
        pass

    fenced = _FENCED_BLOCK.search(text)
    body = _TRAILING_COMMA.sub(r"\1", (fenced.group(1) if fenced else text).strip())
    for start, char in enumerate(body):
        if char != "{":
            continue
        try:
            data, _ = _decoder.raw_decode(body, start)
        except JSONDecodeError:
            continue
        if isinstance(data, dict):
            return data
    logger.debug("No JSON object in AI output: %s", text[:200])
    return None
