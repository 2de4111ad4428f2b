import json
from types import SimpleNamespace

import pytest
from openai import OpenAIError

from mealprep.infra.recipe_ai import (
    RecipeGenerator, NoFoodDetectedError, RecipeAIProcessingError,
    generate_recipe_name, generate_mock_recipe, get_openai_client,
)

RECIPE_JSON = {
    "name": "Caprese Salad",
    "description": "Fresh tomato and mozzarella",
    "ingredients": [
        {"name": "Tomato", "quantity": "2", "unit": "item"},
        {"name": "Mozzarella", "quantity": "1/2", "unit": "cup"},
    ],
    "instructions": ["Slice", "Layer", "Drizzle with oil"],
    "prepTime": 10,
    "servings": 2,
    "cuisineType": "Italian",
}


class FakeResponses:
    def __init__(self, outputs):
        self.outputs = list(outputs)
        self.calls = []

    def create(self, model, input):
        self.calls.append({"model": model, "input": input})
        output = self.outputs.pop(0)
        if isinstance(output, Exception):
            raise output
        return SimpleNamespace(output_text=output)


def _generator(*outputs):
    responses = FakeResponses(outputs)
    return RecipeGenerator(client=SimpleNamespace(responses=responses), model="test-model"), responses


def test_no_items_raises():
    generator, _ = _generator()
    with pytest.raises(NoFoodDetectedError):
        generator.generate_from_food_items(["", "  "])


def test_without_client_uses_template():
    recipe = RecipeGenerator(client=None).generate_from_food_items(["Tomato", "Basil"])
    assert recipe.name == "Tomato and Basil Special"
    assert recipe.confidence == 0.7


def test_parses_model_json():
    generator, responses = _generator(json.dumps(RECIPE_JSON))
    recipe = generator.generate_from_food_items(["Tomato", "Cheese"])

    assert recipe.name == "Caprese Salad"
    assert [i.name for i in recipe.ingredients] == ["Tomato", "Mozzarella"]
    assert recipe.estimated_prep_time == 10
    assert recipe.estimated_servings == 2
    assert recipe.cuisine_type == "Italian"
    assert recipe.confidence == 0.85
    assert recipe.detected_food_items == ["Tomato", "Cheese"]
    assert len(responses.calls) == 1
    assert responses.calls[0]["model"] == "test-model"
    assert "Tomato, Cheese" in responses.calls[0]["input"]


def test_parses_fenced_json_with_trailing_commas():
    text = "Here you go:\n```json\n" + json.dumps(RECIPE_JSON)[:-1] + ",}\n```"
    generator, responses = _generator(text)
    assert generator.generate_from_food_items(["Tomato"]).name == "Caprese Salad"
    assert len(responses.calls) == 1


def test_asks_model_to_fix_invalid_json():
    generator, responses = _generator("Caprese salad, no JSON", json.dumps(RECIPE_JSON))
    assert generator.generate_from_food_items(["Tomato"]).name == "Caprese Salad"
    assert len(responses.calls) == 2


def test_falls_back_to_template_when_unparseable():
    generator, _ = _generator("still not json", "nope")
    recipe = generator.generate_from_food_items(["Tomato"])
    assert recipe.name == "Tomato Delight"
    assert recipe.confidence == 0.7


def test_api_failure_raises_processing_error():
    generator, _ = _generator(OpenAIError("boom"))
    with pytest.raises(RecipeAIProcessingError):
        generator.generate_from_food_items(["Tomato"])


def test_missing_fields_get_defaults():
    generator, _ = _generator(json.dumps({"name": "Plain", "prepTime": "soon"}))
    recipe = generator.generate_from_food_items(["Rice"])
    assert recipe.estimated_prep_time == 30
    assert recipe.estimated_servings == 4
    assert recipe.instructions == ["No instructions provided"]
    assert recipe.ingredients == []


def test_recipe_names():
    assert generate_recipe_name([]) == "Mystery Dish"
    assert generate_recipe_name(["Apple"]) == "Apple Delight"
    assert generate_recipe_name(["Apple", "Pear", "Fig"]) == "Apple and Pear Special"


def test_mock_recipe_shape():
    items = ["A", "B", "C", "D", "E", "F"]
    recipe = generate_mock_recipe(items)
    assert len(recipe.ingredients) == 5
    assert recipe.ingredients[0].unit == "serving"
    assert recipe.description == "A delicious recipe featuring A, B, C"
    assert recipe.instructions[1] == "Combine A and B in a bowl"
    assert recipe.estimated_prep_time == 30
    assert recipe.estimated_servings == 4


def test_no_api_key_means_no_client():
    assert get_openai_client("") is None


def test_finds_object_inside_prose():
    text = "Sure! Try this: " + json.dumps(RECIPE_JSON) + " Enjoy {your meal}."
    generator, responses = _generator(text)
    assert generator.generate_from_food_items(["Tomato"]).name == "Caprese Salad"
    assert len(responses.calls) == 1


def test_failed_reformat_request_uses_template():
    generator, responses = _generator("no json here", OpenAIError("rate limited"))
    recipe = generator.generate_from_food_items(["Tomato"])
    assert recipe.name == "Tomato Delight"
    assert "no json here" in responses.calls[1]["input"]


def test_json_array_is_not_a_recipe():
    generator, _ = _generator("[1, 2, 3]", "[]")
    assert generator.generate_from_food_items(["Tomato"]).confidence == 0.7
