import httpx
import pytest

from mealprep.domain.Ingredient import IngredientCategory, MeasurementUnit
from mealprep.infra.nutritionix_client import (
    NutritionixClient, NutritionixAPIError, NutritionixConfigError,
    NutritionixDecodeError, NutritionixNetworkError,
)

BASE_URL = "https://nutritionix.test/v2"

BROCCOLI = {
    "food_name": "broccoli",
    "serving_unit": "cup",
    "serving_qty": 1,
    "photo": {"thumb": "https://img.test/broccoli.jpg"},
}


def _client(handler, app_id="id", app_key="key"):
    return NutritionixClient(app_id=app_id, app_key=app_key, base_url=BASE_URL,
                             transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_search_parses_common_foods():
    seen = {}

    def handler(request):
        seen["request"] = request
        return httpx.Response(200, json={"common": [BROCCOLI], "branded": []})

    foods = await _client(handler).search_ingredients("broccoli")

    assert [f.food_name for f in foods] == ["broccoli"]
    assert foods[0].photo_thumb_url == "https://img.test/broccoli.jpg"
    request = seen["request"]
    assert request.url.path == "/v2/search/instant"
    assert request.url.params["query"] == "broccoli"
    assert request.headers["x-app-id"] == "id"
    assert request.headers["x-app-key"] == "key"


@pytest.mark.asyncio
async def test_empty_query_makes_no_request():
    def handler(request):
        raise AssertionError("no request expected")

    assert await _client(handler, app_id="", app_key="").search_ingredients("") == []


@pytest.mark.asyncio
async def test_missing_credentials():
    client = _client(lambda request: httpx.Response(200, json={}), app_id="", app_key="")
    with pytest.raises(NutritionixConfigError):
        await client.search_ingredients("apple")
    with pytest.raises(NutritionixConfigError):
        await client.get_ingredient_details("apple")


@pytest.mark.asyncio
async def test_unauthorized():
    client = _client(lambda request: httpx.Response(401, json={"message": "nope"}))
    with pytest.raises(NutritionixAPIError) as exc:
        await client.search_ingredients("apple")
    assert str(exc.value) == "Invalid API credentials"
    assert exc.value.status_code == 401


@pytest.mark.asyncio
async def test_server_error_uses_body_message():
    client = _client(lambda request: httpx.Response(500, json={"message": "upstream down"}))
    with pytest.raises(NutritionixAPIError, match="upstream down"):
        await client.search_ingredients("apple")

    client = _client(lambda request: httpx.Response(503, text="busy"))
    with pytest.raises(NutritionixAPIError, match="status code 503"):
        await client.search_ingredients("apple")


@pytest.mark.asyncio
async def test_invalid_json_body():
    client = _client(lambda request: httpx.Response(200, text="<html>"))
    with pytest.raises(NutritionixDecodeError):
        await client.search_ingredients("apple")


@pytest.mark.asyncio
async def test_network_error():
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    with pytest.raises(NutritionixNetworkError):
        await _client(handler).search_ingredients("apple")


@pytest.mark.asyncio
async def test_details_returns_first_food():
    seen = {}

    def handler(request):
        seen["request"] = request
        food = dict(BROCCOLI, nf_calories=31, nf_total_fat=0.3, nf_protein=2.5,
                    nf_total_carbohydrate=6, serving_weight_grams=91)
        return httpx.Response(200, json={"foods": [food]})

    food = await _client(handler).get_ingredient_details("1 cup broccoli")

    assert seen["request"].method == "POST"
    assert seen["request"].url.path == "/v2/natural/nutrients"
    assert food.calories == 31
    assert food.protein == 2.5
    assert food.serving_weight_grams == 91


@pytest.mark.asyncio
async def test_details_without_foods():
    client = _client(lambda request: httpx.Response(200, json={"foods": []}))
    with pytest.raises(NutritionixAPIError, match="No data received from server"):
        await client.get_ingredient_details("nothing")


@pytest.mark.asyncio
async def test_malformed_food_entry():
    client = _client(lambda request: httpx.Response(200, json={"common": [{"food_name": "x"}]}))
    with pytest.raises(NutritionixDecodeError):
        await client.search_ingredients("x")


def test_to_ingredient():
    from mealprep.infra.nutritionix_client import CommonFood

    ingredient = NutritionixClient.to_ingredient(CommonFood.from_api(BROCCOLI))
    assert ingredient.name == "Broccoli"
    assert ingredient.category == IngredientCategory.VEGETABLE
    assert ingredient.unit == MeasurementUnit.CUP
    assert ingredient.quantity == 1.0
