"""
Nutritionix API client used for manual ingredient search.

API Documentation: https://docs.x.nutritionix.com/
"""
import logging
from typing import Any, Dict, List, Optional, Union

import httpx

from mealprep.domain.Ingredient import Ingredient
from mealprep.logic.scanning.labels import categorize_food, map_serving_unit
from mealprep.utilities.config import (
    NUTRITIONIX_APP_ID, NUTRITIONIX_APP_KEY, NUTRITIONIX_BASE_URL, HTTP_TIMEOUT
)

logger = logging.getLogger(__name__)


class NutritionixError(Exception):
    """Base error for Nutritionix lookups."""


class NutritionixConfigError(NutritionixError):
    pass


class NutritionixAPIError(NutritionixError):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class NutritionixDecodeError(NutritionixError):
    pass


class NutritionixNetworkError(NutritionixError):
    pass


class CommonFood:
    """Entry of the instant search 'common' list."""

    def __init__(self, food_name: str, serving_unit: str, serving_qty: float, photo_thumb_url: Optional[str] = None):
        self.food_name = food_name
        self.serving_unit = serving_unit
        self.serving_qty = serving_qty
        self.photo_thumb_url = photo_thumb_url

    @staticmethod
    def from_api(data: Dict[str, Any]) -> "CommonFood":
        photo = data.get("photo")
        return CommonFood(
            food_name=data["food_name"],
            serving_unit=data["serving_unit"],
            serving_qty=float(data["serving_qty"]),
            photo_thumb_url=photo.get("thumb") if isinstance(photo, dict) else photo,
        )

    def to_dict(self):
        return {
            "food_name": self.food_name,
            "serving_unit": self.serving_unit,
            "serving_qty": self.serving_qty,
            "photo_thumb_url": self.photo_thumb_url,
        }


class FoodDetails(CommonFood):
    """Entry of the natural/nutrients 'foods' list."""

    def __init__(self, food_name: str, serving_unit: str, serving_qty: float, calories: float,
                 total_fat: float, protein: float, total_carbohydrate: float,
                 serving_weight_grams: Optional[float] = None, photo_thumb_url: Optional[str] = None):
        super().__init__(food_name, serving_unit, serving_qty, photo_thumb_url)
        self.calories = calories
        self.total_fat = total_fat
        self.protein = protein
        self.total_carbohydrate = total_carbohydrate
        self.serving_weight_grams = serving_weight_grams

    @staticmethod
    def from_api(data: Dict[str, Any]) -> "FoodDetails":
        base = CommonFood.from_api(data)
        weight = data.get("serving_weight_grams")
        return FoodDetails(
            food_name=base.food_name,
            serving_unit=base.serving_unit,
            serving_qty=base.serving_qty,
            calories=float(data["nf_calories"]),
            total_fat=float(data["nf_total_fat"]),
            protein=float(data["nf_protein"]),
            total_carbohydrate=float(data["nf_total_carbohydrate"]),
            serving_weight_grams=float(weight) if weight is not None else None,
            photo_thumb_url=base.photo_thumb_url,
        )

    def to_dict(self):
        d = super().to_dict()
        d.update({
            "calories": self.calories,
            "total_fat": self.total_fat,
            "protein": self.protein,
            "total_carbohydrate": self.total_carbohydrate,
            "serving_weight_grams": self.serving_weight_grams,
        })
        return d


class NutritionixClient:
    def __init__(
        self,
        app_id: str = NUTRITIONIX_APP_ID,
        app_key: str = NUTRITIONIX_APP_KEY,
        base_url: str = NUTRITIONIX_BASE_URL,
        timeout: float = HTTP_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Args:
            app_id: Nutritionix application id
            app_key: Nutritionix application key
            base_url: API base URL
            timeout: Request timeout in seconds
            transport: Optional httpx transport (tests pass a MockTransport)
        """
        self.app_id = app_id
        self.app_key = app_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    @property
    def is_configured(self) -> bool:
        return bool(self.app_id and self.app_key)

    def _headers(self) -> Dict[str, str]:
        return {
            "x-app-id": self.app_id,
            "x-app-key": self.app_key,
            "Content-Type": "application/json",
        }

    def _ensure_configured(self):
        if not self.is_configured:
            raise NutritionixConfigError(
                "API keys not configured. Set NUTRITIONIX_APP_ID and NUTRITIONIX_APP_KEY."
            )

    async def _request(self, method: str, path: str, **kwargs) -> Dict[str, Any]:
        url = f"{self.base_url}{path}"
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.request(method, url, headers=self._headers(), **kwargs)
        except httpx.HTTPError as e:
            logger.error("Nutritionix request to %s failed: %s", path, e)
            raise NutritionixNetworkError(f"Network error: {e}") from e

        if response.status_code == 401:
            raise NutritionixAPIError("Invalid API credentials", status_code=401)
        if response.status_code != 200:
            message = None
            try:
                body = response.json()
                if isinstance(body, dict):
                    message = body.get("message")
            except ValueError:
                pass
            logger.error("Nutritionix %s returned %s", path, response.status_code)
            raise NutritionixAPIError(
                message or f"API request failed with status code {response.status_code}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            logger.error("Nutritionix %s returned invalid JSON: %s", path, response.text[:200])
            raise NutritionixDecodeError("Failed to parse ingredient data") from e

    async def search_ingredients(self, query: str) -> List[CommonFood]:
        """Instant search; returns the common (non-branded) foods."""
        if not query:
            return []
        self._ensure_configured()

        logger.info("Searching Nutritionix for: %s", query)
        data = await self._request("GET", "/search/instant", params={"query": query})
        try:
            return [CommonFood.from_api(item) for item in data.get("common", [])]
        except (KeyError, TypeError, ValueError) as e:
            raise NutritionixDecodeError("Failed to parse ingredient data") from e

    async def get_ingredient_details(self, query: str) -> FoodDetails:
        """Natural-language nutrient lookup; returns the first food in the answer."""
        self._ensure_configured()

        data = await self._request("POST", "/natural/nutrients", json={"query": query})
        try:
            foods = [FoodDetails.from_api(item) for item in data.get("foods", [])]
        except (KeyError, TypeError, ValueError) as e:
            raise NutritionixDecodeError("Failed to parse ingredient data") from e
        if not foods:
            raise NutritionixAPIError("No data received from server")
        return foods[0]

    @staticmethod
    def to_ingredient(food: Union[CommonFood, FoodDetails]) -> Ingredient:
        return Ingredient(
            name=food.food_name.title(),
            category=categorize_food(food.food_name),
            quantity=food.serving_qty,
            unit=map_serving_unit(food.serving_unit),
            confidence=1.0,
        )
