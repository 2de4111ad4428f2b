from typing import Final

DATE_FORMAT: Final[str] = "%Y-%m-%d"
DAYS_BEFORE_EXPIRY: Final[int] = 3

# Recipe matching
REQUIRED_WEIGHT: Final[float] = 0.8
OPTIONAL_WEIGHT: Final[float] = 0.2
MIN_REQUIRED_COVERAGE: Final[float] = 0.5
DEFAULT_MATCH_LIMIT: Final[int] = 10

# Classifier post-processing
SCAN_CONFIDENCE_THRESHOLD: Final[float] = 0.5
SCAN_FALLBACK_CONFIDENCE_THRESHOLD: Final[float] = 0.1
SCAN_MAX_RESULTS: Final[int] = 5
DETECTED_FOOD_CONFIDENCE: Final[float] = 0.3
DETECTED_FOOD_MAX: Final[int] = 10

# AI recipe generation
AI_RECIPE_CONFIDENCE: Final[float] = 0.85
MOCK_RECIPE_CONFIDENCE: Final[float] = 0.7
DEFAULT_PREP_TIME: Final[int] = 30
DEFAULT_SERVINGS: Final[int] = 4

PROMPT_TEMPLATE: Final[str] = (
    """
    These food items were detected in a photo: {items}.
    Create a detailed recipe based on them. Provide the recipe name, a brief
    description, the ingredients with quantities, step-by-step instructions,
    the estimated prep time in minutes, the number of servings and the
    cuisine type.

    Format your response as JSON with the following structure:
    """
)
RECIPE_JSON_FORMAT: Final[str] = (
    """
{
    "name": "Recipe Name",
    "description": "Brief description",
    "ingredients": [
      {"name": "ingredient", "quantity": "amount", "unit": "unit"}
    ],
    "instructions": ["Step 1", "Step 2"],
    "prepTime": 30,
    "servings": 4,
    "cuisineType": "cuisine"
}
    """
)
FIX_JSON_PROMPT: Final[str] = (
    "Your previous answer described a recipe but was not valid JSON. "
    "Reply with ONLY that recipe as a JSON object, no surrounding text, "
    "using the same keys as before. Previous answer:\n\n{output}"
)
