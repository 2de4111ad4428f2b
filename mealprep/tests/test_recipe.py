from datetime import date
import unittest
from mealprep.domain.DetectedRecipe import DetectedIngredient, DetectedRecipe
from mealprep.domain.Ingredient import MeasurementUnit
from mealprep.domain.MealPlan import MealPlan, MealType
from mealprep.domain.NutritionalInfo import NutritionalInfo
from mealprep.domain.Recipe import Recipe, RecipeIngredient, DifficultyLevel


class TestRecipe(unittest.TestCase):

    def setUp(self):
        self.recipe_pancakes = Recipe(
            name="Pancakes",
            description="Fluffy breakfast pancakes",
            servings=4,
            required_ingredients=[
                RecipeIngredient("Flour", 200, "g"),
                RecipeIngredient("Milk", 300, "ml"),
                RecipeIngredient("Egg", 2),
            ],
            optional_ingredients=[RecipeIngredient("Blueberries", 1, "cup")],
            instructions=["Mix ingredients", "Cook on skillet"],
            prep_time=10,
            cook_time=15,
            difficulty="medium",
            nutritional_info=NutritionalInfo(calories=800, protein=24, carbohydrates=120, fat=20),
            tags=["breakfast", "vegetarian"],
        )

    def test_total_time(self):
        self.assertEqual(self.recipe_pancakes.total_time, 25)

    def test_difficulty_is_parsed(self):
        self.assertEqual(self.recipe_pancakes.difficulty, DifficultyLevel.MEDIUM)
        self.assertEqual(Recipe(name="X", difficulty="impossible").difficulty, DifficultyLevel.EASY)

    def test_ingredient_lists_are_copied(self):
        required = [RecipeIngredient("Egg")]
        recipe = Recipe(name="Egg", required_ingredients=required)
        required.append(RecipeIngredient("Milk"))
        self.assertEqual(len(recipe.required_ingredients), 1)

    def test_dict_round_trip(self):
        restored = Recipe.from_dict(self.recipe_pancakes.to_dict())
        self.assertEqual(restored.id, self.recipe_pancakes.id)
        self.assertEqual(restored.required_ingredients, self.recipe_pancakes.required_ingredients)
        self.assertEqual(restored.optional_ingredients[0].unit, MeasurementUnit.CUP)
        self.assertEqual(restored.nutritional_info, self.recipe_pancakes.nutritional_info)
        self.assertEqual(restored.tags, ["breakfast", "vegetarian"])

    def test_from_dict_defaults(self):
        recipe = Recipe.from_dict({"name": "Plain", "required_ingredients": [{"name": " Rice ", "quantity": "lots"}]})
        self.assertEqual(recipe.required_ingredients[0].name, "Rice")
        self.assertEqual(recipe.required_ingredients[0].quantity, 1.0)
        self.assertEqual(recipe.optional_ingredients, [])
        self.assertEqual(recipe.servings, 1)
        self.assertTrue(recipe.id)


class TestNutritionalInfo(unittest.TestCase):

    def test_per_serving(self):
        info = NutritionalInfo(calories=800, protein=24).per_serving(4)
        self.assertEqual(info.calories, 200)
        self.assertEqual(info.protein, 6)

    def test_per_serving_ignores_non_positive(self):
        info = NutritionalInfo(calories=800)
        self.assertIs(info.per_serving(0), info)

    def test_add(self):
        total = NutritionalInfo(calories=100, fat=2) + NutritionalInfo(calories=50, sodium=10)
        self.assertEqual(total.to_dict()["calories"], 150)
        self.assertEqual(total.fat, 2)
        self.assertEqual(total.sodium, 10)

    def test_from_dict_accepts_short_keys(self):
        info = NutritionalInfo.from_dict({"calories": 300, "carbs": 40, "fats": 9})
        self.assertEqual(info.carbohydrates, 40)
        self.assertEqual(info.fat, 9)


class TestMealPlan(unittest.TestCase):

    def setUp(self):
        self.recipe = Recipe(name="Soup", servings=2, nutritional_info=NutritionalInfo(calories=600, protein=30))

    def test_nutrition_is_one_serving(self):
        plan = MealPlan(self.recipe, MealType.LUNCH, date(2024, 6, 1))
        self.assertEqual(plan.nutritional_info.calories, 300)
        self.assertEqual(plan.nutritional_info.protein, 15)

    def test_dict_round_trip(self):
        plan = MealPlan(self.recipe, "dinner", date(2024, 6, 1), servings=3, notes="double batch")
        restored = MealPlan.from_dict(plan.to_dict())
        self.assertEqual(restored.id, plan.id)
        self.assertEqual(restored.meal_type, MealType.DINNER)
        self.assertEqual(restored.date, date(2024, 6, 1))
        self.assertEqual(restored.recipe.name, "Soup")
        self.assertEqual(restored.notes, "double batch")

    def test_unknown_meal_type_is_rejected(self):
        with self.assertRaises(ValueError):
            MealPlan(self.recipe, "brunch")


class TestDetectedRecipe(unittest.TestCase):

    def test_to_recipe(self):
        detected = DetectedRecipe(
            name="Tomato Delight",
            description="A simple dish",
            ingredients=[DetectedIngredient("Tomato", "2"), DetectedIngredient("Salt", "a pinch", "tsp"),
                         DetectedIngredient("")],
            instructions=["Chop", "Serve"],
            estimated_prep_time=15,
            estimated_servings=2,
            cuisine_type="Italian",
            confidence=0.85,
            detected_food_items=["Tomato"],
        )
        recipe = detected.to_recipe()
        self.assertEqual(recipe.name, "Tomato Delight")
        self.assertEqual([i.name for i in recipe.required_ingredients], ["Tomato", "Salt"])
        self.assertEqual(recipe.required_ingredients[0].quantity, 2.0)
        self.assertEqual(recipe.required_ingredients[1].quantity, 1.0)
        self.assertEqual(recipe.required_ingredients[1].unit, MeasurementUnit.TEASPOON)
        self.assertEqual(recipe.tags, ["ai-generated", "italian"])
        self.assertEqual(recipe.prep_time, 15)
        self.assertEqual(recipe.servings, 2)


if __name__ == '__main__':
    unittest.main()
