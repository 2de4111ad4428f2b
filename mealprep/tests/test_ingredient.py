from datetime import date
import unittest
from mealprep.domain.Ingredient import Ingredient, IngredientCategory, MeasurementUnit


class TestIngredient(unittest.TestCase):

    def setUp(self):
        self.ingredient = Ingredient(
            name="Milk",
            category=IngredientCategory.DAIRY,
            quantity=2,
            unit=MeasurementUnit.LITER,
            date_added=date(2024, 3, 1),
            expiration_date=date(2024, 3, 10),
            confidence=0.82,
        )

    def test_set_quantity_applies_delta(self):
        self.ingredient.set_quantity(1.5)
        self.assertEqual(self.ingredient.quantity, 3.5)
        self.ingredient.set_quantity(-3)
        self.assertEqual(self.ingredient.quantity, 0.5)

    def test_days_until_expiry(self):
        self.assertEqual(self.ingredient.days_until_expiry(date(2024, 3, 8)), 2)
        self.assertEqual(self.ingredient.days_until_expiry(date(2024, 3, 12)), -2)
        self.assertIsNone(Ingredient("Salt").days_until_expiry())

    def test_defaults(self):
        salt = Ingredient("Salt")
        self.assertEqual(salt.category, IngredientCategory.OTHER)
        self.assertEqual(salt.unit, MeasurementUnit.ITEM)
        self.assertEqual(salt.quantity, 1.0)
        self.assertEqual(salt.confidence, 1.0)
        self.assertEqual(salt.date_added, date.today())
        self.assertTrue(salt.id)

    def test_ids_are_unique(self):
        self.assertNotEqual(Ingredient("Salt").id, Ingredient("Salt").id)

    def test_str_shows_unit_abbreviation_and_confidence(self):
        text = str(self.ingredient)
        self.assertIn("Milk - 2 L", text)
        self.assertIn("Dairy", text)
        self.assertIn("Exp: 2024-03-10", text)
        self.assertIn("Confidence: 82%", text)

    def test_to_dict(self):
        data = self.ingredient.to_dict()
        self.assertEqual(data["name"], "Milk")
        self.assertEqual(data["category"], "dairy")
        self.assertEqual(data["unit"], "liter")
        self.assertEqual(data["date_added"], "2024-03-01")
        self.assertEqual(data["expiration_date"], "2024-03-10")
        self.assertEqual(Ingredient("Salt").to_dict()["expiration_date"], "")

    def test_from_dict(self):
        restored = Ingredient.from_dict(self.ingredient.to_dict())
        self.assertEqual(restored.id, self.ingredient.id)
        self.assertEqual(restored.unit, MeasurementUnit.LITER)
        self.assertEqual(restored.expiration_date, date(2024, 3, 10))
        self.assertAlmostEqual(restored.confidence, 0.82)

    def test_from_dict_tolerates_unknown_values(self):
        item = Ingredient.from_dict({"name": "Thing", "category": "mineral", "unit": "bushel",
                                     "expiration_date": "not a date", "extra": 1})
        self.assertEqual(item.category, IngredientCategory.OTHER)
        self.assertEqual(item.unit, MeasurementUnit.ITEM)
        self.assertIsNone(item.expiration_date)


class TestMeasurementUnit(unittest.TestCase):

    def test_parse_accepts_name_or_abbreviation(self):
        self.assertEqual(MeasurementUnit.parse("gram"), MeasurementUnit.GRAM)
        self.assertEqual(MeasurementUnit.parse("g"), MeasurementUnit.GRAM)
        self.assertEqual(MeasurementUnit.parse("L"), MeasurementUnit.LITER)
        self.assertEqual(MeasurementUnit.parse(MeasurementUnit.CUP), MeasurementUnit.CUP)
        self.assertEqual(MeasurementUnit.parse(None), MeasurementUnit.ITEM)

    def test_category_display_name(self):
        self.assertEqual(IngredientCategory.PROTEIN.display_name, "Protein")
        self.assertEqual(IngredientCategory.parse(" Fruit "), IngredientCategory.FRUIT)


if __name__ == '__main__':
    unittest.main()
