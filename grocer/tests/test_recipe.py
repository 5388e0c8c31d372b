import unittest
from datetime import datetime, timezone
from grocer.domain.AppData import AppData
from grocer.domain.Ingredient import IngredientReference
from grocer.domain.IngredientEntity import IngredientEntity
from grocer.domain.Plan import MealPlan
from grocer.domain.Recipe import Recipe, SeasonalInfo
from grocer.utilities.errors import ConfigurationError


class TestIngredientReference(unittest.TestCase):

    def test_from_dict(self):
        ing = IngredientReference.from_dict({"name": "flour", "quantity": 200, "unit": "g", "ingredientId": "i1",
                                             "extra": True})
        self.assertEqual((ing.name, ing.quantity, ing.unit, ing.ingredient_id), ("flour", 200, "g", "i1"))

    def test_rejects_bad_quantity(self):
        for quantity in (-1, "2", True, None):
            with self.assertRaises(ValueError):
                IngredientReference.from_dict({"name": "flour", "quantity": quantity, "unit": "g"})

    def test_to_dict_omits_missing_id(self):
        self.assertEqual(IngredientReference("salt", 1, "pinch").to_dict(),
                         {"name": "salt", "quantity": 1, "unit": "pinch"})

    def test_merge_key(self):
        self.assertEqual(IngredientReference(" Onion", 1, "Whole ").merge_key(), ("onion", "whole"))


class TestRecipe(unittest.TestCase):

    def test_round_trip_with_seasonal_info(self):
        data = {
            "id": "r1",
            "name": "Gazpacho",
            "servings": 4,
            "ingredients": [{"name": "tomato", "quantity": 6, "unit": "whole"}],
            "instructions": "Blend.",
            "seasonalInfo": {"kind": "months", "includeMonths": [6, 7, 8]},
        }
        recipe = Recipe.from_dict(data)
        self.assertEqual(recipe.seasonal_info.include_months, [6, 7, 8])
        self.assertEqual(recipe.to_dict(), data)

    def test_legacy_seasonal_key(self):
        recipe = Recipe.from_dict({"id": "r2", "name": "Stew",
                                   "seasonal": {"type": "season", "seasons": ["Winter", "fall"]}})
        self.assertEqual(recipe.seasonal_info.kind, "season")
        self.assertEqual(recipe.seasonal_info.seasons, ["winter", "fall"])
        self.assertEqual(recipe.to_dict()["seasonalInfo"], {"kind": "season", "seasons": ["winter", "fall"]})

    def test_invalid_records(self):
        with self.assertRaises(ValueError):
            Recipe.from_dict({"name": "No id"})
        with self.assertRaises(ValueError):
            Recipe.from_dict({"id": "r", "ingredients": "flour"})
        with self.assertRaises(ValueError):
            Recipe.from_dict({"id": "r", "seasonalInfo": {"kind": "months", "includeMonths": [13]}})
        with self.assertRaises(ValueError):
            Recipe.from_dict({"id": "r", "seasonalInfo": {"kind": "season", "seasons": ["monsoon"]}})
        with self.assertRaises(ValueError):
            SeasonalInfo("weeks")
        with self.assertRaises(ValueError):
            Recipe.from_dict({"id": "r", "seasonal": {"type": "season", "seasons": ["autumn"]}})

    def test_invalid_servings(self):
        for servings in (0, -2, "four", 2.5, True, None):
            with self.assertRaises(ValueError):
                Recipe.from_dict({"id": "r", "name": "Soup", "servings": servings})
        self.assertEqual(Recipe.from_dict({"id": "r", "name": "Soup"}).servings, 2)

    def test_copy_is_independent(self):
        recipe = Recipe(id="r", name="Toast", ingredients=[IngredientReference("bread", 2, "slice")])
        snapshot = recipe.copy()
        snapshot.ingredients[0].quantity = 10
        snapshot.name = "Big toast"
        self.assertEqual(recipe.ingredients[0].quantity, 2)
        self.assertEqual(recipe.name, "Toast")


class TestMealPlan(unittest.TestCase):

    def setUp(self):
        self.recipe = Recipe(id="r", name="Rice", servings=2, ingredients=[IngredientReference("rice", 150, "g")])
        self.plan = MealPlan(id="p1", recipes=[self.recipe.copy(), self.recipe.copy()], days=3)

    def test_is_short(self):
        self.assertTrue(self.plan.is_short())
        self.assertFalse(MealPlan(recipes=[self.recipe], days=1).is_short())

    def test_scale_slot_only_touches_that_slot(self):
        scaled = self.plan.scale_slot(1, 4)
        self.assertEqual(scaled.servings, 4)
        self.assertEqual(self.plan.recipes[1].ingredients[0].quantity, 300)
        self.assertEqual(self.plan.recipes[0].ingredients[0].quantity, 150)
        self.assertEqual(self.recipe.ingredients[0].quantity, 150)

    def test_scale_slot_errors(self):
        with self.assertRaises(IndexError):
            self.plan.scale_slot(2, 4)
        with self.assertRaises(IndexError):
            self.plan.scale_slot(-1, 4)
        with self.assertRaises(ConfigurationError):
            self.plan.scale_slot(0, 0)

    def test_toggle_favorite(self):
        self.assertTrue(self.plan.toggle_favorite())
        self.assertTrue(self.plan.to_dict()["isFavorite"])
        self.assertFalse(self.plan.toggle_favorite())
        self.assertNotIn("isFavorite", self.plan.to_dict())

    def test_dict_round_trip(self):
        self.plan.start_date = datetime(2026, 3, 2, tzinfo=timezone.utc)
        self.plan.is_favorite = True
        restored = MealPlan.from_dict(self.plan.to_dict())
        self.assertEqual(restored.id, "p1")
        self.assertEqual(restored.days, 3)
        self.assertEqual(restored.start_date, self.plan.start_date)
        self.assertEqual(restored.created_at, self.plan.created_at)
        self.assertTrue(restored.is_favorite)
        self.assertEqual([r.to_dict() for r in restored.recipes], [r.to_dict() for r in self.plan.recipes])

    def test_accepts_zulu_timestamps(self):
        plan = MealPlan.from_dict({"id": "p", "recipes": [], "days": 2, "createdAt": "2026-01-05T10:00:00.000Z"})
        self.assertEqual(plan.created_at, datetime(2026, 1, 5, 10, 0, tzinfo=timezone.utc))

    def test_rejects_zero_days(self):
        with self.assertRaises(ValueError):
            MealPlan.from_dict({"id": "p", "recipes": [], "days": 0})

    def test_rejects_more_recipes_than_days(self):
        recipe = {"id": "r", "name": "Rice", "servings": 2}
        with self.assertRaises(ValueError):
            MealPlan.from_dict({"id": "p", "days": 1, "recipes": [recipe, recipe, recipe]})
        self.assertEqual(len(MealPlan.from_dict({"id": "p", "days": 3, "recipes": [recipe]}).recipes), 1)

    def test_favorite_flag_must_be_bool(self):
        for flag in ("false", 1, "yes"):
            with self.assertRaises(ValueError):
                MealPlan.from_dict({"id": "p", "days": 1, "recipes": [], "isFavorite": flag})
        self.assertFalse(MealPlan.from_dict({"id": "p", "days": 1, "recipes": [], "isFavorite": False}).is_favorite)


class TestAppData(unittest.TestCase):

    def test_to_dict_always_has_catalog_and_pantry(self):
        data = AppData(recipes=[Recipe(id="r", name="Rice")],
                       ingredients=[IngredientEntity(id="i", name="rice", shelf_life_days=365)])
        doc = data.to_dict()
        self.assertEqual(set(doc), {"recipes", "mealPlans", "ingredients", "pantry"})
        self.assertEqual(doc["pantry"], [])
        self.assertEqual(doc["ingredients"][0]["shelfLifeDays"], 365)

    def test_find_meal_plan(self):
        plan = MealPlan(id="p")
        data = AppData(meal_plans=[plan])
        self.assertIs(data.find_meal_plan("p"), plan)
        self.assertIsNone(data.find_meal_plan("missing"))
