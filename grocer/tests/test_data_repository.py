import json
import tempfile
import unittest
from pathlib import Path
from grocer.domain.AppData import AppData
from grocer.domain.Ingredient import IngredientReference
from grocer.domain.Plan import MealPlan
from grocer.domain.Recipe import Recipe
from grocer.infra.Data_Repository import DataRepository, JsonFileStore, MemoryStore


class TestDataRepository(unittest.TestCase):

    def setUp(self):
        self.store = MemoryStore()
        self.repo = DataRepository(self.store, key="test-data")

    def test_empty_store_loads_empty_data(self):
        data = self.repo.load()
        self.assertEqual(data.recipes, [])
        self.assertEqual(data.meal_plans, [])

    def test_corrupt_data_loads_empty(self):
        self.store.set_item("test-data", "{broken")
        with self.assertLogs("grocer.infra.Data_Repository", level="ERROR"):
            data = self.repo.load()
        self.assertEqual(data.recipes, [])

    def test_save_writes_whole_document_under_key(self):
        self.repo.add_recipe(Recipe(id="r1", name="Soup", ingredients=[IngredientReference("onion", 1, "whole")]))
        doc = json.loads(self.store.get_item("test-data"))
        self.assertEqual(set(doc), {"recipes", "mealPlans", "ingredients", "pantry"})
        self.assertEqual(doc["recipes"][0]["ingredients"][0]["name"], "onion")

    def test_meal_plans_newest_first(self):
        self.repo.add_meal_plan(MealPlan(id="first"))
        self.repo.add_meal_plan(MealPlan(id="second"))
        self.assertEqual([p.id for p in self.repo.list_meal_plans()], ["second", "first"])

    def test_update_and_delete(self):
        self.repo.add_meal_plan(MealPlan(id="p", days=2))
        plan = self.repo.get_meal_plan("p")
        plan.toggle_favorite()
        self.repo.update_meal_plan(plan)
        self.assertTrue(self.repo.get_meal_plan("p").is_favorite)
        with self.assertRaises(KeyError):
            self.repo.update_meal_plan(MealPlan(id="missing"))
        self.assertTrue(self.repo.delete_meal_plan("p"))
        self.assertFalse(self.repo.delete_meal_plan("p"))
        self.assertIsNone(self.repo.get_meal_plan("p"))


class TestJsonFileStore(unittest.TestCase):

    def test_round_trip_on_disk(self):
        with tempfile.TemporaryDirectory() as tmp:
            data_dir = Path(tmp) / "nested"
            repo = DataRepository(JsonFileStore(data_dir), key="grocer")
            repo.save(AppData(recipes=[Recipe(id="r", name="Rice")]))
            self.assertTrue((data_dir / "grocer.json").exists())
            self.assertEqual([p.name for p in data_dir.iterdir()], ["grocer.json"])

            reopened = DataRepository(JsonFileStore(data_dir), key="grocer")
            self.assertEqual([r.name for r in reopened.list_recipes()], ["Rice"])

    def test_missing_and_removed_keys(self):
        with tempfile.TemporaryDirectory() as tmp:
            store = JsonFileStore(Path(tmp))
            self.assertIsNone(store.get_item("absent"))
            store.set_item("k", "value")
            self.assertEqual(store.get_item("k"), "value")
            store.remove_item("k")
            self.assertIsNone(store.get_item("k"))
            store.remove_item("k")
