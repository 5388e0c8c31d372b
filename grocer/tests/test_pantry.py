import unittest
from datetime import datetime, timedelta, timezone
from grocer.domain.IngredientEntity import IngredientEntity
from grocer.domain.Pantry import Pantry, PantryItem
from grocer.logic.pantry.analysis import compute_expiring_soon


class TestPantry(unittest.TestCase):

    def setUp(self):
        self.pantry = Pantry([PantryItem("eggs", 6, "whole"), PantryItem("flour", 500, "g")])

    def test_one_entry_per_ingredient(self):
        self.pantry.add_item(PantryItem("eggs", 12, "whole"))
        self.assertEqual(len(self.pantry), 2)
        self.assertEqual(self.pantry.get("eggs").quantity, 12)

    def test_get_missing_and_none(self):
        self.assertIsNone(self.pantry.get("milk"))
        self.assertIsNone(self.pantry.get(None))

    def test_update_and_remove(self):
        self.pantry.update_quantity("flour", 250)
        self.assertEqual(self.pantry.get("flour").quantity, 250)
        self.pantry.remove_item("flour")
        self.assertEqual([i.ingredient_id for i in self.pantry.get_items()], ["eggs"])
        with self.assertRaises(ValueError):
            self.pantry.remove_item("flour")
        with self.assertRaises(ValueError):
            self.pantry.update_quantity("eggs", -1)

    def test_negative_quantity_rejected(self):
        with self.assertRaises(ValueError):
            PantryItem("eggs", -2, "whole")

    def test_dict_round_trip(self):
        added = datetime(2026, 2, 1, 8, 30, tzinfo=timezone.utc)
        pantry = Pantry.from_dict([{"ingredientId": "milk", "quantity": 1000, "unit": "ml",
                                    "addedDate": added.isoformat()}])
        item = pantry.get("milk")
        self.assertEqual(item.added_date, added)
        self.assertEqual(pantry.to_dict(), [{"ingredientId": "milk", "quantity": 1000.0, "unit": "ml",
                                             "addedDate": added.isoformat()}])

    def test_from_dict_rejects_bad_shapes(self):
        with self.assertRaises(ValueError):
            Pantry.from_dict({"milk": 1})
        with self.assertRaises(ValueError):
            Pantry.from_dict([{"quantity": 1}])

    def test_from_dict_rejects_non_numeric_quantity(self):
        for quantity in ("12", True, None):
            with self.assertRaises(ValueError):
                Pantry.from_dict([{"ingredientId": "milk", "quantity": quantity, "unit": "ml"}])


class TestExpiringSoon(unittest.TestCase):

    def setUp(self):
        self.now = datetime(2026, 5, 10, 12, 0, tzinfo=timezone.utc)
        self.catalog = [
            IngredientEntity(id="milk", name="milk", category="dairy", shelf_life_days=7),
            IngredientEntity(id="rice", name="rice", category="pantry", shelf_life_days=365),
            IngredientEntity(id="fish", name="fish", category="meat", shelf_life_days=2),
        ]

    def _item(self, ingredient_id, days_ago, tz=timezone.utc):
        added = (self.now - timedelta(days=days_ago)).replace(tzinfo=tz)
        return PantryItem(ingredient_id, 1, "unit", added)

    def test_window_and_ordering(self):
        pantry = Pantry([self._item("milk", 5), self._item("rice", 1), self._item("fish", 4)])
        result = compute_expiring_soon(pantry, self.catalog, as_of=self.now, window=3)
        self.assertEqual([(r["name"], r["days_left"]) for r in result], [("fish", -2), ("milk", 2)])
        self.assertEqual(result[1]["category"], "dairy")
        self.assertEqual(result[1]["ingredientId"], "milk")

    def test_unknown_ingredient_skipped(self):
        pantry = Pantry([PantryItem("saffron", 1, "g", self.now - timedelta(days=100))])
        self.assertEqual(compute_expiring_soon(pantry, self.catalog, as_of=self.now, window=3), [])

    def test_naive_dates_treated_as_utc(self):
        pantry = Pantry([self._item("milk", 6, tz=None)])
        result = compute_expiring_soon(pantry, self.catalog, as_of=self.now.replace(tzinfo=None), window=0)
        self.assertEqual(result, [])
        result = compute_expiring_soon(pantry, self.catalog, as_of=self.now, window=1)
        self.assertEqual(result[0]["days_left"], 1)

    def test_default_window_from_config(self):
        pantry = Pantry([self._item("milk", 4), self._item("milk", 3)])
        # second add replaces the first entry
        result = compute_expiring_soon(pantry, self.catalog, as_of=self.now)
        self.assertEqual(result, [])
