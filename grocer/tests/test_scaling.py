import unittest
from grocer.domain.Ingredient import IngredientReference
from grocer.domain.Recipe import Recipe
from grocer.logic.scaling.scaler import round_to_nearest_fraction, scale_ingredient, scale_recipe
from grocer.utilities.errors import ConfigurationError


class TestRounding(unittest.TestCase):

    def test_near_whole_numbers(self):
        self.assertEqual(round_to_nearest_fraction(4.0), 4)
        self.assertEqual(round_to_nearest_fraction(3.02), 3)
        self.assertEqual(round_to_nearest_fraction(2.97), 3)
        self.assertEqual(round_to_nearest_fraction(0.0), 0)

    def test_snaps_to_common_fractions(self):
        self.assertEqual(round_to_nearest_fraction(1 / 3), 0.33)
        self.assertEqual(round_to_nearest_fraction(2 / 3), 0.67)
        self.assertEqual(round_to_nearest_fraction(1.5), 1.5)
        self.assertEqual(round_to_nearest_fraction(2.1), 2.125)
        self.assertEqual(round_to_nearest_fraction(0.9), 0.75)

    def test_tie_goes_to_first_fraction(self):
        # 0.1875 is exactly halfway between 1/8 and 1/4
        self.assertEqual(round_to_nearest_fraction(0.1875), 0.125)

    def test_rounded_fractions_are_fixed_points(self):
        for value in (0.125, 0.25, 0.33, 0.5, 0.67, 0.75, 1.0, 0.0, 12 + 0.33, 7 + 0.67):
            self.assertEqual(round_to_nearest_fraction(value), value)


class TestScaleRecipe(unittest.TestCase):

    def setUp(self):
        self.recipe = Recipe(
            id="pancakes",
            name="Pancakes",
            servings=3,
            ingredients=[
                IngredientReference("Flour", 200, "g"),
                IngredientReference("Milk", 2.5, "cup"),
                IngredientReference("Baking powder", 0.1, "tsp"),
                IngredientReference("Eggs", 1, "whole", ingredient_id="ing-eggs"),
            ],
        )

    def test_doubling(self):
        recipe = Recipe(id="r", name="R", servings=2, ingredients=[IngredientReference("Rice", 2, "cup")])
        scaled = scale_recipe(recipe, 4)
        self.assertEqual(scaled.servings, 4)
        self.assertEqual(scaled.ingredients[0].quantity, 4)

    def test_scaled_values(self):
        scaled = scale_recipe(self.recipe, 4)
        quantities = [ing.quantity for ing in scaled.ingredients]
        # 266.67 -> 266.67, 3.33 -> 3.33, 0.133 -> 0.125, 1.33 -> 1.33
        self.assertEqual(quantities, [266 + 0.67, 3 + 0.33, 0.125, 1 + 0.33])
        self.assertEqual(scaled.ingredients[3].ingredient_id, "ing-eggs")

    def test_idempotent_for_same_target(self):
        once = scale_recipe(self.recipe, 4)
        twice = scale_recipe(once, 4)
        self.assertEqual([i.quantity for i in twice.ingredients], [i.quantity for i in once.ingredients])
        self.assertEqual(twice.servings, once.servings)

    def test_does_not_mutate_input(self):
        scale_recipe(self.recipe, 6)
        self.assertEqual(self.recipe.servings, 3)
        self.assertEqual(self.recipe.ingredients[0].quantity, 200)

    def test_keeps_identity_fields(self):
        scaled = scale_recipe(self.recipe, 6)
        self.assertEqual(scaled.id, self.recipe.id)
        self.assertEqual(scaled.name, self.recipe.name)
        self.assertIsNot(scaled.ingredients[0], self.recipe.ingredients[0])

    def test_invalid_source_servings(self):
        for bad in (0, None, -1):
            recipe = Recipe(id="x", name="X", servings=bad, ingredients=[IngredientReference("Salt", 1, "g")])
            with self.assertRaises(ConfigurationError):
                scale_recipe(recipe, 2)

    def test_invalid_target_servings(self):
        with self.assertRaises(ConfigurationError):
            scale_recipe(self.recipe, 0)

    def test_scale_ingredient(self):
        ing = IngredientReference("Butter", 3, "tbsp")
        scaled = scale_ingredient(ing, 0.5)
        self.assertEqual(scaled.quantity, 1.5)
        self.assertEqual(ing.quantity, 3)
