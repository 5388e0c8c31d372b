"""Recipe scaling.

Quantities are scaled linearly and then snapped to a common kitchen fraction
so that e.g. 0.333 reads as 0.33 and 1.97 reads as 2.
"""
import math

from grocer.domain.Ingredient import IngredientReference
from grocer.utilities.constants import COMMON_FRACTIONS, ROUND_DOWN_BELOW, ROUND_UP_ABOVE
from grocer.utilities.errors import ConfigurationError

__all__ = ["round_to_nearest_fraction", "scale_ingredient", "scale_recipe"]


def round_to_nearest_fraction(value: float) -> float:
    whole = math.floor(value)
    fraction = value - whole

    if fraction < ROUND_DOWN_BELOW:
        return float(whole)
    if fraction > ROUND_UP_ABOVE:
        return float(whole + 1)

    closest = fraction
    min_diff = 1.0
    for candidate in COMMON_FRACTIONS:
        diff = abs(fraction - candidate)
        if diff < min_diff:  # strict: first-seen minimum wins ties
            min_diff = diff
            closest = candidate
    return whole + closest


def scale_ingredient(ingredient: IngredientReference, factor: float) -> IngredientReference:
    scaled = ingredient.copy()
    scaled.quantity = round_to_nearest_fraction(ingredient.quantity * factor)
    return scaled


def scale_recipe(recipe, target_servings: int):
    """Return a copy of `recipe` rescaled to `target_servings`.

    Raises ConfigurationError when either serving count is missing or below 1.
    """
    source = recipe.servings
    if isinstance(source, bool) or not isinstance(source, (int, float)) or source < 1:
        raise ConfigurationError(f"Recipe '{recipe.name}' has invalid servings: {source!r}")
    if isinstance(target_servings, bool) or not isinstance(target_servings, int) or target_servings < 1:
        raise ConfigurationError(f"Target servings must be a positive integer, got {target_servings!r}")

    factor = target_servings / source
    scaled = recipe.copy()
    scaled.servings = target_servings
    scaled.ingredients = [scale_ingredient(ing, factor) for ing in recipe.ingredients]
    return scaled
