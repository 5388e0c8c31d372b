"""AppData: the whole persisted/exported document (recipes, meal plans, ingredient catalog, pantry)."""
from typing import List, Optional

from grocer.domain.IngredientEntity import IngredientEntity
from grocer.domain.Pantry import Pantry
from grocer.domain.Plan import MealPlan
from grocer.domain.Recipe import Recipe


class AppData:
    def __init__(self, recipes: Optional[List[Recipe]] = None, meal_plans: Optional[List[MealPlan]] = None,
                 ingredients: Optional[List[IngredientEntity]] = None, pantry: Optional[Pantry] = None):
        self.recipes = recipes[:] if recipes else []
        self.meal_plans = meal_plans[:] if meal_plans else []
        self.ingredients = ingredients[:] if ingredients else []
        self.pantry = pantry if pantry is not None else Pantry()

    def find_meal_plan(self, plan_id: str) -> Optional[MealPlan]:
        for plan in self.meal_plans:
            if plan.id == plan_id:
                return plan
        return None

    def __str__(self) -> str:
        return (f"{len(self.recipes)} recipes, {len(self.meal_plans)} plans, "
                f"{len(self.ingredients)} ingredients, {len(self.pantry)} pantry items")

    __repr__ = __str__

    def to_dict(self):
        '''Document shape; ingredients and pantry are always written.'''
        return {
            "recipes": [r.to_dict() for r in self.recipes],
            "mealPlans": [p.to_dict() for p in self.meal_plans],
            "ingredients": [i.to_dict() for i in self.ingredients],
            "pantry": self.pantry.to_dict(),
        }
