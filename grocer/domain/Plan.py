"""MealPlan domain entity: ordered recipe snapshots, one per planned meal slot."""
from datetime import datetime, timezone
from typing import List, Optional
from uuid import uuid4

from grocer.domain.Recipe import Recipe
from grocer.logic.scaling.scaler import scale_recipe
from grocer.utilities.dates import format_timestamp, parse_timestamp


class MealPlan:
    def __init__(self, id: Optional[str] = None, recipes: Optional[List[Recipe]] = None, days: int = 1,
                 created_at: Optional[datetime] = None, start_date: Optional[datetime] = None,
                 is_favorite: bool = False):
        self.id = id or str(uuid4())
        self.recipes = recipes[:] if recipes else []
        self.days = days
        self.created_at = created_at or datetime.now(timezone.utc)
        self.start_date = start_date
        self.is_favorite = is_favorite

    def is_short(self) -> bool:
        '''True when generation ran out of candidates before filling every day.'''
        return len(self.recipes) < self.days

    def scale_slot(self, index: int, servings: int) -> Recipe:
        '''Replaces the snapshot in slot `index` with a copy scaled to `servings`.'''
        if not 0 <= index < len(self.recipes):
            raise IndexError(f"Meal plan has no slot {index}")
        scaled = scale_recipe(self.recipes[index], servings)
        self.recipes[index] = scaled
        return scaled

    def toggle_favorite(self) -> bool:
        self.is_favorite = not self.is_favorite
        return self.is_favorite

    def __str__(self) -> str:
        names = ", ".join(r.name for r in self.recipes)
        return f"Plan {self.id} - {self.days} days - [{names}]"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        if not isinstance(data, dict):
            raise ValueError(f"Meal plan entry must be an object, got {type(data).__name__}")
        recipes = data.get("recipes") or []
        if not isinstance(recipes, list):
            raise ValueError(f"Meal plan '{data.get('id', '')}' recipes must be a list")
        days = int(data.get("days", len(recipes) or 1))
        if days < 1:
            raise ValueError(f"Meal plan days must be at least 1, got {days}")
        if len(recipes) > days:
            raise ValueError(f"Meal plan '{data.get('id', '')}' has {len(recipes)} recipes for {days} days")
        is_favorite = data.get("isFavorite", False)
        if not isinstance(is_favorite, bool):
            raise ValueError(f"isFavorite must be true or false, got {is_favorite!r}")
        return MealPlan(
            id=data.get("id"),
            recipes=[Recipe.from_dict(r) for r in recipes],
            days=days,
            created_at=parse_timestamp(data.get("createdAt")),
            start_date=parse_timestamp(data.get("startDate")),
            is_favorite=is_favorite,
        )

    def to_dict(self):
        d = {
            "id": self.id,
            "recipes": [r.to_dict() for r in self.recipes],
            "days": self.days,
            "createdAt": format_timestamp(self.created_at),
        }
        if self.start_date is not None:
            d["startDate"] = format_timestamp(self.start_date)
        if self.is_favorite:
            d["isFavorite"] = True
        return d
