"""Recipe domain entity: name, servings, ingredient lines, instructions, seasonal gate."""
import copy
from typing import List, Optional
from uuid import uuid4

from grocer.domain.Ingredient import IngredientReference
from grocer.utilities.constants import SEASONS


class SeasonalInfo:
    """Either a set of seasons (kind='season') or an include/exclude month list (kind='months')."""

    def __init__(self, kind: str = "season", seasons: Optional[List[str]] = None,
                 include_months: Optional[List[int]] = None, exclude_months: Optional[List[int]] = None):
        if kind not in ("season", "months"):
            raise ValueError(f"Unknown seasonal kind: {kind!r}")
        self.kind = kind
        self.seasons = seasons[:] if seasons else []
        self.include_months = include_months[:] if include_months else []
        self.exclude_months = exclude_months[:] if exclude_months else []

    def __str__(self) -> str:
        if self.kind == "season":
            return f"Seasons: {', '.join(self.seasons)}"
        return f"Months: +{self.include_months} -{self.exclude_months}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Accepts both the current {kind, ...} shape and the legacy {type, ...} shape.'''
        if not isinstance(data, dict):
            raise ValueError("Seasonal info must be an object")
        kind = data.get("kind") or data.get("type") or "season"
        seasons = [str(s).lower() for s in (data.get("seasons") or [])]
        for s in seasons:
            if s not in SEASONS:
                raise ValueError(f"Unknown season: {s!r}")
        months = {}
        for key in ("includeMonths", "excludeMonths"):
            values = [int(m) for m in (data.get(key) or [])]
            for m in values:
                if not 1 <= m <= 12:
                    raise ValueError(f"Month out of range: {m}")
            months[key] = values
        return SeasonalInfo(kind, seasons, months["includeMonths"], months["excludeMonths"])

    def to_dict(self):
        if self.kind == "season":
            return {"kind": "season", "seasons": list(self.seasons)}
        d = {"kind": "months"}
        if self.include_months:
            d["includeMonths"] = list(self.include_months)
        if self.exclude_months:
            d["excludeMonths"] = list(self.exclude_months)
        return d


class Recipe:
    def __init__(self, id: Optional[str] = None, name: str = "",
                 ingredients: Optional[List[IngredientReference]] = None, servings: int = 2,
                 instructions: Optional[str] = None, image_url: Optional[str] = None,
                 seasonal_info: Optional[SeasonalInfo] = None):
        self.id = id or str(uuid4())
        self.name = name
        self.ingredients = ingredients[:] if ingredients else []
        self.servings = servings
        self.instructions = instructions
        self.image_url = image_url
        self.seasonal_info = seasonal_info

    def copy(self) -> "Recipe":
        '''Independent snapshot; mutating the copy never touches this recipe.'''
        return copy.deepcopy(self)

    def ingredient_names(self) -> List[str]:
        return [(ing.name or "").strip().lower() for ing in self.ingredients]

    def __str__(self) -> str:
        return f"{self.name} - {self.servings} servings - {len(self.ingredients)} ingredients"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        if not isinstance(data, dict):
            raise ValueError(f"Recipe entry must be an object, got {type(data).__name__}")
        if not data.get("id"):
            raise ValueError(f"Recipe '{data.get('name', '')}' has no id")
        ingredients = data.get("ingredients") or []
        if not isinstance(ingredients, list):
            raise ValueError(f"Recipe '{data.get('name', '')}' ingredients must be a list")
        servings = data.get("servings", 2)
        if isinstance(servings, bool) or not isinstance(servings, int) or servings < 1:
            raise ValueError(f"Invalid servings for recipe '{data.get('name', '')}': {servings!r}")
        seasonal = data.get("seasonalInfo", data.get("seasonal"))
        return Recipe(
            id=str(data["id"]),
            name=str(data.get("name", "")),
            ingredients=[IngredientReference.from_dict(ing) for ing in ingredients],
            servings=servings,
            instructions=data.get("instructions"),
            image_url=data.get("imageUrl"),
            seasonal_info=SeasonalInfo.from_dict(seasonal) if seasonal else None,
        )

    def to_dict(self):
        d = {
            "id": self.id,
            "name": self.name,
            "ingredients": [ing.to_dict() for ing in self.ingredients],
            "servings": self.servings,
        }
        if self.instructions:
            d["instructions"] = self.instructions
        if self.image_url:
            d["imageUrl"] = self.image_url
        if self.seasonal_info is not None:
            d["seasonalInfo"] = self.seasonal_info.to_dict()
        return d
