"""Ingredient catalog record: category, shelf life and retail package size."""
from typing import Optional
from uuid import uuid4

from grocer.utilities.constants import DEFAULT_CATEGORY, DEFAULT_SHELF_LIFE_DAYS


class IngredientEntity:
    def __init__(self, id: Optional[str] = None, name: str = "", category: str = DEFAULT_CATEGORY,
                 shelf_life_days: int = DEFAULT_SHELF_LIFE_DAYS, package_size: float = 0,
                 unit: str = ""):
        self.id = id or str(uuid4())
        self.name = name
        self.category = category
        self.shelf_life_days = shelf_life_days
        self.package_size = package_size
        self.unit = unit

    def matches_name(self, name: str) -> bool:
        return (self.name or "").strip().lower() == (name or "").strip().lower()

    def __str__(self) -> str:
        return (f"{self.name} ({self.category}) - {self.shelf_life_days} days - "
                f"pack {self.package_size} {self.unit}")

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        if not isinstance(data, dict):
            raise ValueError(f"Ingredient catalog entry must be an object, got {type(data).__name__}")
        if not data.get("id"):
            raise ValueError(f"Ingredient '{data.get('name', '')}' has no id")
        shelf_life = int(data.get("shelfLifeDays", DEFAULT_SHELF_LIFE_DAYS))
        if shelf_life < 0:
            raise ValueError(f"Shelf life cannot be negative: {shelf_life}")
        return IngredientEntity(
            id=str(data["id"]),
            name=str(data.get("name", "")),
            category=data.get("category") or DEFAULT_CATEGORY,
            shelf_life_days=shelf_life,
            package_size=float(data.get("packageSize") or 0),
            unit=str(data.get("unit", "")),
        )

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category,
            "shelfLifeDays": self.shelf_life_days,
            "packageSize": self.package_size,
            "unit": self.unit,
        }
