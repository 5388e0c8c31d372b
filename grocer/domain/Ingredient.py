"""Ingredient line item: name, quantity, free-text unit, optional link to a catalog entity."""
from typing import Optional


class IngredientReference:
    def __init__(self, name: str = "", quantity: float = 0, unit: str = "",
                 ingredient_id: Optional[str] = None):
        self.name = name
        self.quantity = quantity
        self.unit = unit
        self.ingredient_id = ingredient_id

    def merge_key(self) -> tuple:
        '''Lines merge only when both trimmed, lowercased name and unit match.'''
        return (self.name or "").strip().lower(), (self.unit or "").strip().lower()

    def copy(self) -> "IngredientReference":
        return IngredientReference(self.name, self.quantity, self.unit, self.ingredient_id)

    def __eq__(self, other) -> bool:
        if not isinstance(other, IngredientReference):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __str__(self) -> str:
        return f"{self.name} - {self.quantity} {self.unit}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Creates an IngredientReference from a document record. Ignores unknown keys.'''
        if not isinstance(data, dict):
            raise ValueError(f"Ingredient entry must be an object, got {type(data).__name__}")
        quantity = data.get("quantity", 0)
        if isinstance(quantity, bool) or not isinstance(quantity, (int, float)):
            raise ValueError(f"Invalid quantity for ingredient '{data.get('name', '')}': {quantity!r}")
        if quantity < 0:
            raise ValueError(f"Quantity cannot be negative: {quantity}")
        return IngredientReference(
            name=str(data.get("name", "")),
            quantity=quantity,
            unit=str(data.get("unit", "")),
            ingredient_id=data.get("ingredientId"),
        )

    def to_dict(self):
        d = {"name": self.name, "quantity": self.quantity, "unit": self.unit}
        if self.ingredient_id:
            d["ingredientId"] = self.ingredient_id
        return d
