"""ShoppingListItem: aggregated demand for one ingredient after pantry netting (derived, not persisted)."""
from typing import Optional


class ShoppingListItem:
    def __init__(self, name: str, quantity: float, unit: str, ingredient_id: Optional[str] = None,
                 adjusted_quantity: Optional[float] = None, in_pantry: float = 0,
                 packs_needed: Optional[int] = None):
        self.name = name
        self.quantity = quantity
        self.unit = unit
        self.ingredient_id = ingredient_id
        self.adjusted_quantity = quantity if adjusted_quantity is None else adjusted_quantity
        self.in_pantry = in_pantry
        self.packs_needed = packs_needed

    def needs_purchase(self) -> bool:
        return self.adjusted_quantity > 0

    def __str__(self) -> str:
        packs = f" ({self.packs_needed} packs)" if self.packs_needed is not None else ""
        return f"{self.name} - {self.adjusted_quantity}/{self.quantity} {self.unit}{packs}"

    __repr__ = __str__

    def to_dict(self):
        return {
            "name": self.name,
            "quantity": self.quantity,
            "unit": self.unit,
            "ingredientId": self.ingredient_id,
            "adjustedQuantity": self.adjusted_quantity,
            "inPantry": self.in_pantry,
            "packsNeeded": self.packs_needed,
        }
