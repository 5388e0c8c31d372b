"""Pantry aggregate: on-hand stock, at most one entry per catalog ingredient id."""
from datetime import datetime, timezone
from typing import Dict, List, Optional

from grocer.utilities.dates import format_timestamp, parse_timestamp


class PantryItem:
    def __init__(self, ingredient_id: str, quantity: float = 0, unit: str = "",
                 added_date: Optional[datetime] = None):
        if quantity < 0:
            raise ValueError(f"Quantity cannot be negative: {quantity}")
        self.ingredient_id = ingredient_id
        self.quantity = quantity
        self.unit = unit
        self.added_date = added_date or datetime.now(timezone.utc)

    def __str__(self) -> str:
        return f"{self.ingredient_id} - {self.quantity} {self.unit}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        if not isinstance(data, dict):
            raise ValueError(f"Pantry entry must be an object, got {type(data).__name__}")
        if not data.get("ingredientId"):
            raise ValueError("Pantry entry has no ingredientId")
        quantity = data.get("quantity", 0)
        if isinstance(quantity, bool) or not isinstance(quantity, (int, float)):
            raise ValueError(f"Invalid pantry quantity for '{data['ingredientId']}': {quantity!r}")
        return PantryItem(
            ingredient_id=str(data["ingredientId"]),
            quantity=quantity,
            unit=str(data.get("unit", "")),
            added_date=parse_timestamp(data.get("addedDate")),
        )

    def to_dict(self):
        return {
            "ingredientId": self.ingredient_id,
            "quantity": self.quantity,
            "unit": self.unit,
            "addedDate": format_timestamp(self.added_date),
        }


class Pantry:
    def __init__(self, items: Optional[List[PantryItem]] = None):
        self._items: Dict[str, PantryItem] = {}
        for item in items or []:
            self.add_item(item)

    def add_item(self, item: PantryItem):
        '''
        Adds an item to the pantry. An existing entry for the same ingredient id is replaced.
        '''
        self._items[item.ingredient_id] = item

    def remove_item(self, ingredient_id: str):
        '''
        Removes the entry for an ingredient id.
        '''
        if ingredient_id not in self._items:
            raise ValueError(f"Ingredient '{ingredient_id}' not found in pantry.")
        del self._items[ingredient_id]

    def update_quantity(self, ingredient_id: str, new_quantity: float):
        if new_quantity < 0:
            raise ValueError(f"Quantity cannot be negative: {new_quantity}")
        if ingredient_id not in self._items:
            raise ValueError(f"Ingredient '{ingredient_id}' not found in pantry.")
        self._items[ingredient_id].quantity = new_quantity

    def get(self, ingredient_id: Optional[str]) -> Optional[PantryItem]:
        if ingredient_id is None:
            return None
        return self._items.get(ingredient_id)

    def get_items(self) -> List[PantryItem]:
        return list(self._items.values())

    def __len__(self) -> int:
        return len(self._items)

    def __str__(self) -> str:
        items_str = ",\n\t".join(str(item) for item in self._items.values())
        return f"Items:\n\t{items_str}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''
        Builds a Pantry from a list of pantry entries.
        '''
        if not isinstance(data, list):
            raise ValueError("Pantry must be a list")
        return Pantry([PantryItem.from_dict(entry) for entry in data])

    def to_dict(self):
        return [item.to_dict() for item in self._items.values()]
